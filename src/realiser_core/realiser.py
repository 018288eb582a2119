"""
Pipeline orchestrator.

Runs one tree through syntax -> morphology -> orthography -> formatting.
Syntax and morphology are external collaborators: they default to identity
stages, since the trees this package receives are already realized
grammatically and carry inflected word forms.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from realiser_core.format import Formatter, create_formatter
from realiser_core.framework.categories import DocumentCategory
from realiser_core.framework.elements import DocumentElement, Element
from realiser_core.framework.features import Feature
from realiser_core.orthography import OrthographyProcessor
from realiser_core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

Stage = Callable[[Element], Optional[Element]]


def _identity(element: Element) -> Element:
    return element


class Realiser:
    """
    Realizes element trees into text.

    One instance can serve concurrent calls: the only mutable formatting
    state, the enumerated-list counter, is created per call.

    Args:
        syntax: Stage resolving phrase structure; identity by default.
        morphology: Stage inflecting words; identity by default.
        orthography: Punctuation stage; built from settings by default.
        formatter: A renderer, a renderer name ("text", "html", "none"),
            or None to use the configured one.
        debug: Capture a tree dump after every stage; from settings by default.
        settings: Settings to read defaults from; the global ones by default.
    """

    def __init__(
        self,
        syntax: Optional[Stage] = None,
        morphology: Optional[Stage] = None,
        orthography: Optional[OrthographyProcessor] = None,
        formatter: Union[Formatter, str, None] = None,
        debug: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.syntax: Stage = syntax or _identity
        self.morphology: Stage = morphology or _identity
        self.orthography = orthography or OrthographyProcessor(
            comma_sep_premodifiers=settings.comma_sep_premodifiers,
            comma_sep_cuephrase=settings.comma_sep_cuephrase,
        )
        if formatter is None:
            formatter = settings.formatter
        self.formatter: Optional[Formatter] = (
            create_formatter(formatter) if isinstance(formatter, str) else formatter
        )
        self.debug = settings.debug if debug is None else debug

    # =========================================================================
    # Orthography options
    # =========================================================================

    @property
    def comma_sep_premodifiers(self) -> bool:
        return self.orthography.comma_sep_premodifiers

    @comma_sep_premodifiers.setter
    def comma_sep_premodifiers(self, value: bool) -> None:
        self.orthography.comma_sep_premodifiers = value

    @property
    def comma_sep_cuephrase(self) -> bool:
        return self.orthography.comma_sep_cuephrase

    @comma_sep_cuephrase.setter
    def comma_sep_cuephrase(self, value: bool) -> None:
        self.orthography.comma_sep_cuephrase = value

    # =========================================================================
    # Realization
    # =========================================================================

    def realise(self, element: Element) -> Optional[Element]:
        """
        Run the full pipeline over one tree.

        Returns:
            The formatted text as a canned-text element, the orthography
            output when no formatter is set, or None if nothing was realized.

        Raises:
            MalformedTreeError: if a stage meets a node it cannot process
        """
        dumps: list[str] = []
        self._capture(dumps, "INITIAL TREE", element)

        post_syntax = self.syntax(element)
        self._capture(dumps, "POST-SYNTAX TREE", post_syntax)

        post_morphology = self.morphology(post_syntax) if post_syntax is not None else None
        self._capture(dumps, "POST-MORPHOLOGY TREE", post_morphology)

        post_orthography = self.orthography.realise(post_morphology)
        self._capture(dumps, "POST-ORTHOGRAPHY TREE", post_orthography)

        if self.formatter is not None:
            result = self.formatter.realise(post_orthography)
            self._capture(dumps, "POST-FORMATTER TREE", result)
        else:
            result = post_orthography

        if self.debug and result is not None:
            result.set_feature(Feature.DEBUG, "\n".join(dumps))
        return result

    def realise_all(self, elements: list[Element]) -> list[Optional[Element]]:
        return [self.realise(element) for element in elements]

    def realise_sentence(self, element: Element) -> Optional[str]:
        """
        Realize a bare phrase as a one-sentence document and return its text.

        Document elements are realized as they are.
        """
        if not isinstance(element, DocumentElement):
            element = DocumentElement(DocumentCategory.SENTENCE, components=[element])
        realised = self.realise(element)
        if realised is None:
            return None
        return realised.realisation

    def _capture(self, dumps: list[str], stage: str, element: Optional[Element]) -> None:
        if not self.debug:
            return
        dump = element.print_tree() if element is not None else "None\n"
        dumps.append(f"{stage}\n{dump}")
        logger.debug("%s\n%s", stage, dump)
