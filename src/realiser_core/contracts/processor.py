"""Executes validated requests against a shared realiser."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from realiser_core.contracts.recording import Recording
from realiser_core.contracts.schema import RealisationRequest
from realiser_core.errors import RequestSchemaError
from realiser_core.realiser import Realiser

logger = logging.getLogger(__name__)


class RequestProcessor:
    """
    Dispatches request operations.

    Args:
        realiser: Pipeline used for `realise`; built from settings by default.
        recording_dir: Directory used by `start_recording` when the request
            names none.
    """

    def __init__(self, realiser: Optional[Realiser] = None, recording_dir: Optional[str] = None):
        self.realiser = realiser or Realiser()
        self.recording_dir = recording_dir
        self.recording: Optional[Recording] = None
        self._realisers: dict[str, Realiser] = {}
        self._lock = threading.Lock()

    def process(self, request: RealisationRequest) -> str:
        """
        Run one request.

        Returns:
            The trimmed realization for `realise`, "OK" for `noop` and
            `start_recording`, and the written file path for `stop_recording`.

        Raises:
            RealisationError: if the request cannot be carried out
        """
        if request.op == "noop":
            return "OK"
        if request.op == "start_recording":
            return self._start_recording(request.recording_path)
        if request.op == "stop_recording":
            return self._stop_recording()

        element = request.to_element()
        result = self.realiser_for(request.formatter).realise(element)
        text = result.realisation.strip() if result is not None else ""

        recording = self.recording
        if recording is not None and recording.is_on and request.document is not None:
            recording.add_record(request.document.model_dump(mode="json"), text)
        return text

    def realiser_for(self, formatter: Optional[str]) -> Realiser:
        if formatter is None:
            return self.realiser
        with self._lock:
            realiser = self._realisers.get(formatter)
            if realiser is None:
                realiser = Realiser(
                    syntax=self.realiser.syntax,
                    morphology=self.realiser.morphology,
                    orthography=self.realiser.orthography,
                    formatter=formatter,
                    debug=self.realiser.debug,
                )
                self._realisers[formatter] = realiser
        return realiser

    def _start_recording(self, path: Optional[str]) -> str:
        directory = path or self.recording_dir
        if not directory:
            raise RequestSchemaError("start_recording needs a recording_path")
        with self._lock:
            if self.recording is None or not self.recording.is_on:
                self.recording = Recording(directory)
                self.recording.start()
        return "OK"

    def _stop_recording(self) -> str:
        with self._lock:
            recording = self.recording
        if recording is None:
            return "OK"
        path = recording.finish()
        return str(path) if path is not None else "OK"
