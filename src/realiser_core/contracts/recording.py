"""
Recording of realization requests for later regression testing.

While recording is on, every realized document is kept with its output as a
numbered record (TEST_1, TEST_2, ...). Stopping writes the records to a JSON
file in the recording directory.
"""

from __future__ import annotations

import logging
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RecordedRealisation(BaseModel):
    name: str
    document: dict[str, Any]
    realisation: str


class RecordSet(BaseModel):
    records: list[RecordedRealisation] = Field(default_factory=list)


class Recording:
    """Collects records between `start()` and `finish()`."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.path: Optional[Path] = None
        self.records = RecordSet()
        self._on = False
        self._lock = threading.Lock()

    @property
    def is_on(self) -> bool:
        return self._on

    def start(self) -> Path:
        """Create the recording file and begin collecting records."""
        with self._lock:
            if self._on and self.path is not None:
                return self.path
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                prefix="realiser", suffix=".json", dir=self.directory, delete=False
            ) as handle:
                self.path = Path(handle.name)
            self.records = RecordSet()
            self._on = True
        logger.info("Recording realisations to %s", self.path)
        return self.path

    def add_record(self, document: dict[str, Any], realisation: str) -> None:
        with self._lock:
            if not self._on:
                return
            name = f"TEST_{len(self.records.records) + 1}"
            self.records.records.append(
                RecordedRealisation(name=name, document=document, realisation=realisation)
            )

    def finish(self) -> Optional[Path]:
        """Write the collected records and stop recording."""
        with self._lock:
            if not self._on or self.path is None:
                return None
            self._on = False
            self.path.write_text(self.records.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Wrote %d recorded realisations to %s", len(self.records.records), self.path)
        return self.path


def load_recording(path: str | Path) -> RecordSet:
    """Read a recording written by `Recording.finish()`."""
    return RecordSet.model_validate_json(Path(path).read_text(encoding="utf-8"))
