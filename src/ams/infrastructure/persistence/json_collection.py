"""One JSON file holding a list of records, loaded into memory.

A collection is read once when a unit of work begins.  Repositories work
on ``records`` in memory; nothing reaches the disk until the unit of
work commits, which writes each changed file through a temp file and
``os.replace`` so a file is never left half-written.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()
        self._loaded_text = self._file_path.read_text(encoding="utf-8")
        self.records: list[dict[str, Any]] = json.loads(self._loaded_text)
        self.dirty = False

    @property
    def name(self) -> str:
        return self._file_path.stem

    # --- Record access --------------------------------------------------------

    def find(self, key: str, value: Any) -> dict[str, Any] | None:
        for raw in self.records:
            if raw[key] == value:
                return raw
        return None

    def upsert(self, key: str, record: dict[str, Any]) -> None:
        """Replace the record with the same *key*, otherwise append."""
        for i, raw in enumerate(self.records):
            if raw[key] == record[key]:
                self.records[i] = record
                break
        else:
            self.records.append(record)
        self.dirty = True

    def remove(self, key: str, value: Any) -> bool:
        for i, raw in enumerate(self.records):
            if raw[key] == value:
                del self.records[i]
                self.dirty = True
                return True
        return False

    # --- File helpers ---------------------------------------------------------

    def stage(self) -> Path | None:
        """Write pending changes to a temp file next to the collection.

        Returns the temp path, or None when there is nothing to write.
        """
        if not self.dirty:
            return None
        fd, temp_path = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self.name}_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.records, f, indent=2)
                f.write("\n")
        except Exception:
            discard_temp(Path(temp_path))
            raise
        return Path(temp_path)

    def publish(self, staged: Path) -> None:
        """Move a staged temp file over the collection file."""
        os.replace(staged, self._file_path)
        self.dirty = False

    def restore(self) -> None:
        """Put back the file contents read when the collection was loaded."""
        self._file_path.write_text(self._loaded_text, encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def discard_temp(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass
