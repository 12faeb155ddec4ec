"""A JSON document on disk, shared by the file-backed repositories.

Writes go to a temporary file that is then renamed over the target, so a
failed write leaves the previous document intact.  Every I/O or decoding
problem surfaces as RepositoryError.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from marketplace.domain.exceptions import RepositoryError


class JsonDocument:

    def __init__(self, file_path: Path, empty: Any) -> None:
        self._file_path = file_path
        self._empty = empty
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> Any:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path.name}: {exc}") from exc

    def persist(self, data: Any) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise RepositoryError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(self._empty), encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(f"Cannot create {self._file_path.name}: {exc}") from exc
