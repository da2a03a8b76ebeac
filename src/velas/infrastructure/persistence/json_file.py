"""A JSON document on disk, shared by the JSON repositories.

Writes go to a temporary file that replaces the target in one step, so a
crash never leaves a half-written document. A per-path lock serialises
read-modify-write cycles within the process.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


class JsonFile:

    def __init__(self, file_path: Path, empty: Any) -> None:
        self.path = file_path
        self._empty = empty
        with _LOCKS_GUARD:
            self.lock = _LOCKS.setdefault(file_path.resolve(), threading.RLock())
        self._ensure_file()

    def read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        os.replace(tmp, self.path)

    def snapshot(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def restore(self, text: str) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, self.path)

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.write(self._empty)
