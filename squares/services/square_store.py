"""
File-backed square storage for the Squares web service

What this file does:
- Keeps the ordered list of squares in memory
- Loads it once from a JSON file at startup (missing or corrupt file -> empty list)
- Rewrites the whole file after every change, through a temp file + os.replace
- Serializes all writers behind one lock; readers just copy the list

Notes:
- Saving is best-effort: a failed write after a create is logged and the square stays
  in memory. The next successful save brings the file back in line.
- Clearing is strict: a failed write raises so the API can report it.
"""

import json
import logging
import os
import stat
import tempfile
import threading
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..models import Square
from .spiral import new_square

logger = logging.getLogger(__name__)

_square_list = TypeAdapter(List[Square])

_UMASK = os.umask(0)
os.umask(_UMASK)


def _target_mode(path: str) -> int:
    """Mode the replaced file should keep: the existing one, else what open() would give under the umask."""
    if os.path.exists(path):
        return stat.S_IMODE(os.stat(path).st_mode)
    return 0o666 & ~_UMASK


def _atomic_write(path: str, text: str) -> None:
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".squares.", suffix=".tmp", dir=directory)
    try:
        os.chmod(tmp, _target_mode(path))
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


class SquareStore:
    """In-memory list of squares mirrored to a single JSON file."""

    def __init__(self, path: str):
        self.path = path
        self._squares: List[Square] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._squares)

    @property
    def squares(self) -> List[Square]:
        """Snapshot of the current list. Lock-free; may be ahead of the file."""
        return list(self._squares)

    def load(self) -> List[Square]:
        """Replace the in-memory list with the file contents. Never raises."""
        squares: List[Square] = []
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as handle:
                    squares = _square_list.validate_json(handle.read())
            except (OSError, ValueError, ValidationError) as exc:
                logger.warning("Could not read squares from %s, starting empty: %s", self.path, exc)
                squares = []
        self._squares = squares
        logger.info("Loaded %d squares from %s", len(squares), self.path)
        return list(squares)

    def append(self, square: Square) -> None:
        with self._lock:
            self._squares.append(square)
            self._save_locked(self._squares)

    def create_next(self) -> Square:
        """Build the square that continues the spiral, store it and persist the list."""
        with self._lock:
            previous = self._squares[-1] if self._squares else None
            square = new_square(previous)
            self._squares.append(square)
            self._save_locked(self._squares)
        return square

    def clear(self) -> None:
        """Drop every square and write an empty array. Raises OSError if the write fails."""
        with self._lock:
            self._squares.clear()
            try:
                _atomic_write(self.path, "[]")
            except OSError:
                logger.exception("Error clearing squares in %s", self.path)
                raise

    def save(self, squares: Optional[List[Square]] = None) -> None:
        with self._lock:
            self._save_locked(self._squares if squares is None else squares)

    def _save_locked(self, squares: List[Square]) -> None:
        try:
            payload = json.dumps(_square_list.dump_python(squares, mode="json"), indent=2)
            _atomic_write(self.path, payload + "\n")
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving squares to %s", self.path)
            return
        logger.debug("Saved %d squares to %s", len(squares), self.path)
