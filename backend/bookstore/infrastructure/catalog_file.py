"""Catalog File: the whole catalog as one pretty-printed UTF-8 JSON array on disk.

Invariants:
    - load() fails with StorageIOError on missing/unreadable files and with
      StorageFormatError on content that is not a JSON array of books
    - Decoding is strict: no coercion, no defaults, no unknown keys, so
      save(load()) changes nothing but whitespace
    - save() writes a temp file in the same directory, fsyncs it and renames it
      over the target, so readers see either the old or the new catalog
    - The temp file never outlives a failed save
    - The path comes from configuration; nothing here is module-level state
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from bookstore.core.errors import StorageFormatError, StorageIOError
from bookstore.core.records import Book

logger = logging.getLogger(__name__)

_CATALOG = TypeAdapter(list[Book])
_DEFAULT_MODE = 0o644


class CatalogFile:
    """Reads and atomically rewrites the catalog file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[Book]:
        """Read and decode the full catalog."""
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read catalog file {self.path}: {e}")
            raise StorageIOError(str(e), "read") from e
        try:
            return _CATALOG.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.error(
                f"Catalog file {self.path} is corrupt: {e.error_count()} error(s)",
            )
            raise StorageFormatError(_first_error(e)) from e

    def save(self, books: list[Book]) -> None:
        """Serialize the full catalog and swap it into place."""
        payload = _CATALOG.dump_json(books, indent=2)
        mode = self._file_mode()
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
        except OSError as e:
            logger.error(f"Cannot create temp file next to {self.path}: {e}")
            raise StorageIOError(str(e), "write") from e
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error(f"Cannot write catalog file {self.path}: {e}")
            raise StorageIOError(str(e), "write") from e

    def ensure_exists(self) -> bool:
        """Create an empty catalog if the file is absent. Returns True if created."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(str(e), "create") from e
        self.save([])
        logger.info(f"Created empty catalog at {self.path}")
        return True

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except OSError:
            return _DEFAULT_MODE


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    where = ".".join(str(p) for p in err["loc"])
    return f"{where}: {err['msg']}" if where else err["msg"]
