"""Filesystem-backed repository rooted at the workspace directory."""
from pathlib import Path
from typing import Union
import logging
import os
import shutil
import tempfile

from verbump.exceptions import FileAccessError
from verbump.repositories.base import FileRepository

logger = logging.getLogger(__name__)


class DiskRepository(FileRepository):
    """Reads and rewrites files in place under `root`, as UTF-8."""

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path

    def read(self, path: str) -> str:
        target = self.resolve(path)
        logger.debug("[DiskRepository] Reading %s", target)
        try:
            # newline="" keeps CRLF files byte-for-byte
            with target.open("r", encoding="utf-8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeError) as exc:
            raise FileAccessError(path, _reason(exc)) from exc

    def write(self, path: str, text: str) -> None:
        """
        Replaces the file through a sibling temporary file.

        The target keeps its previous content when encoding or writing fails.
        """
        target = self.resolve(path)
        if not target.is_file():
            raise FileAccessError(path, "No such file")
        logger.debug("[DiskRepository] Writing %s (%s chars)", target, len(text))
        try:
            data = text.encode("utf-8")
        except UnicodeError as exc:
            raise FileAccessError(path, _reason(exc)) from exc

        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
            ) as fh:
                tmp_name = fh.name
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as exc:
            raise FileAccessError(path, _reason(exc)) from exc
        finally:
            if tmp_name is not None:
                _discard(tmp_name)


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except OSError:
        logger.warning("[DiskRepository] Could not remove temporary file %s", tmp_name)


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
