from typing import Dict, Iterable, List, Optional

from verbump.exceptions import FileAccessError
from verbump.repositories.base import FileRepository


class MemoryRepository(FileRepository):
    """
    Dict-backed repository for synthetic files.

    Paths listed in `read_only` can be read but every write to them fails,
    like a file without write permission.
    """

    def __init__(self, files: Optional[Dict[str, str]] = None, read_only: Iterable[str] = ()):
        self.files: Dict[str, str] = dict(files or {})
        self.read_only = set(read_only)
        # Paths in the order they were written
        self.writes: List[str] = []

    def read(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileAccessError(path, "No such file") from None

    def write(self, path: str, text: str) -> None:
        if path not in self.files:
            raise FileAccessError(path, "No such file")
        if path in self.read_only:
            raise FileAccessError(path, "Permission denied")
        self.files[path] = text
        self.writes.append(path)
