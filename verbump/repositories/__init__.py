from .base import FileRepository
from .disk_repository import DiskRepository
from .memory_repository import MemoryRepository

__all__ = ["FileRepository", "DiskRepository", "MemoryRepository"]
