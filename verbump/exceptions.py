"""Errors raised by the version bumper."""
from typing import Optional

from pydantic import ValidationError


class VerbumpError(Exception):
    """Base error for the tool."""


class UsageError(VerbumpError):
    """Invalid command-line input (argument count or rejected literal)."""


class FileAccessError(VerbumpError):
    """A target file could not be read or written."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"{path}: {self.reason}")


def describe_errors(exc: ValidationError) -> str:
    """Flatten pydantic validation errors into `field: message` pairs."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "input"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)
