from typing import List, Optional

from pydantic import Field

from verbump.schemas.base import BaseSchema
from verbump.schemas.rules import PatternShape


class FileOutcome(BaseSchema):
    """Result of processing one target file."""
    path: str
    shape: PatternShape
    replacements: int = 0
    # True when the new content differs from the old one
    changed: bool = False
    written: bool = False
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class BumpReport(BaseSchema):
    """Per-file outcomes of one bump, in target list order."""
    old: str
    new: str
    atomic: bool = False
    dry_run: bool = False
    outcomes: List[FileOutcome] = Field(default_factory=list)

    @property
    def changed_files(self) -> List[str]:
        return [outcome.path for outcome in self.outcomes if outcome.changed]

    @property
    def failed_files(self) -> List[str]:
        return [outcome.path for outcome in self.outcomes if outcome.failed]

    @property
    def ok(self) -> bool:
        return not self.failed_files
