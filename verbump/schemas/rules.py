from enum import Enum
from typing import Annotated, Tuple

from pydantic import StringConstraints

from verbump.schemas.base import BaseSchema
from verbump.utils.tokenizer import replace_string_literals, replace_version_fields

# Opaque version token, compared as an exact string.
VersionLiteral = Annotated[str, StringConstraints(min_length=1)]


class PatternShape(str, Enum):
    """Textual context in which the version literal is matched."""
    MANIFEST = "manifest"  # version = "<old>"
    SOURCE = "source"  # "<old>"


class MatchMode(str, Enum):
    """How a pattern shape is located in the file text."""
    STRUCTURED = "structured"
    LITERAL = "literal"


class TargetFile(BaseSchema):
    """A file of the target list and the shape its version is matched with."""
    path: str
    shape: PatternShape


class BumpRequest(BaseSchema):
    """Old and new version literals of one invocation."""
    old: VersionLiteral
    new: VersionLiteral


class SubstitutionRule(BaseSchema):
    """Pairing of a match pattern derived from `old` with a replacement derived from `new`."""
    shape: PatternShape
    old: VersionLiteral
    new: VersionLiteral
    mode: MatchMode = MatchMode.STRUCTURED

    @property
    def pattern(self) -> str:
        if self.shape == PatternShape.MANIFEST:
            return f'version = "{self.old}"'
        return f'"{self.old}"'

    @property
    def replacement(self) -> str:
        if self.shape == PatternShape.MANIFEST:
            return f'version = "{self.new}"'
        return f'"{self.new}"'

    def apply(self, text: str) -> Tuple[str, int]:
        """Return the rewritten text and the number of replacements made."""
        if self.mode == MatchMode.LITERAL:
            count = text.count(self.pattern)
            if not count:
                return text, 0
            return text.replace(self.pattern, self.replacement), count
        if self.shape == PatternShape.MANIFEST:
            return replace_version_fields(text, self.old, self.new)
        return replace_string_literals(text, self.old, self.new)
