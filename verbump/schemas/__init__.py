from .base import BaseSchema
from .rules import BumpRequest, MatchMode, PatternShape, SubstitutionRule, TargetFile, VersionLiteral
from .reports import BumpReport, FileOutcome

__all__ = [
    "BaseSchema",
    "BumpRequest", "MatchMode", "PatternShape", "SubstitutionRule", "TargetFile", "VersionLiteral",
    "BumpReport", "FileOutcome",
]
