from .bump_service import VersionBumper

__all__ = ["VersionBumper"]
