"""
Command-line entry point.

Usage:
  verbump old_version new_version

Exit codes: 0 when every target was processed, 1 when a target failed,
2 on a usage or configuration error.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import logging
import sys

from pydantic import ValidationError

from verbump.config import get_settings
from verbump.exceptions import UsageError, describe_errors
from verbump.repositories import DiskRepository
from verbump.services import VersionBumper
from verbump.version import read_version

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

logger = logging.getLogger("verbump")


def print_usage(prog: str) -> None:
    print(f"Usage: {prog} old_version new_version", file=sys.stderr)
    print(f"Example: {prog} 1.2.0 1.3.0", file=sys.stderr)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    prog = Path(argv[0]).name if argv else "verbump"
    args = argv[1:]
    if len(args) != 2:
        print_usage(prog)
        return EXIT_USAGE

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"{prog}: invalid configuration: {describe_errors(exc)}", file=sys.stderr)
        return EXIT_USAGE
    configure_logging(settings.log_level)
    logger.info("verbump %s - root=%s", read_version(), settings.root.resolve())

    bumper = VersionBumper(
        DiskRepository(settings.root),
        mode=settings.mode,
        atomic=settings.atomic,
        dry_run=settings.dry_run,
    )
    try:
        report = bumper.bump(args[0], args[1])
    except UsageError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        print_usage(prog)
        return EXIT_USAGE
    return EXIT_OK if report.ok else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
