"""
Version bump service.

Rewrites the version literal in every file of a target list, through a
FileRepository so the same logic runs against disk or in-memory files.

Notes:
- Best-effort sequential by default: a file that cannot be read or written
  is reported and the remaining files are still processed.
- Atomic batch mode computes every rewrite first and writes nothing unless
  all targets were read; a failed write rolls back the files already written.
- A file without a match is never written.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Set, Tuple
import logging

from pydantic import ValidationError

from verbump.exceptions import FileAccessError, UsageError, describe_errors
from verbump.repositories.base import FileRepository
from verbump.schemas import (
    BumpReport,
    BumpRequest,
    FileOutcome,
    MatchMode,
    SubstitutionRule,
    TargetFile,
)
from verbump.targets import DEFAULT_TARGETS

logger = logging.getLogger(__name__)


class VersionBumper:
    """Replaces an old version literal by a new one across the target files."""

    def __init__(
        self,
        repository: FileRepository,
        targets: Sequence[TargetFile] = DEFAULT_TARGETS,
        mode: MatchMode = MatchMode.STRUCTURED,
        atomic: bool = False,
        dry_run: bool = False,
    ) -> None:
        self.repository = repository
        self.targets: Tuple[TargetFile, ...] = tuple(targets)
        self.mode = MatchMode(mode)
        self.atomic = atomic
        self.dry_run = dry_run

    def rules_for(self, target: TargetFile, request: BumpRequest) -> List[SubstitutionRule]:
        return [SubstitutionRule(shape=target.shape, old=request.old, new=request.new, mode=self.mode)]

    def bump(self, old: str, new: str) -> BumpReport:
        """Rewrite every target file, returning one outcome per file in list order."""
        try:
            request = BumpRequest(old=old, new=new)
        except ValidationError as exc:
            raise UsageError(describe_errors(exc)) from exc

        logger.info(
            "[VersionBumper] Bumping %s -> %s in %s files (mode=%s atomic=%s dry_run=%s)",
            request.old,
            request.new,
            len(self.targets),
            self.mode.value,
            self.atomic,
            self.dry_run,
        )
        if request.old == request.new:
            logger.warning("[VersionBumper] Old and new versions are identical, nothing to do")
            outcomes = [FileOutcome(path=t.path, shape=t.shape) for t in self.targets]
        elif self.atomic:
            outcomes = self._bump_atomic(request)
        else:
            outcomes = self._bump_sequential(request)

        report = BumpReport(
            old=request.old,
            new=request.new,
            atomic=self.atomic,
            dry_run=self.dry_run,
            outcomes=outcomes,
        )
        for outcome in report.outcomes:
            _log_outcome(outcome, self.dry_run)
        logger.info(
            "[VersionBumper] Done: %s changed, %s failed",
            len(report.changed_files),
            len(report.failed_files),
        )
        return report

    def _rewrite(self, target: TargetFile, request: BumpRequest, text: str) -> Tuple[str, int]:
        total = 0
        for rule in self.rules_for(target, request):
            text, count = rule.apply(text)
            total += count
        return text, total

    def _bump_sequential(self, request: BumpRequest) -> List[FileOutcome]:
        outcomes: List[FileOutcome] = []
        for target in self.targets:
            try:
                original = self.repository.read(target.path)
                updated, count = self._rewrite(target, request, original)
                changed = updated != original
                written = False
                if changed and not self.dry_run:
                    self.repository.write(target.path, updated)
                    written = True
            except FileAccessError as exc:
                outcomes.append(FileOutcome(path=target.path, shape=target.shape, error=exc.reason))
                continue
            outcomes.append(
                FileOutcome(
                    path=target.path,
                    shape=target.shape,
                    replacements=count,
                    changed=changed,
                    written=written,
                )
            )
        return outcomes

    def _bump_atomic(self, request: BumpRequest) -> List[FileOutcome]:
        originals: Dict[str, str] = {}
        staged: Dict[str, Tuple[str, int]] = {}
        errors: Dict[str, str] = {}
        for target in self.targets:
            try:
                originals[target.path] = self.repository.read(target.path)
            except FileAccessError as exc:
                errors[target.path] = exc.reason
                continue
            staged[target.path] = self._rewrite(target, request, originals[target.path])

        if errors:
            logger.error(
                "[VersionBumper] %s of %s files unreadable, nothing written",
                len(errors),
                len(self.targets),
            )
            return self._atomic_outcomes(originals, staged, errors, written=set())

        written: List[str] = []
        if not self.dry_run:
            for target in self.targets:
                updated, _ = staged[target.path]
                if updated == originals[target.path]:
                    continue
                try:
                    self.repository.write(target.path, updated)
                except FileAccessError as exc:
                    errors[target.path] = exc.reason
                    self._rollback(written, originals)
                    written = []
                    break
                written.append(target.path)
        return self._atomic_outcomes(originals, staged, errors, written=set(written))

    def _rollback(self, written: List[str], originals: Dict[str, str]) -> None:
        for path in reversed(written):
            try:
                self.repository.write(path, originals[path])
                logger.warning("[VersionBumper] Restored %s", path)
            except FileAccessError:
                logger.exception("[VersionBumper] Failed to restore %s", path)

    def _atomic_outcomes(
        self,
        originals: Dict[str, str],
        staged: Dict[str, Tuple[str, int]],
        errors: Dict[str, str],
        written: Set[str],
    ) -> List[FileOutcome]:
        outcomes: List[FileOutcome] = []
        for target in self.targets:
            if target.path in errors:
                outcomes.append(FileOutcome(path=target.path, shape=target.shape, error=errors[target.path]))
                continue
            updated, count = staged[target.path]
            outcomes.append(
                FileOutcome(
                    path=target.path,
                    shape=target.shape,
                    replacements=count,
                    changed=updated != originals[target.path],
                    written=target.path in written,
                )
            )
        return outcomes


def _log_outcome(outcome: FileOutcome, dry_run: bool) -> None:
    if outcome.failed:
        logger.error("[VersionBumper] %s: %s", outcome.path, outcome.error)
    elif outcome.written:
        logger.info("[VersionBumper] Updated %s (%s replacements)", outcome.path, outcome.replacements)
    elif outcome.changed:
        action = "Would update" if dry_run else "Left untouched"
        logger.info("[VersionBumper] %s %s (%s replacements)", action, outcome.path, outcome.replacements)
    else:
        logger.debug("[VersionBumper] %s unchanged", outcome.path)
