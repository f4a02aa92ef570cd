"""
Per-batch result collection.

Each processed file contributes one (source, target, status) tuple; the report
keeps them in processing order and derives the tallies printed at the end of a
run and the process exit status.
"""
from dataclasses import dataclass, field
from pathlib import Path

from renamer.utils import logger
from renamer.utils.constants import (
    STATUS_DECLINED,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    STATUS_UNCHANGED,
)
from renamer.utils.logger import LogLevel
from renamer.utils.time_util import get_runtime_string


@dataclass
class BatchReport:
    """Ordered per-file outcomes of one batch."""
    results: list[tuple[Path, Path | None, str]] = field(default_factory=list)

    def add(self, source: Path, target: Path | None, status: str) -> None:
        self.results.append((source, target, status))

    def count(self, status: str) -> int:
        return sum(1 for _, _, s in self.results if s == status)

    @property
    def ok(self) -> int:
        return self.count(STATUS_OK)

    @property
    def dry_run(self) -> int:
        return self.count(STATUS_DRY_RUN)

    @property
    def unchanged(self) -> int:
        return self.count(STATUS_UNCHANGED)

    @property
    def skipped(self) -> int:
        return self.count(STATUS_SKIP)

    @property
    def declined(self) -> int:
        return self.count(STATUS_DECLINED)

    @property
    def failed(self) -> int:
        return self.count(STATUS_FAIL)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    @property
    def exit_code(self) -> int:
        return 1 if self.has_failures else 0

    def summary(self) -> str:
        """Human-readable tally."""
        lines = [
            "Batch Result:",
            f"  - Renamed: {self.ok}",
            f"  - Dry-run: {self.dry_run}",
            f"  - Unchanged: {self.unchanged}",
            f"  - Skipped: {self.skipped}",
            f"  - Declined: {self.declined}",
            f"  - Failed: {self.failed}",
        ]
        return "\n".join(lines)

    def log_end(self, event: str, elapsed_seconds: float) -> None:
        level = LogLevel.WARN if self.has_failures else LogLevel.INFO
        logger.log(
            event,
            level,
            total=len(self.results),
            ok=self.ok,
            dry_run=self.dry_run,
            unchanged=self.unchanged,
            skip=self.skipped,
            declined=self.declined,
            fail=self.failed,
            runtime=get_runtime_string(elapsed_seconds),
        )
