"""
Medic Checker

Runs registered checks in order and aggregates their results into a report.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .config.models import MedicConfig
from .models import Check, CheckFunc, CheckResult, Severity

logger = logging.getLogger(__name__)

SKIPPED_BY_CONFIG = "skipped by configuration"


def run_check(check: Check) -> CheckResult:
    """
    Run a single check, containing any failure it raises.

    A check that raises, or returns something other than a result,
    is reported as an ``Error`` result instead of aborting the run.

    Args:
        check: Check to run

    Returns:
        The check's result, or an error result describing the failure
    """
    logger.debug("Running check %r", check.name)
    try:
        outcome = check.func()
    except Exception as e:
        logger.warning("Check %r raised %s", check.name, type(e).__name__, exc_info=True)
        detail = str(e)
        message = f"check raised {type(e).__name__}"
        if detail:
            message = f"{message}: {detail}"
        return CheckResult(Severity.ERROR, message)

    if isinstance(outcome, CheckResult):
        return outcome

    if (
        isinstance(outcome, tuple)
        and len(outcome) == 2
        and isinstance(outcome[0], Severity)
        and isinstance(outcome[1], str)
    ):
        return CheckResult(outcome[0], outcome[1])

    logger.warning("Check %r returned %s", check.name, type(outcome).__name__)
    return CheckResult(
        Severity.ERROR,
        f"check returned {type(outcome).__name__} instead of a CheckResult",
    )


@dataclass(frozen=True)
class ReportEntry:
    """One row of a report."""
    name: str
    result: CheckResult

    @property
    def severity(self) -> Severity:
        return self.result.severity

    @property
    def message(self) -> str:
        return self.result.message


@dataclass(frozen=True)
class Report:
    """Results of one diagnostic run, in registration order."""
    entries: Tuple[ReportEntry, ...] = ()

    @classmethod
    def build(cls, checks: Iterable[Check]) -> "Report":
        """
        Run every check in order and collect the results.

        Args:
            checks: Checks to run, in display order

        Returns:
            Report with one entry per check
        """
        entries = [ReportEntry(check.name, run_check(check)) for check in checks]
        report = cls(tuple(entries))
        logger.debug("Ran %d checks, overall %s", len(report), report.overall_severity.label)
        return report

    @property
    def overall_severity(self) -> Severity:
        """Worst severity among all entries (``OK`` for an empty report)."""
        return max((entry.severity for entry in self.entries), default=Severity.OK)

    @property
    def passed(self) -> bool:
        """True if no entry is an error."""
        return self.overall_severity < Severity.ERROR

    @property
    def errors(self) -> List[ReportEntry]:
        """Get all error entries."""
        return [e for e in self.entries if e.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ReportEntry]:
        """Get all warning entries."""
        return [e for e in self.entries if e.severity == Severity.WARNING]

    def count(self, severity: Severity) -> int:
        """Number of entries with the given severity."""
        return sum(1 for e in self.entries if e.severity == severity)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ReportEntry]:
        return iter(self.entries)


def exit_code(report: Report, fail_on: Severity = Severity.ERROR) -> int:
    """Process exit code for a report: 1 once the overall severity reaches ``fail_on``."""
    return 1 if report.overall_severity >= fail_on else 0


class MedicChecker:
    """
    Registry of checks for a host program.

    Checks run in the order they were registered. Names listed in the
    configuration's ``skip`` list are reported as skipped without running.
    """

    def __init__(
        self,
        checks: Optional[Iterable[Check]] = None,
        config: Optional[MedicConfig] = None,
    ):
        """
        Initialize the checker.

        Args:
            checks: Initial checks, in display order
            config: Optional configuration (skip list)
        """
        self._checks: List[Check] = list(checks or [])
        self.config = config or MedicConfig()

    @property
    def checks(self) -> List[Check]:
        """Registered checks, in order."""
        return list(self._checks)

    def add(self, check: Check) -> Check:
        """Append an existing check."""
        self._checks.append(check)
        return check

    def register(self, name: str, func: CheckFunc, description: str = "") -> Check:
        """Create and append a check from a function."""
        return self.add(Check(name=name, func=func, description=description))

    def check(self, name: str, description: str = "") -> Callable[[CheckFunc], CheckFunc]:
        """
        Decorator registering a function as a check.

        Example:
            @checker.check("config-file")
            def config_file():
                return CheckResult.ok("found")
        """
        def decorator(func: CheckFunc) -> CheckFunc:
            self.register(name, func, description or (func.__doc__ or "").strip())
            return func
        return decorator

    def run_all(self) -> Report:
        """
        Run all registered checks.

        Returns:
            Report with all check results
        """
        skip = set(self.config.skip)
        planned = [
            Check(c.name, lambda: CheckResult.skipped(SKIPPED_BY_CONFIG), c.description)
            if c.name in skip else c
            for c in self._checks
        ]
        return Report.build(planned)

    def run_check(self, check_name: str) -> Optional[CheckResult]:
        """
        Run a specific check by name.

        Args:
            check_name: Name of the check to run

        Returns:
            CheckResult or None if check not found
        """
        for check in self._checks:
            if check.name == check_name:
                return run_check(check)
        return None
