"""
Medic Models

Shared data types for diagnostic checks: severities, results and checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple


class Severity(str, Enum):
    """
    Severity levels for check results.

    Severities are totally ordered by rank, not by their string value:
    ``OK < SKIPPED < INFO < WARNING < ERROR``. A skipped check is
    informational and never outranks a warning or an error.
    """
    OK = "ok"
    SKIPPED = "skipped"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Position in the total order (higher is worse)."""
        return _SEVERITY_TABLE[self][0]

    @property
    def label(self) -> str:
        """Display label used in the report."""
        return _SEVERITY_TABLE[self][1]

    @property
    def style(self) -> str:
        """Rich style applied to the label when styling is enabled."""
        return _SEVERITY_TABLE[self][2]

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """Look up a severity by value or label, ignoring case."""
        wanted = text.strip().lower()
        for severity in cls:
            if wanted in (severity.value, severity.label.lower()):
                return severity
        raise ValueError(f"Unknown severity: {text!r}")

    # str already defines ordering, so every operator is overridden here.
    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.label


# rank, label, style
_SEVERITY_TABLE: Dict[Severity, Tuple[int, str, str]] = {
    Severity.OK: (0, "Ok", "green"),
    Severity.SKIPPED: (1, "Skipped", "dim"),
    Severity.INFO: (2, "Info", "green"),
    Severity.WARNING: (3, "Warning", "yellow"),
    Severity.ERROR: (4, "Error", "red"),
}


@dataclass(frozen=True)
class CheckResult:
    """Result of a single check."""
    severity: Severity
    message: str

    @classmethod
    def ok(cls, message: str) -> "CheckResult":
        return cls(Severity.OK, message)

    @classmethod
    def info(cls, message: str) -> "CheckResult":
        return cls(Severity.INFO, message)

    @classmethod
    def warning(cls, message: str) -> "CheckResult":
        return cls(Severity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "CheckResult":
        return cls(Severity.ERROR, message)

    @classmethod
    def skipped(cls, message: str) -> "CheckResult":
        return cls(Severity.SKIPPED, message)

    def __str__(self) -> str:
        return f"[{self.severity.label}] {self.message}"


CheckFunc = Callable[[], CheckResult]


@dataclass(frozen=True)
class Check:
    """
    A named diagnostic check.

    Args:
        name: Name shown in the report (not required to be unique)
        func: Zero-argument callable producing a CheckResult
        description: Optional longer description for listings
    """
    name: str
    func: CheckFunc
    description: str = ""

    def run(self) -> CheckResult:
        """Invoke the check function directly, without containment."""
        return self.func()
