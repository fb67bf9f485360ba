"""
Environment Checks

Look for programs in PATH and inspect environment variables.
"""

import os
import shutil
from typing import Optional

from ..models import Check, CheckResult, Severity


def executable_check(program: str, name: Optional[str] = None, required: bool = True) -> Check:
    """
    Check that a program can be found in PATH.

    Args:
        program: Executable name
        name: Check name (defaults to "has-<program>")
        required: Report a missing program as an error rather than info
    """
    def _check() -> CheckResult:
        path = shutil.which(program)
        if path:
            return CheckResult.ok(f"{program} found at {path}")
        severity = Severity.ERROR if required else Severity.INFO
        return CheckResult(severity, f"{program} not found in PATH")

    return Check(
        name=name or f"has-{program}",
        func=_check,
        description=f"{program} is available in PATH",
    )


def env_var_check(variable: str, name: Optional[str] = None) -> Check:
    """
    Report whether an override environment variable is set.

    Args:
        variable: Environment variable name
        name: Check name (defaults to the variable name, lowercased)
    """
    def _check() -> CheckResult:
        value = os.environ.get(variable)
        if value is None:
            return CheckResult.ok(f"{variable} is not set")
        return CheckResult.info(f"{variable} is set to {value}")

    return Check(
        name=name or variable.lower().replace("_", "-"),
        func=_check,
        description=f"Value of ${variable}",
    )
