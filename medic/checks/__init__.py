"""
Standard Checks

Checks most programs want in their diagnostic output.
"""

from typing import List

from ..models import Check
from .environment import env_var_check, executable_check
from .platform import host_check, package_version_check, python_version_check

DISTRIBUTION = "medic-report"


def default_checks(distribution: str = DISTRIBUTION) -> List[Check]:
    """Version, Python version and host checks, in that order."""
    return [
        package_version_check(distribution),
        python_version_check(),
        host_check(),
    ]


__all__ = [
    "default_checks",
    "env_var_check",
    "executable_check",
    "host_check",
    "package_version_check",
    "python_version_check",
]
