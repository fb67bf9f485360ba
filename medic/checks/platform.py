"""
Platform Checks

Report the interpreter, host system and installed package versions.
"""

import platform
from importlib import metadata

from ..models import Check, CheckResult


def python_version_check() -> Check:
    """Report the running Python version."""
    return Check(
        name="python-version",
        func=lambda: CheckResult.ok(
            f"{platform.python_implementation()} {platform.python_version()}"
        ),
        description="Python interpreter version",
    )


def _host_info() -> CheckResult:
    return CheckResult.ok(
        f"os={platform.system().lower()}, arch={platform.machine()}, info={platform.platform()}"
    )


def host_check() -> Check:
    """Report the operating system and architecture."""
    return Check(name="host", func=_host_info, description="Operating system and architecture")


def package_version_check(distribution: str, name: str = "version") -> Check:
    """
    Report the installed version of a distribution.

    Args:
        distribution: Distribution name as installed (e.g. "medic-report")
        name: Check name shown in the report
    """
    def _check() -> CheckResult:
        try:
            return CheckResult.ok(metadata.version(distribution))
        except metadata.PackageNotFoundError:
            return CheckResult.warning(f"{distribution} is not installed")

    return Check(name=name, func=_check, description=f"Installed version of {distribution}")
