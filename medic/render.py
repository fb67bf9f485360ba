"""
Report Renderer

Formats a report as an aligned table with an optional summary line:

    RESULT   CHECK    MESSAGE
    Ok       version  1.2.3
    Warning  network  slow response
    Error    config   missing file

    Error: Error(s) found, investigation required
"""

import logging
import sys
from typing import Iterable, List, Optional, TextIO, Union

from rich.color import ColorSystem
from rich.style import Style

from .checker import MedicChecker, Report
from .config.models import ColorChoice
from .errors import ReportWriteError
from .models import Check, Severity
from .terminal import styling_enabled as detect_styling

logger = logging.getLogger(__name__)

RESULT_HEADER = "RESULT"
CHECK_HEADER = "CHECK"
MESSAGE_HEADER = "MESSAGE"
COLUMN_GAP = "  "
HEADER_STYLE = "bold"

SUMMARY_TEXT = {
    Severity.ERROR: "Error(s) found, investigation required",
    Severity.WARNING: "Warning(s) found, consider investigating (especially if you have issues)",
}


def summary_tier(severity: Severity) -> Optional[Severity]:
    """Severity whose summary applies to an overall severity, if any."""
    if severity >= Severity.ERROR:
        return Severity.ERROR
    if severity >= Severity.WARNING:
        return Severity.WARNING
    return None


def summary_line(severity: Severity) -> Optional[str]:
    """Plain summary line for an overall severity (None below Warning)."""
    tier = summary_tier(severity)
    if tier is None:
        return None
    return f"{tier.label}: {SUMMARY_TEXT[tier]}"


def _styled(text: str, style: str, enabled: bool) -> str:
    if not enabled:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def build_lines(report: Report, styling_enabled: bool = False) -> List[str]:
    """
    Build the report lines.

    Column widths are computed once over the whole report; each entry
    then becomes one line (continuation lines of multi-line messages
    are indented to the message column). Only the header, the severity
    labels and the summary word are styled; names and messages are
    emitted byte for byte.

    Args:
        report: Report to format
        styling_enabled: Apply severity styles

    Returns:
        Lines of the report, without trailing newlines
    """
    status_width = max([len(RESULT_HEADER)] + [len(e.severity.label) for e in report])
    name_width = max([len(CHECK_HEADER)] + [len(e.name) for e in report])
    indent = " " * (status_width + name_width + 2 * len(COLUMN_GAP))

    header = (
        RESULT_HEADER.ljust(status_width) + COLUMN_GAP
        + CHECK_HEADER.ljust(name_width) + COLUMN_GAP
        + MESSAGE_HEADER
    )
    lines = [_styled(header, HEADER_STYLE, styling_enabled)]

    for entry in report:
        label = entry.severity.label
        lines.append(
            _styled(label, entry.severity.style, styling_enabled)
            + " " * (status_width - len(label)) + COLUMN_GAP
            + entry.name.ljust(name_width) + COLUMN_GAP
            + entry.message.replace("\n", "\n" + indent)
        )

    tier = summary_tier(report.overall_severity)
    if tier is not None:
        lines.append("")
        lines.append(f"{_styled(tier.label, tier.style, styling_enabled)}: {SUMMARY_TEXT[tier]}")

    return lines


def render(report: Report, styling_enabled: bool = False) -> str:
    """
    Render a report to text.

    Args:
        report: Report to render
        styling_enabled: Emit ANSI styling; plain text otherwise

    Returns:
        The complete report, newline terminated
    """
    return "".join(f"{line}\n" for line in build_lines(report, styling_enabled))


def write_report(report: Report, output: TextIO, styling_enabled: bool = False) -> None:
    """
    Render a report and write it to a sink in one write.

    Raises:
        ReportWriteError: If the sink rejects the write
    """
    text = render(report, styling_enabled)
    try:
        output.write(text)
        if hasattr(output, "flush"):
            output.flush()
    except OSError as e:
        raise ReportWriteError(f"Cannot write report: {e}") from e


def diagnose(
    checks: Union[MedicChecker, Iterable[Check]],
    output: Optional[TextIO] = None,
    color: ColorChoice = ColorChoice.AUTO,
) -> Report:
    """
    Run checks and write the report.

    Args:
        checks: A checker, or checks in display order
        output: Sink to write to (defaults to stdout)
        color: Color mode, resolved against the sink

    Returns:
        The report, so the caller can pick an exit code
    """
    if output is None:
        output = sys.stdout
    if isinstance(checks, MedicChecker):
        report = checks.run_all()
    else:
        report = Report.build(checks)
    write_report(report, output, detect_styling(color, output))
    logger.debug("Report written, overall %s", report.overall_severity.label)
    return report
