"""Unit tests for report rendering."""

from __future__ import annotations

import io
import re

import pytest

from medic.checker import Report
from medic.config import ColorChoice
from medic.errors import ReportWriteError
from medic.models import Check, CheckResult, Severity
from medic.render import diagnose, render, summary_line, write_report

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def _report(*rows: tuple[str, Severity, str]) -> Report:
    return Report.build([
        Check(name, lambda s=severity, m=message: CheckResult(s, m))
        for name, severity, message in rows
    ])


@pytest.fixture
def mixed_report() -> Report:
    return _report(
        ("version", Severity.OK, "1.2.3"),
        ("network", Severity.WARNING, "slow response"),
        ("config", Severity.ERROR, "missing file"),
    )


class TestPlainRendering:
    """Tests for unstyled output."""

    def test_end_to_end_table(self, mixed_report: Report) -> None:
        """Test header, rows in order, blank line and summary."""
        # Name column is the widest name plus a two-space gap; see DESIGN.md
        # "Column widths" for why this is one space narrower than the brief's example.
        assert render(mixed_report, styling_enabled=False) == (
            "RESULT   CHECK    MESSAGE\n"
            "Ok       version  1.2.3\n"
            "Warning  network  slow response\n"
            "Error    config   missing file\n"
            "\n"
            "Error: Error(s) found, investigation required\n"
        )

    def test_rows_are_not_sorted_by_severity(self) -> None:
        report = _report(
            ("b", Severity.ERROR, "x"),
            ("a", Severity.OK, "y"),
        )
        lines = render(report).splitlines()
        assert lines[1].startswith("Error")
        assert lines[2].startswith("Ok")

    def test_message_column_alignment(self) -> None:
        """Test that messages start at the same column for short and long names."""
        report = _report(
            ("a", Severity.OK, "first"),
            ("longname", Severity.OK, "second"),
        )
        lines = render(report).splitlines()
        assert lines[1].index("first") == lines[2].index("second")
        assert lines[1] == "Ok      a         first"
        assert lines[2] == "Ok      longname  second"

    def test_warning_summary(self) -> None:
        report = _report(("net", Severity.WARNING, "slow"), ("v", Severity.INFO, "1"))
        lines = render(report).splitlines()
        assert lines[-2] == ""
        assert lines[-1] == (
            "Warning: Warning(s) found, consider investigating (especially if you have issues)"
        )

    @pytest.mark.parametrize("severity", [Severity.OK, Severity.SKIPPED, Severity.INFO])
    def test_no_summary_below_warning(self, severity: Severity) -> None:
        report = _report(("only", severity, "msg"))
        width = max(len("RESULT"), len(severity.label))
        assert render(report).splitlines() == [
            f"{'RESULT':<{width}}  CHECK  MESSAGE",
            f"{severity.label:<{width}}  only   msg",
        ]

    def test_empty_report_has_header_only(self) -> None:
        assert render(Report.build([])) == "RESULT  CHECK  MESSAGE\n"

    def test_multiline_message_is_indented(self) -> None:
        """Test continuation lines start at the message column."""
        report = _report(
            ("Check 1", Severity.OK, "All good"),
            ("Check 2", Severity.WARNING, "Not so good\nNot at all"),
        )
        assert render(report) == (
            "RESULT   CHECK    MESSAGE\n"
            "Ok       Check 1  All good\n"
            "Warning  Check 2  Not so good\n"
            "                  Not at all\n"
            "\n"
            "Warning: Warning(s) found, consider investigating (especially if you have issues)\n"
        )

    def test_long_messages_are_not_wrapped(self) -> None:
        message = "x" * 300
        report = _report(("long", Severity.OK, message))
        assert render(report).splitlines()[1].endswith(message)

    @pytest.mark.parametrize("severity", list(Severity))
    def test_no_escape_sequences(self, severity: Severity) -> None:
        """Test that unstyled output never contains escape codes."""
        report = _report(("first", severity, "msg"), ("second", Severity.ERROR, "bad"))
        assert "\x1b" not in render(report, styling_enabled=False)
        single = _report(("only", severity, "msg"))
        assert "\x1b" not in render(single, styling_enabled=False)

    @pytest.mark.parametrize("message", ["a\rb", "bell\a", "back\bspace", "v\vf\f", "a\tb"])
    def test_control_characters_are_preserved(self, message: str) -> None:
        """Test that messages are emitted byte for byte."""
        report = _report(("c", Severity.OK, message))
        assert render(report) == f"RESULT  CHECK  MESSAGE\nOk      c      {message}\n"

    def test_crlf_message_keeps_carriage_return(self) -> None:
        report = _report(("c", Severity.OK, "one\r\ntwo"))
        assert render(report).splitlines(keepends=True)[1:] == [
            "Ok      c      one\r\n",
            "               two\n",
        ]

    def test_summary_line_helper(self) -> None:
        assert summary_line(Severity.ERROR) == "Error: Error(s) found, investigation required"
        assert summary_line(Severity.INFO) is None


class TestStyledRendering:
    """Tests for ANSI-styled output."""

    def test_contains_escape_sequences(self, mixed_report: Report) -> None:
        assert "\x1b[" in render(mixed_report, styling_enabled=True)

    @pytest.mark.parametrize("message", ["missing file", "a\tb", "a\rb", "two\nlines"])
    def test_stripped_output_matches_plain(self, message: str) -> None:
        """Test that styling only adds escape codes around text."""
        report = _report(
            ("version", Severity.OK, "1.2.3"),
            ("skip", Severity.SKIPPED, "not applicable"),
            ("config", Severity.ERROR, message),
        )
        styled = render(report, styling_enabled=True)
        plain = render(report, styling_enabled=False)
        assert ANSI_ESCAPE_PATTERN.sub("", styled) == plain

    def test_severity_colors(self, mixed_report: Report) -> None:
        styled = render(mixed_report, styling_enabled=True)
        assert "\x1b[32mOk" in styled
        assert "\x1b[33mWarning" in styled
        assert "\x1b[31mError" in styled

    @pytest.mark.parametrize("styling", [True, False])
    def test_rendering_is_idempotent(self, mixed_report: Report, styling: bool) -> None:
        assert render(mixed_report, styling) == render(mixed_report, styling)


class _BrokenSink(io.StringIO):
    def write(self, s: str) -> int:
        raise BrokenPipeError("pipe closed")


class _CountingSink(io.StringIO):
    writes = 0

    def write(self, s: str) -> int:
        self.writes += 1
        return super().write(s)


class TestWriteReport:
    """Tests for writing to a sink."""

    def test_single_write(self, mixed_report: Report) -> None:
        sink = _CountingSink()
        write_report(mixed_report, sink)
        assert sink.writes == 1
        assert sink.getvalue() == render(mixed_report)

    def test_sink_failure_is_raised(self, mixed_report: Report) -> None:
        with pytest.raises(ReportWriteError) as exc_info:
            write_report(mixed_report, _BrokenSink())
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)


class TestDiagnose:
    """Tests for the one-call helper."""

    def test_runs_and_writes(self) -> None:
        sink = io.StringIO()
        report = diagnose(
            [Check("version", lambda: CheckResult.ok("1.2.3"))],
            output=sink,
            color=ColorChoice.NEVER,
        )
        assert report.overall_severity is Severity.OK
        assert sink.getvalue() == "RESULT  CHECK    MESSAGE\nOk      version  1.2.3\n"

    def test_always_color(self) -> None:
        sink = io.StringIO()
        diagnose([Check("v", lambda: CheckResult.ok("1"))], output=sink, color=ColorChoice.ALWAYS)
        assert "\x1b[" in sink.getvalue()

    def test_empty_sized_sink_is_used(self) -> None:
        """Test that a sink which is falsy when empty still receives the report."""

        class _SizedSink(io.StringIO):
            def __len__(self) -> int:
                return len(self.getvalue())

        sink = _SizedSink()
        diagnose([Check("v", lambda: CheckResult.ok("1"))], output=sink, color=ColorChoice.NEVER)
        assert sink.getvalue() == "RESULT  CHECK  MESSAGE\nOk      v      1\n"
