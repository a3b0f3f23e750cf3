# =============================================================================
# test_diagnostics.py - Error and Diagnostic Tests
# =============================================================================
# Tests for the exception hierarchy, error message formatting and the
# diagnostic collector used for multi-error reporting.
# =============================================================================

import logging

import pytest

from loxlang.diagnostics import Diagnostic, DiagnosticCollector, Severity
from loxlang.errors import (
    CompileErrorKind,
    DuplicateTerminatorError,
    LoxCompilationError,
    LoxError,
    LoxSyntaxError,
    SourceLocation,
    SourceReadError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)


# =============================================================================
# Exception Hierarchy
# =============================================================================

class TestErrorHierarchy:

    @pytest.mark.parametrize("error", [
        UnterminatedCommentError(),
        UnterminatedStringError('"'),
        UnexpectedCharacterError("@"),
        DuplicateTerminatorError(";"),
    ])
    def test_scanner_errors_are_syntax_errors(self, error):
        assert isinstance(error, LoxSyntaxError)
        assert isinstance(error, LoxError)
        assert error.kind is CompileErrorKind.SYNTAX_ERROR

    def test_fatal_and_aggregate_errors(self):
        assert isinstance(SourceReadError("x.lox", "missing"), LoxError)
        assert isinstance(LoxCompilationError("report"), LoxError)

    def test_source_read_error_message(self):
        error = SourceReadError("x.lox", "No such file or directory")
        assert str(error) == "Unable to read file 'x.lox': No such file or directory"


# =============================================================================
# Message Formatting
# =============================================================================

class TestFormatting:

    def test_location_format(self):
        location = SourceLocation("t.lox", 3, 5)
        assert str(location) == "t.lox:3:5"
        assert location.position == "3:5"

    def test_message_without_location(self):
        assert str(LoxSyntaxError("bad")) == "error: bad"

    def test_message_with_caret(self):
        error = UnexpectedCharacterError(
            "@", SourceLocation("t.lox", 1, 5), source_line="var @x = 1;"
        )
        lines = str(error).split("\n")
        assert lines[0] == "t.lox:1:5: error: Unexpected character: @"
        assert lines[1] == "    var @x = 1;"
        assert lines[2] == " " * 8 + "^"

    def test_hint_line(self):
        error = DuplicateTerminatorError(";", SourceLocation("t.lox", 1, 9))
        assert str(error).endswith(f"hint: {DuplicateTerminatorError.HINT}")
        assert error.message == "Expect ';' after expression. Found ';;' instead."

    def test_error_kind_string(self):
        assert str(CompileErrorKind.SYNTAX_ERROR) == "SyntaxError"


# =============================================================================
# Diagnostics
# =============================================================================

class TestDiagnostic:

    def test_severity_levels(self):
        assert Severity.ERROR.log_level == logging.ERROR
        assert Severity.WARNING.log_level == logging.WARNING
        assert Severity.INFO.log_level == logging.INFO

    def test_str_and_position(self):
        diagnostic = Diagnostic(
            Severity.ERROR,
            "Unexpected character: @",
            SourceLocation("t.lox", 2, 4),
            CompileErrorKind.SYNTAX_ERROR,
        )
        assert diagnostic.position == "2:4"
        assert diagnostic.is_error
        assert str(diagnostic) == "t.lox:2:4: error [SyntaxError]: Unexpected character: @"

    def test_hint_has_no_kind(self):
        diagnostic = Diagnostic(Severity.INFO, "try this", SourceLocation("t.lox", 1, 1))
        assert str(diagnostic) == "t.lox:1:1: info: try this"
        assert not diagnostic.is_error


class TestDiagnosticCollector:

    def test_add_error_without_hint(self):
        collector = DiagnosticCollector()
        added = collector.add_error(UnexpectedCharacterError("@", SourceLocation("t", 1, 1)))
        assert len(added) == 1
        assert collector.has_errors()
        assert collector.error_count() == 1

    def test_add_error_with_hint_adds_info(self):
        collector = DiagnosticCollector()
        added = collector.add_error(DuplicateTerminatorError(";", SourceLocation("t", 1, 9)))
        assert [d.severity for d in added] == [Severity.ERROR, Severity.INFO]
        assert added[1].message == DuplicateTerminatorError.HINT
        assert collector.error_count() == 1
        assert len(collector) == 2

    def test_error_without_location(self):
        collector = DiagnosticCollector()
        added = collector.add_error(LoxSyntaxError("bad"))
        assert added[0].position == "0:0"

    def test_report_summary(self):
        collector = DiagnosticCollector()
        collector.add_error(UnexpectedCharacterError("@", SourceLocation("t", 1, 1)))
        collector.add_error(UnexpectedCharacterError("#", SourceLocation("t", 1, 3)))
        collector.add(Diagnostic(Severity.WARNING, "odd", SourceLocation("t", 2, 1)))
        report = collector.report()
        assert "t:1:1: error [SyntaxError]: Unexpected character: @" in report
        assert report.endswith("2 errors, 1 warning")

    def test_raise_if_errors(self):
        collector = DiagnosticCollector()
        collector.raise_if_errors()

        collector.add_error(UnexpectedCharacterError("@", SourceLocation("t", 1, 1)))
        with pytest.raises(LoxCompilationError, match="1 error, 0 warnings"):
            collector.raise_if_errors()

    def test_clear(self):
        collector = DiagnosticCollector()
        collector.add_error(UnexpectedCharacterError("@", SourceLocation("t", 1, 1)))
        collector.clear()
        assert not collector.has_errors()
        assert list(collector) == []
