"""
Lox Driver
==========

The driver owns everything around a scan: loading the source file, the
shared error flag, and the diagnostic sink that logs what the scanner
reports. It also decides whether a run may continue to later stages
once lexical errors have been seen.

Pipeline
--------
    read_source(path) → Driver.run(source) → Scanner.scan(driver) → ScanResult

Usage
-----
>>> from loxlang.driver import Driver
>>> driver = Driver()
>>> result = driver.run("var x = @;")
>>> driver.has_error
True
>>> driver.should_continue()
False
"""

import logging
from pathlib import Path
from typing import Optional, Union

from loxlang.config import LoxConfig
from loxlang.diagnostics import Diagnostic, DiagnosticCollector, Severity
from loxlang.errors import SourceLocation, SourceReadError
from loxlang.scanner import Scanner, ScanResult

logger = logging.getLogger(__name__)


def read_source(path: Union[str, Path]) -> str:
    """
    Read a UTF-8 source file.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(str(path), f"not valid UTF-8 ({e.reason})") from e


class Driver:
    """
    Runs scans and acts as their diagnostic sink.

    Attributes:
        config: Run configuration
        has_error: Set by the scanner whenever it reports an error
        diagnostics: Everything logged through this driver
    """

    def __init__(self, config: Optional[LoxConfig] = None):
        self.config = config or LoxConfig()
        self.has_error = False
        self.diagnostics = DiagnosticCollector()
        self._filename = self.config.default_filename

    # =========================================================================
    # Diagnostic Sink
    # =========================================================================

    def log(self, severity: Severity, message: str, position: str) -> None:
        """
        Record and log one diagnostic.

        Args:
            severity: ERROR, WARNING or INFO
            message: The diagnostic text
            position: "line:column" of the diagnostic
        """
        location = self._parse_position(position)
        self.diagnostics.add(Diagnostic(severity, message, location))
        logger.log(severity.log_level, f"{location}: {severity.value}: {message}")

    def _parse_position(self, position: str) -> SourceLocation:
        line, _, column = position.partition(":")
        try:
            return SourceLocation(self._filename, int(line), int(column))
        except ValueError:
            logger.debug(f"Malformed diagnostic position {position!r}")
            return SourceLocation(self._filename, 0, 0)

    # =========================================================================
    # Running
    # =========================================================================

    def run(self, source: str, filename: Optional[str] = None) -> ScanResult:
        """
        Scan source text, reporting diagnostics through this driver.

        Args:
            source: Lox source code
            filename: Name used in locations (defaults to the configured one)

        Returns:
            ScanResult for the source
        """
        self._filename = filename or self.config.default_filename
        logger.debug(f"Scanning {self._filename} ({len(source)} characters)")

        result = Scanner(source, self._filename).scan(self)

        if result.has_errors:
            logger.debug(f"{self._filename}: {len(result.errors)} lexical errors")
        return result

    def run_file(self, path: Union[str, Path]) -> ScanResult:
        """
        Read and scan a source file.

        Raises:
            SourceReadError: If the file cannot be read
        """
        source = read_source(path)
        return self.run(source, str(path))

    def should_continue(self) -> bool:
        """Whether later stages may run after what has been reported so far."""
        return not (self.has_error and self.config.fail_on_error)

    def reset(self) -> None:
        """Clear the error flag and recorded diagnostics."""
        self.has_error = False
        self.diagnostics.clear()
