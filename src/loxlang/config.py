"""
Lox Front-End Configuration
===========================

Settings shared by the driver and the command-line tool. Configuration
can come from:
- Default values (defined here)
- Environment variables (LoxConfig.from_env)
- Command-line flags, applied by the CLI on top of the above
"""

import logging
import os
from dataclasses import dataclass


_FALSE_VALUES = ("0", "false", "no", "off")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LoxConfig:
    """
    Configuration for scanning runs.

    Attributes:
        log_level: Name of the logging level (default: "INFO")
        log_format: Format string handed to logging.basicConfig
        fail_on_error: Treat lexical errors as fatal for the run (default: True)
        default_filename: Name used for sources that are not files
    """

    log_level: str = "INFO"
    log_format: str = "%(message)s"
    fail_on_error: bool = True
    default_filename: str = "<input>"

    @classmethod
    def from_env(cls) -> "LoxConfig":
        """
        Create LoxConfig from environment variables.

        Environment variables (all optional):
            LOX_LOG_LEVEL: Logging level name (e.g., "DEBUG", "INFO")
            LOX_FAIL_ON_ERROR: "0"/"false"/"no"/"off" to keep going after errors

        Returns:
            LoxConfig with values from environment variables
        """
        config = cls()

        if level := os.environ.get("LOX_LOG_LEVEL"):
            if isinstance(logging.getLevelName(level.upper()), int):
                config.log_level = level.upper()

        if fail := os.environ.get("LOX_FAIL_ON_ERROR"):
            if fail.lower() in _FALSE_VALUES:
                config.fail_on_error = False
            elif fail.lower() in _TRUE_VALUES:
                config.fail_on_error = True

        return config

    @property
    def level(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)

    def configure_logging(self, verbose: bool = False) -> None:
        """Configure logging; verbose forces DEBUG with level prefixes."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
        else:
            logging.basicConfig(level=self.level, format=self.log_format)
