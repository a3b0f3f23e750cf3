"""
Lox Command-Line Interface
==========================

This package provides command-line tools for the Lox front end:

- **loxscan**: scan a source file and print its tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["loxscan"]
