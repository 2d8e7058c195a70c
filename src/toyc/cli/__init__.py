"""
toyc Command-Line Interface
===========================

This package provides the command-line tool for toyc:

- **mcc**: Mini-C compiler

The tool is a Click-based CLI application with help text and
consistent error reporting.
"""

__all__ = ["mcc"]
