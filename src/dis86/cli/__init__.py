"""
dis86 Command-Line Interface
============================

This package provides the command-line tool for dis86:

- **dis86**: disassemble a flat 16-bit x86 binary to NASM source

The tool is implemented as a Click-based CLI application with
help text and consistent error reporting.
"""

__all__ = ["dis86"]
