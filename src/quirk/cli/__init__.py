"""
Quirk Command-Line Interface
============================

This package provides the command-line tools for the Quirk lexer:

- **quirklex**: print the token listing of a Quirk source file

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["quirklex"]
