"""
Quirk Error Hierarchy
=====================

This module defines the exception hierarchy for the Quirk lexer.
All exceptions inherit from QuirkError, allowing callers to catch all
lexer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
QuirkError (base)
├── ScanError - failure while scanning source text
│   └── StreamReadError - the underlying stream failed (fatal)
└── ConfigError - invalid lexer configuration

Note that an unrecognized character is NOT an error: the lexer reports it
as an ILLEGAL token and keeps going. End of input is not an error either.
Only a failure of the stream itself (a device error, undecodable bytes)
aborts the scan, and it is never reported as a clean end of input.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional

from quirk.tokens import Position


# =============================================================================
# Base Exception Class
# =============================================================================

class QuirkError(Exception):
    """
    Base exception for all Quirk lexer errors.

    All exceptions in the package inherit from this class:

        try:
            tokens = list(lexer.tokenize())
        except QuirkError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(QuirkError):
    """
    Base exception for errors raised while scanning.

    Attributes:
        message: The error description
        position: Cursor position when the error occurred (optional)
        filename: Name of the source being scanned
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        filename: str = "<input>",
        hint: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.filename = filename
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            Quirk.test:3:7: error: read failed: [Errno 5] Input/output error
        """
        parts = []

        if self.position is not None:
            parts.append(f"{self.filename}:{self.position}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class StreamReadError(ScanError):
    """
    The underlying stream failed with something other than end of input.

    This is unrecoverable: the lexer performs no retry and salvages no
    partial token. The original exception is kept in ``cause`` (and
    chained as ``__cause__`` by the raiser).

    Typical causes:
        - OSError from a file, pipe or socket
        - UnicodeDecodeError from bytes that are not valid in the encoding
    """

    def __init__(
        self,
        cause: BaseException,
        position: Optional[Position] = None,
        filename: str = "<input>",
    ):
        self.cause = cause

        hint = None
        if isinstance(cause, UnicodeDecodeError):
            hint = f"input is not valid {cause.encoding}; try --encoding"

        super().__init__(
            f"read failed: {cause}",
            position=position,
            filename=filename,
            hint=hint,
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(QuirkError):
    """
    Invalid lexer configuration.

    Raised when:
    - An environment variable holds a value that is not a boolean
    - An encoding name is not known to the codec registry
    """
    pass
