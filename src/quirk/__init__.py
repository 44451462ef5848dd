"""
Quirk - Lexical Scanner for the Quirk Language
==============================================

This package converts Quirk source text into a sequence of classified
tokens with (line, column) positions, one token per call, for a parser
to consume.

Main Components
---------------
- **tokens**: TokenKind, Token, Position and the display-name table
- **cursor**: StreamCursor, codepoint reads with one-codepoint backup
- **lexer**: Lexer, the token classifier and literal sub-scanners
- **config**: LexerConfig, opt-in operator merging and keyword lookup
- **cli**: the ``quirklex`` token-listing tool

Quick Start
-----------
Scan a string:
    >>> from quirk import Lexer
    >>> [t.text for t in Lexer.from_string("fn main(){}").tokenize()]
    ['fn', 'main', '(', ')', '{', '}', '']

Scan a file until end of input:
    >>> with open("Quirk.test", newline="") as f:
    ...     lexer = Lexer(f, "Quirk.test")
    ...     while (token := lexer.scan()).kind is not TokenKind.EOF:
    ...         print(token.format())

Or use the command-line tool:
    $ quirklex Quirk.test
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from quirk.tokens import (
    TokenKind,
    Token,
    Position,
    TOKEN_NAMES,
    KEYWORDS,
)
from quirk.errors import (
    QuirkError,
    ScanError,
    StreamReadError,
    ConfigError,
)
from quirk.config import LexerConfig
from quirk.cursor import StreamCursor
from quirk.lexer import Lexer

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "TokenKind",
    "Token",
    "Position",
    "TOKEN_NAMES",
    "KEYWORDS",
    # Scanning
    "StreamCursor",
    "Lexer",
    "LexerConfig",
    # Exception hierarchy
    "QuirkError",
    "ScanError",
    "StreamReadError",
    "ConfigError",
]
