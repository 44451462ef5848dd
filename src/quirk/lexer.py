"""
Quirk Lexer
===========

This module implements the lexer (tokenizer) for the Quirk language.
It converts source text into tokens one at a time, each tagged with the
position where it was seen.

Scanning Rules
--------------
- Newlines advance the line counter and produce no token.
- Other whitespace is skipped. The file and group separators
  (U+001C to U+001F) are not whitespace here; they are ILLEGAL.
- ``+ - * / % & > < ! = ; , : " ( ) { } [ ]`` are single-character tokens.
- A run of decimal digits is an INT; a run of letters is an IDENTIFIER.
  The runs never mix: ``ab12`` is IDENTIFIER ``ab`` then INT ``12``.
- Anything else is reported as an ILLEGAL token and scanning continues.
- End of input is reported as an EOF token, as many times as asked.

Positions
---------
Single-character tokens (and ILLEGAL) report the position *after* their
character was consumed. INT and IDENTIFIER report the position at which
their first character was consumed, which is the same column. A token at
the very start of a line therefore reports column 1; the EOF token of an
empty input reports ``1:0``.

Optional Lexemes
----------------
With ``LexerConfig(merge_operators=True)`` the lexer assembles ``==``,
``>=`` and ``<=``; with ``LexerConfig(keywords=True)`` it reports
fn/var/if/else/return/loop as keyword kinds. Both are off by default.

Example
-------
>>> from quirk.lexer import Lexer
>>> lexer = Lexer.from_string("var x = 42;")
>>> for token in lexer.tokenize():
...     print(token)
Token(IDENTIFIER, 'var', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(EQUAL, '=', 1:7)
Token(INT, '42', 1:9)
Token(SEMICOLON, ';', 1:11)
Token(EOF, 1:11)
"""

import io
import logging
from typing import Callable, Iterator, Optional

from quirk.config import LexerConfig
from quirk.cursor import Stream, StreamCursor
from quirk.tokens import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_TOKENS,
    Token,
    TokenKind,
)


logger = logging.getLogger(__name__)

# str.isspace() also accepts these; Quirk source does not
NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_space(char: str) -> bool:
    """Return True for a whitespace codepoint (other than the separators)."""
    return char.isspace() and char not in NON_SPACE_SEPARATORS


class Lexer:
    """
    Tokenizes Quirk source read from a stream.

    The lexer is created once per stream and never reset. Each call to
    scan() returns exactly one token; nothing is buffered between calls
    except the single codepoint the cursor may hold for backup.

    Usage:
        lexer = Lexer(open("Quirk.test", newline=""), "Quirk.test")
        while (token := lexer.scan()).kind is not TokenKind.EOF:
            print(token.format())

    Attributes:
        cursor: The StreamCursor shared by the classifier and sub-scanners
        config: The LexerConfig in effect
    """

    def __init__(
        self,
        stream: Stream,
        filename: str = "<input>",
        config: Optional[LexerConfig] = None,
    ):
        """
        Initialize the lexer over a stream.

        Args:
            stream: Any readable text or binary stream
            filename: Name of the source (for error messages)
            config: Lexer options (default: LexerConfig())
        """
        self.config = config or LexerConfig()
        self.cursor = StreamCursor(stream, filename, self.config.encoding)

    @classmethod
    def from_string(
        cls,
        source: str,
        filename: str = "<string>",
        config: Optional[LexerConfig] = None,
    ) -> "Lexer":
        """Create a lexer over an in-memory string."""
        return cls(io.StringIO(source, newline=""), filename, config)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until end of input.

        Yields:
            Every token, ending with exactly one EOF token

        Raises:
            StreamReadError: If the underlying stream fails
        """
        while True:
            token = self.scan()
            yield token
            if token.kind is TokenKind.EOF:
                return

    # =========================================================================
    # Token Classification
    # =========================================================================

    def scan(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; an EOF token once the input is exhausted

        Raises:
            StreamReadError: If the underlying stream fails
        """
        cursor = self.cursor

        while True:
            char = cursor.read_one()

            if not char:
                return Token(cursor.position, TokenKind.EOF, "")

            if char == "\n":
                cursor.note_newline()
                continue

            if char in SINGLE_CHAR_TOKENS:
                if self.config.merge_operators and char in TWO_CHAR_TOKENS:
                    return self._scan_operator(char)
                return Token(cursor.position, SINGLE_CHAR_TOKENS[char], char)

            if is_space(char):
                continue

            if char.isdecimal():
                # Back up and let the sub-scanner rescan the first digit
                start = cursor.position
                cursor.backup_one()
                return Token(start, TokenKind.INT, self._scan_int())

            if char.isalpha():
                start = cursor.position
                cursor.backup_one()
                text = self._scan_ident()
                return Token(start, self._identifier_kind(text), text)

            logger.debug(f"{cursor.filename}:{cursor.position}: illegal character {char!r}")
            return Token(cursor.position, TokenKind.ILLEGAL, char)

    def _scan_operator(self, char: str) -> Token:
        """
        Scan ``=``, ``>`` or ``<`` with one codepoint of lookahead.

        The token is reported at the position of its first character.
        """
        cursor = self.cursor
        start = cursor.position

        if cursor.read_one() == "=":
            kind = TWO_CHAR_TOKENS[char]
            logger.debug(f"{cursor.filename}:{start}: merged '{char}='")
            return Token(start, kind, str(kind))

        # Put back whatever followed (no-op at end of input)
        cursor.backup_one()
        return Token(start, SINGLE_CHAR_TOKENS[char], char)

    def _identifier_kind(self, text: str) -> TokenKind:
        if self.config.keywords:
            return KEYWORDS.get(text, TokenKind.IDENTIFIER)
        return TokenKind.IDENTIFIER

    # =========================================================================
    # Literal Sub-Scanners
    # =========================================================================

    def _scan_int(self) -> str:
        """Scan a run of decimal digits."""
        return self._scan_run(str.isdecimal)

    def _scan_ident(self) -> str:
        """Scan a run of letters."""
        return self._scan_run(str.isalpha)

    def _scan_run(self, matches: Callable[[str], bool]) -> str:
        """
        Consume the longest run of codepoints accepted by ``matches``.

        Stops at end of input, or backs up over the first codepoint that
        does not match so the next scan() sees it. Callers back up over a
        matching codepoint first, so the result is never empty.
        """
        chars = []
        while True:
            char = self.cursor.read_one()
            if not char:
                break
            if not matches(char):
                self.cursor.backup_one()
                break
            chars.append(char)

        return "".join(chars)
