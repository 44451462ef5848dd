"""
Quirk Token Definitions
=======================

Token kinds, the constant display-name table, and the Position and Token
value types produced by the lexer.

Token Kinds
-----------
- EOF, ILLEGAL: end of input and unrecognized characters
- IDENTIFIER, INT: data-carrying tokens (letter runs and digit runs)
- Operators: + - * / % & > < !
- Keywords: FN VAR IF ELSE RETURN LOOP
- One or two character tokens: = == >= <= ( ) { } [ ] , : " ;

Some kinds are declared for the parser's benefit but are only produced
when the lexer is configured to do so (see quirk.config): the two-character
comparisons and the keywords. ASSIGN is declared but never produced; a lone
``=`` is always EQUAL.

Display Names
-------------
Every kind has one canonical display spelling in TOKEN_NAMES, used when
printing token listings:

| Kind        | Display      |
|-------------|--------------|
| EOF         | EOF          |
| ILLEGAL     | ILLEGAL      |
| IDENTIFIER  | IDENTIFIER   |
| INT         | INT          |
| PLUS        | +            |
| FN          | FN           |
| EQUAL_EQUAL | ==           |
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the Quirk language.

    The enumeration is closed: the lexer never produces a kind outside it.
    """

    # Structural tokens
    EOF = auto()
    ILLEGAL = auto()

    # Values
    IDENTIFIER = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()             # = (declared, never produced)
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /
    MODULUS = auto()            # %
    AMPERSAND = auto()          # &
    GREATER = auto()            # >
    LESSER = auto()             # <
    NOT = auto()                # !

    # Keywords
    FN = auto()
    VAR = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    LOOP = auto()

    # One or two character tokens
    EQUAL = auto()              # =
    EQUAL_EQUAL = auto()        # ==
    GREATER_EQUAL = auto()      # >=
    LESS_EQUAL = auto()         # <=
    LEFT_PARENTHESIS = auto()   # (
    RIGHT_PARENTHESIS = auto()  # )
    LEFT_BRACE = auto()         # {
    RIGHT_BRACE = auto()        # }
    LEFT_BRACKET = auto()       # [
    RIGHT_BRACKET = auto()      # ]
    COMMA = auto()              # ,
    COLON = auto()              # :
    DOUBLE_QUOTE = auto()       # "
    SEMICOLON = auto()          # ;

    def __str__(self) -> str:
        """Render as the canonical display spelling."""
        return TOKEN_NAMES[self]

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_KINDS


# =============================================================================
# Constant Tables
# =============================================================================

# Read-only after import; shared by every lexer in the process.
TOKEN_NAMES = MappingProxyType({
    TokenKind.EOF: "EOF",
    TokenKind.ILLEGAL: "ILLEGAL",
    TokenKind.IDENTIFIER: "IDENTIFIER",
    TokenKind.INT: "INT",
    # Operators
    TokenKind.ASSIGN: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.MULTIPLY: "*",
    TokenKind.DIVIDE: "/",
    TokenKind.MODULUS: "%",
    TokenKind.AMPERSAND: "&",
    TokenKind.GREATER: ">",
    TokenKind.LESSER: "<",
    TokenKind.NOT: "!",
    # Keywords
    TokenKind.FN: "FN",
    TokenKind.VAR: "VAR",
    TokenKind.IF: "IF",
    TokenKind.ELSE: "ELSE",
    TokenKind.RETURN: "RETURN",
    TokenKind.LOOP: "LOOP",
    # One or two character tokens
    TokenKind.EQUAL: "=",
    TokenKind.EQUAL_EQUAL: "==",
    TokenKind.GREATER_EQUAL: ">=",
    TokenKind.LESS_EQUAL: "<=",
    TokenKind.LEFT_PARENTHESIS: "(",
    TokenKind.RIGHT_PARENTHESIS: ")",
    TokenKind.LEFT_BRACE: "{",
    TokenKind.RIGHT_BRACE: "}",
    TokenKind.LEFT_BRACKET: "[",
    TokenKind.RIGHT_BRACKET: "]",
    TokenKind.COMMA: ",",
    TokenKind.COLON: ":",
    TokenKind.DOUBLE_QUOTE: '"',
    TokenKind.SEMICOLON: ";",
})

# Characters that always form a complete token on their own
SINGLE_CHAR_TOKENS = MappingProxyType({
    ";": TokenKind.SEMICOLON,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "%": TokenKind.MODULUS,
    "&": TokenKind.AMPERSAND,
    ">": TokenKind.GREATER,
    "<": TokenKind.LESSER,
    "!": TokenKind.NOT,
    "(": TokenKind.LEFT_PARENTHESIS,
    ")": TokenKind.RIGHT_PARENTHESIS,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    '"': TokenKind.DOUBLE_QUOTE,
})

# First character -> kind produced when followed by "=" (merge_operators only)
TWO_CHAR_TOKENS = MappingProxyType({
    "=": TokenKind.EQUAL_EQUAL,
    ">": TokenKind.GREATER_EQUAL,
    "<": TokenKind.LESS_EQUAL,
})

# Source spelling -> keyword kind (keywords only)
KEYWORDS = MappingProxyType({
    "fn": TokenKind.FN,
    "var": TokenKind.VAR,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
    "loop": TokenKind.LOOP,
})

_KEYWORD_KINDS = frozenset(KEYWORDS.values())


# =============================================================================
# Value Types
# =============================================================================

@dataclass(frozen=True, order=True)
class Position:
    """
    A point in the source, captured when a token is produced.

    Attributes:
        line: Line number (1-indexed)
        column: Codepoints consumed since the last newline (0 at line start)
    """
    line: int = 1
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A single token produced by the lexer.

    Attributes:
        position: Where the token was reported
        kind: The TokenKind classification
        text: Canonical spelling for fixed lexemes, scanned text for
            IDENTIFIER/INT/ILLEGAL, empty for EOF
    """
    position: Position
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        if self.text:
            return f"Token({self.kind.name}, {self.text!r}, {self.position})"
        return f"Token({self.kind.name}, {self.position})"

    def __iter__(self):
        """Allow ``position, kind, text = token`` unpacking."""
        return iter((self.position, self.kind, self.text))

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def format(self) -> str:
        """Format as a listing line: ``line:col<TAB>KIND<TAB>text``."""
        return f"{self.position}\t{self.kind}\t{self.text}"
