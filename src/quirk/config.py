"""
Quirk Lexer - Configuration
===========================

Lexer configuration. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerConfig.from_env)
- Command-line options (quirklex overrides individual fields)

The defaults reproduce the reference scanning behaviour exactly: every
``=``, ``>`` and ``<`` is its own token, and every letter run is an
IDENTIFIER. The two switches below opt in to the richer lexemes that the
token enumeration declares but the default scanner never produces.
"""

import codecs
import os
from dataclasses import dataclass, replace
from typing import Optional

from quirk.errors import ConfigError


_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class LexerConfig:
    """
    Configuration for a Lexer instance.

    Attributes:
        merge_operators: Merge ``=``, ``>``, ``<`` followed by ``=`` into
            EQUAL_EQUAL, GREATER_EQUAL, LESS_EQUAL (default: False)
        keywords: Report fn/var/if/else/return/loop as keyword kinds
            instead of IDENTIFIER (default: False)
        encoding: Codec used to decode byte streams (default: "utf-8")
    """

    merge_operators: bool = False
    keywords: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"unknown encoding '{self.encoding}'") from e

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            QUIRK_MERGE_OPERATORS: Enable two-character operators (1/true/yes/on)
            QUIRK_KEYWORDS: Enable keyword recognition (1/true/yes/on)
            QUIRK_ENCODING: Encoding for byte input

        Returns:
            LexerConfig with values from environment variables

        Raises:
            ConfigError: If a boolean variable holds an unrecognized value
        """
        return cls(
            merge_operators=_env_flag("QUIRK_MERGE_OPERATORS", cls.merge_operators),
            keywords=_env_flag("QUIRK_KEYWORDS", cls.keywords),
            encoding=os.environ.get("QUIRK_ENCODING") or cls.encoding,
        )

    def with_overrides(
        self,
        merge_operators: Optional[bool] = None,
        keywords: Optional[bool] = None,
        encoding: Optional[str] = None,
    ) -> "LexerConfig":
        """Return a copy with every non-None argument applied."""
        changes = {
            name: value
            for name, value in (
                ("merge_operators", merge_operators),
                ("keywords", keywords),
                ("encoding", encoding),
            )
            if value is not None
        }
        return replace(self, **changes)


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ConfigError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got '{raw}'")
