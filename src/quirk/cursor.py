"""
Stream Cursor
=============

Owns the input stream for a lexer and tracks the current (line, column)
position. All position changes go through three operations:

- read_one():     consume the next codepoint, column += 1
- backup_one():   un-read the last codepoint, column -= 1
- note_newline(): column = 0, line += 1

At most one codepoint can be pending backup at any time. The scanner never
needs more: every sub-scanner reads exactly one codepoint past its literal
before deciding to stop.
"""

import codecs
import io
import logging
from typing import BinaryIO, TextIO, Union

from quirk.errors import StreamReadError
from quirk.tokens import Position


logger = logging.getLogger(__name__)


Stream = Union[TextIO, BinaryIO]


class StreamCursor:
    """
    Sequential codepoint reader with a single-slot pushback.

    Byte streams are decoded with ``encoding`` through an incremental
    decoder; text streams are read as they are. The cursor never wraps
    or closes the caller's stream. Newlines are never translated, so ``\\r\\n`` input is
    seen as a carriage return followed by a newline.

    Attributes:
        filename: Name of the source (for error messages)
        line: Current line (1-indexed)
        column: Codepoints consumed since the last newline
    """

    def __init__(self, stream: Stream, filename: str = "<input>", encoding: str = "utf-8"):
        """
        Initialize the cursor at line 1, column 0.

        Args:
            stream: Any readable text or binary stream
            filename: Name of the source (for error messages)
            encoding: Codec for binary streams
        """
        self._stream = stream
        self._decoder = None
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            self._decoder = codecs.getincrementaldecoder(encoding)()

        # Codepoints decoded from the byte stream but not yet returned
        self._decoded = ""

        self.filename = filename
        self.line = 1
        self.column = 0

        # Last codepoint returned by read_one() and the pushback slot
        self._last = ""
        self._pending = ""

    @property
    def position(self) -> Position:
        """The current position as an immutable value."""
        return Position(self.line, self.column)

    def read_one(self) -> str:
        """
        Consume the next codepoint.

        Returns:
            The codepoint, or an empty string at end of input. End of input
            is sticky: further calls keep returning an empty string.

        Raises:
            StreamReadError: If the stream fails for any other reason
        """
        if self._pending:
            char, self._pending = self._pending, ""
        else:
            try:
                char = self._read_char()
            except (OSError, ValueError) as e:
                # ValueError covers UnicodeDecodeError and reads on a closed stream
                logger.error(f"{self.filename}:{self.position}: read failed: {e}")
                raise StreamReadError(e, self.position, self.filename) from e

        if not char:
            self._last = ""
            return ""

        self.column += 1
        self._last = char
        return char

    def _read_char(self) -> str:
        """
        Read one codepoint from the stream, decoding bytes if needed.

        Bytes are fed to the decoder one at a time. At end of input the
        decoder is flushed, so a truncated multi-byte sequence raises
        UnicodeDecodeError instead of passing as a clean end.
        """
        if self._decoder is None:
            return self._stream.read(1)

        while not self._decoded:
            data = self._stream.read(1)
            self._decoded = self._decoder.decode(data, final=not data)
            if not data:
                break

        char, self._decoded = self._decoded[:1], self._decoded[1:]
        return char

    def backup_one(self) -> None:
        """
        Un-read the most recently read codepoint.

        Only takes effect when column > 0; at the start of a line (or after
        end of input) this is a no-op.
        """
        if self.column <= 0 or not self._last:
            logger.debug(f"{self.filename}:{self.position}: backup refused")
            return

        self.column -= 1
        self._pending = self._last
        self._last = ""

    def note_newline(self) -> None:
        """Move to the start of the next line."""
        self.column = 0
        self.line += 1
