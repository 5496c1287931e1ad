"""Character-level reader for Gerber source text."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\r\n"


def _is_number(char: str) -> bool:
    return "0" <= char <= "9"


class GerberFile:
    """A cursor over Gerber text that reads numbers, names and characters.

    The ``get_*`` readers return ``None`` when nothing could be read.
    """

    def __init__(self, data: str | bytes | bytearray) -> None:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("latin-1")
        self.buffer: str = data
        self.pointer: int = 0
        self.line_number: int = 0

    def end_of_file(self) -> bool:
        """Skip whitespace and report whether the input is exhausted."""
        self.skip_whitespace()
        return self.pointer >= len(self.buffer)

    def more_than_last_one(self) -> bool:
        return self.pointer < len(self.buffer) - 1

    def skip_whitespace(self) -> bool:
        """Advance past whitespace, counting newlines; True if the end is reached."""
        while self.pointer < len(self.buffer):
            char = self.buffer[self.pointer]
            if char not in _WHITESPACE:
                return False
            if char == "\n":
                self.line_number += 1
            self.pointer += 1
        return True

    def get_char(self) -> str:
        char = self.buffer[self.pointer]
        self.pointer += 1
        return char

    def peek_char(self) -> str:
        return self.buffer[self.pointer]

    def peek_next_char(self) -> str:
        return self.buffer[self.pointer + 1]

    def query_char_until_not_whitespace(self, c: str) -> bool:
        """Consume ``c`` if it is the next non-blank character."""
        if self.skip_whitespace() or self.peek_char() != c:
            return False
        self.pointer += 1
        return True

    def query_char_until_end(self, c: str) -> bool:
        """Advance until ``c`` is under the cursor; False if it never appears."""
        while not self.end_of_file():
            if self.peek_char() == c:
                return True
            self.pointer += 1
        return False

    def get_string(self) -> str | None:
        """Read a name up to ``*`` or ``,`` (blanks are dropped)."""
        chars: list[str] = []
        while not self.end_of_file():
            self.skip_whitespace()
            char = self.peek_char()
            if char == "\0":
                logger.error("Line %d - Error: Null in name not allowed", self.line_number)
                return None
            if char in "*,":
                return "".join(chars)
            chars.append(self.get_char())
        return None

    def _get_sign(self) -> bool:
        if self.end_of_file():
            return False
        char = self.buffer[self.pointer]
        if char == "-":
            self.pointer += 1
            return True
        if char == "+":
            self.pointer += 1
        return False

    def get_integer(self) -> int | None:
        """Read a signed decimal integer that must be followed by more input."""
        start = self.pointer
        self.skip_whitespace()
        negative = self._get_sign()
        value = 0
        while not self.end_of_file():
            char = self.buffer[self.pointer]
            if not _is_number(char):
                if negative:
                    value = -value
                return value if self.pointer > start else None
            value = value * 10 + (ord(char) - ord("0"))
            self.pointer += 1
        self.pointer = start
        return None

    def get_float(self) -> float | None:
        """Read a signed decimal number that must be followed by more input."""
        start = self.pointer
        self.skip_whitespace()
        negative = self._get_sign()
        integer = 0
        while not self.end_of_file():
            char = self.buffer[self.pointer]
            if not _is_number(char):
                break
            integer = integer * 10 + (ord(char) - ord("0"))
            self.pointer += 1

        number = float(integer)
        if not self.end_of_file() and self.buffer[self.pointer] == ".":
            self.pointer += 1
            scale = 0.1
            while not self.end_of_file():
                char = self.buffer[self.pointer]
                if not _is_number(char):
                    break
                number += (ord(char) - ord("0")) * scale
                scale *= 0.1
                self.pointer += 1

        if self.end_of_file():
            return None
        if negative:
            number *= -1.0
        return number if self.pointer > start else None

    def get_coordinate(self, integer: int, decimal: int, omit_trailing_zeroes: bool) -> float | None:
        """Read a coordinate in the given fixed-point format.

        A number that contains a decimal point is read as a plain float.
        """
        start = self.pointer
        self.skip_whitespace()
        sign = self._get_sign()
        number = 0.0
        digits = 0
        while not self.end_of_file():
            char = self.buffer[self.pointer]
            if _is_number(char):
                number = number * 10 + (ord(char) - ord("0"))
                self.pointer += 1
                digits += 1
            elif char == ".":
                self.pointer = start
                return self.get_float()
            else:
                if sign:
                    number *= -1
                if omit_trailing_zeroes:
                    for _ in range(integer + decimal - digits):
                        number *= 10
                for _ in range(decimal):
                    number /= 10
                if digits == 0:
                    logger.warning(
                        "Line %d - Warning: Ignoring ill-formed coordinate", self.line_number
                    )
                return number
        return None