"""
Grammar primitives: line reading, tokenizing and literal matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Type

from mocap_bvh.core.errors import BvhError, NumericParseError, StructuralError


@dataclass(frozen=True)
class Line:
    """One source line with its 1-based position."""

    number: int
    text: str

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def tokens(self) -> List[str]:
        return tokenize(self.text)


def tokenize(text: str) -> List[str]:
    """Split on runs of whitespace, discarding empty tokens."""
    return text.split()


def parse_float(token: str, line: Optional[Line] = None) -> float:
    try:
        return float(token)
    except ValueError:
        raise NumericParseError(
            f"not a number: {token!r}",
            line_number=line.number if line else None,
            line=line.text if line else None,
        ) from None


def parse_count(token: str, line: Optional[Line] = None) -> int:
    """Parse a non-negative integer count."""
    try:
        value = int(token)
    except ValueError:
        value = -1
    if value < 0:
        raise NumericParseError(
            f"not a non-negative integer: {token!r}",
            line_number=line.number if line else None,
            line=line.text if line else None,
        )
    return value


class LineReader:
    """
    Sequential reader over the lines of an in-memory document.

    Blank lines are skipped when ``skip_blank_lines`` is set; every other line
    is handed out exactly once, in order.
    """

    def __init__(self, text: str, skip_blank_lines: bool = True) -> None:
        self._lines = text.splitlines()
        self._index = 0
        self.skip_blank_lines = skip_blank_lines

    @property
    def line_number(self) -> int:
        """Number of the last line handed out (0 before the first read)."""
        return self._index

    def _advance_blank(self, skip_blank: Optional[bool] = None) -> None:
        if not (self.skip_blank_lines if skip_blank is None else skip_blank):
            return
        while self._index < len(self._lines) and not self._lines[self._index].strip():
            self._index += 1

    def at_end(self) -> bool:
        self._advance_blank()
        return self._index >= len(self._lines)

    def read(self, expecting: str, skip_blank: Optional[bool] = None) -> Line:
        """
        Return the next line, failing with StructuralError at end of input.

        ``skip_blank`` overrides ``skip_blank_lines`` for this read.
        """
        self._advance_blank(skip_blank)
        if self._index >= len(self._lines):
            raise StructuralError(f"unexpected end of input, expected {expecting}")
        line = Line(self._index + 1, self._lines[self._index])
        self._index += 1
        return line

    def expect_literal(
        self,
        literal: str,
        error_cls: Type[BvhError] = StructuralError,
        level: Optional[int] = None,
    ) -> Line:
        """Read a line that must consist of exactly ``literal``."""
        line = self.read(repr(literal))
        if line.stripped != literal:
            raise error_cls(
                f"{literal!r} is not found",
                line_number=line.number,
                line=line.text,
                level=level,
            )
        return line

    def read_key_value(self, key: str) -> Tuple[Line, str]:
        """Read a ``key: value`` line and return the raw value text."""
        line = self.read(f"{key!r}")
        found, separator, value = line.text.partition(":")
        if not separator or found.strip() != key:
            raise StructuralError(
                f"{key!r} is not found", line_number=line.number, line=line.text
            )
        return line, value.strip()
