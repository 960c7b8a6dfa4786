"""
Exception hierarchy for BVH parsing.

Every failure aborts the whole parse; no partial document is ever returned.
Each error carries the context needed to build a diagnostic: the 1-based line
number, the raw offending line, the nesting level and expected/actual counts
where they apply.
"""

from __future__ import annotations

from typing import Optional


class BvhError(Exception):
    """Base class for all BVH parse failures."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        level: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        self.level = level
        self.expected = expected
        self.actual = actual
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]
        if self.expected is not None or self.actual is not None:
            parts.append(f"expected {self.expected}, got {self.actual}")
        if self.level is not None:
            parts.append(f"level {self.level}")
        if self.line_number is not None:
            parts.append(f"line {self.line_number}: {self.line!r}")
        return " | ".join(parts)


class StructuralError(BvhError):
    """A required section keyword or marker is missing or out of order."""


class GrammarError(BvhError):
    """A line has the wrong token shape or an unrecognized keyword."""


class MissingBraceError(StructuralError, GrammarError):
    """An opening or closing brace line is missing."""


class ChannelCountMismatch(BvhError):
    """Declared channel count differs from the number of channel names."""


class UnknownChannelName(BvhError):
    """A channel name is not one of the six canonical spellings."""


class FrameDataCountMismatch(BvhError):
    """A frame row does not hold exactly one value per channel."""


class NumericParseError(BvhError):
    """A token expected to be numeric could not be parsed."""
