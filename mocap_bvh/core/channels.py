"""
Channel kinds and the CHANNELS line parser.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from mocap_bvh.core.errors import ChannelCountMismatch, GrammarError, UnknownChannelName
from mocap_bvh.core.reader import Line, parse_count


class Channel(Enum):
    """The six animated degrees of freedom a joint can declare."""
    XPOSITION = "Xposition"
    YPOSITION = "Yposition"
    ZPOSITION = "Zposition"
    XROTATION = "Xrotation"
    YROTATION = "Yrotation"
    ZROTATION = "Zrotation"

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def is_position(self) -> bool:
        return self.value.endswith("position")

    @property
    def is_rotation(self) -> bool:
        return self.value.endswith("rotation")


_BY_NAME = {channel.value: channel for channel in Channel}


def parse_channels(line: Line, level: int | None = None) -> Tuple[Channel, ...]:
    """
    Parse ``CHANNELS <n> <name> ...`` into channel kinds, in declared order.

    Args:
        line: The source line
        level: Nesting level of the owning joint, for diagnostics

    Raises:
        GrammarError: Line does not start with CHANNELS
        NumericParseError: Count is not a non-negative integer
        ChannelCountMismatch: Count does not match the names given
        UnknownChannelName: A name is not an exact canonical spelling
    """
    tokens = line.tokens
    if not tokens or tokens[0] != "CHANNELS":
        raise GrammarError(
            "CHANNELS is not found", line_number=line.number, line=line.text, level=level
        )
    if len(tokens) < 2:
        raise ChannelCountMismatch(
            "channel count is missing",
            line_number=line.number,
            line=line.text,
            level=level,
        )

    count = parse_count(tokens[1], line)
    if count + 2 != len(tokens):
        raise ChannelCountMismatch(
            "channel count does not match channel names",
            line_number=line.number,
            line=line.text,
            level=level,
            expected=count,
            actual=len(tokens) - 2,
        )

    channels = []
    for name in tokens[2:]:
        channel = _BY_NAME.get(name)
        if channel is None:
            raise UnknownChannelName(
                f"unknown channel: {name!r}",
                line_number=line.number,
                line=line.text,
                level=level,
            )
        channels.append(channel)
    return tuple(channels)
