"""
MOTION section: frame count, frame time and per-frame channel samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from mocap_bvh.core.channels import Channel
from mocap_bvh.core.errors import FrameDataCountMismatch
from mocap_bvh.core.hierarchy import Joint, count_channels
from mocap_bvh.core.reader import Line, LineReader, parse_count, parse_float


@dataclass(eq=False)
class ChannelCurve:
    """One sample per frame for a single channel of a single joint."""

    joint: str
    channel: Channel
    keys: np.ndarray

    @classmethod
    def zeros(cls, joint: str, channel: Channel, frame_count: int, dtype="float32") -> "ChannelCurve":
        return cls(joint, channel, np.zeros(frame_count, dtype=dtype))

    def __len__(self) -> int:
        return len(self.keys)

    def set_key(self, frame: int, value: float) -> None:
        self.keys[frame] = value

    def freeze(self) -> None:
        self.keys.flags.writeable = False


@dataclass
class MotionData:
    frame_count: int
    frame_time: float
    curves: Tuple[ChannelCurve, ...]


def allocate_curves(root: Joint, frame_count: int, dtype="float32") -> List[ChannelCurve]:
    """Zeroed curves in depth-first joint order, channels in declared order."""
    return [
        ChannelCurve.zeros(joint.name, channel, frame_count, dtype)
        for joint in root.traverse()
        for channel in joint.channels
    ]


def parse_motion(reader: LineReader, root: Joint, dtype="float32") -> MotionData:
    """
    Read the MOTION section that follows a parsed hierarchy.

    Raises:
        StructuralError: MOTION, Frames or Frame Time missing, or input ends early
        NumericParseError: Frame count, frame time or a sample is not numeric
        FrameDataCountMismatch: A row does not hold one value per channel
    """
    reader.expect_literal("MOTION")

    line, value = reader.read_key_value("Frames")
    frame_count = parse_count(value, line)

    line, value = reader.read_key_value("Frame Time")
    frame_time = parse_float(value, line)

    width = count_channels(root)
    # A skeleton without channels has empty rows
    skip_blank = None if width else False

    # All rows must be present before storage is allocated
    rows: List[Line] = [
        reader.read(f"data for frame {frame}", skip_blank) for frame in range(frame_count)
    ]

    curves = allocate_curves(root, frame_count, dtype)
    for frame, line in enumerate(rows):
        tokens = line.tokens
        if len(tokens) != len(curves):
            raise FrameDataCountMismatch(
                f"frame {frame} value count does not match channel count",
                line_number=line.number,
                line=line.text,
                expected=len(curves),
                actual=len(tokens),
            )
        for curve, token in zip(curves, tokens):
            curve.set_key(frame, parse_float(token, line))

    for curve in curves:
        curve.freeze()
    return MotionData(frame_count, frame_time, tuple(curves))
