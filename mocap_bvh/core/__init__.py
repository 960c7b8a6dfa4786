"""
BVH parsing core.

Provides:
- Channel kinds and the CHANNELS line parser
- Skeleton joints, End Site markers and pre-order traversal
- Motion section reading into per-channel curves
- The assembled BvhDocument
"""

from mocap_bvh.core.channels import Channel, parse_channels
from mocap_bvh.core.document import BvhDocument
from mocap_bvh.core.errors import (
    BvhError,
    ChannelCountMismatch,
    FrameDataCountMismatch,
    GrammarError,
    MissingBraceError,
    NumericParseError,
    StructuralError,
    UnknownChannelName,
)
from mocap_bvh.core.hierarchy import EndSite, Joint, Node, Traversal, count_channels
from mocap_bvh.core.motion import ChannelCurve
from mocap_bvh.core.parser import ParseResult, load, parse, try_parse

__all__ = [
    "Channel",
    "parse_channels",
    "BvhDocument",
    "BvhError",
    "ChannelCountMismatch",
    "FrameDataCountMismatch",
    "GrammarError",
    "MissingBraceError",
    "NumericParseError",
    "StructuralError",
    "UnknownChannelName",
    "EndSite",
    "Joint",
    "Node",
    "Traversal",
    "count_channels",
    "ChannelCurve",
    "ParseResult",
    "load",
    "parse",
    "try_parse",
]
