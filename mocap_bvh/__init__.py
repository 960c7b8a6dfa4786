"""
mocap-bvh - Biovision Hierarchy (BVH) motion capture reader

Parses BVH text into a skeleton tree of named joints and a flat array of
per-channel sample curves laid out in depth-first joint order.

Features:
- Recursive-descent hierarchy parsing with strict grammar checks
- Six canonical translation/rotation channels
- Per-frame samples stored as numpy arrays
- Name and frame based queries for downstream rig drivers
- Rich-based command-line inspector

License: MIT
"""

__version__ = "1.0.0"
__author__ = "mocap-bvh Contributors"
__license__ = "MIT"

from mocap_bvh.core import (
    BvhDocument,
    BvhError,
    Channel,
    ChannelCurve,
    EndSite,
    Joint,
    ParseResult,
    load,
    parse,
    try_parse,
)

__all__ = [
    "BvhDocument",
    "BvhError",
    "Channel",
    "ChannelCurve",
    "EndSite",
    "Joint",
    "ParseResult",
    "load",
    "parse",
    "try_parse",
]
