"""
Top-level BVH parsing entry points.

``parse`` reads a whole document from text and either returns it complete or
raises a ``BvhError``. ``try_parse`` wraps the same pass in a ``ParseResult``
for callers that prefer a value over an exception. ``load`` reads a file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from mocap_bvh.config import ParserConfig
from mocap_bvh.core.document import BvhDocument
from mocap_bvh.core.errors import BvhError
from mocap_bvh.core.hierarchy import HierarchyParser
from mocap_bvh.core.motion import parse_motion
from mocap_bvh.core.reader import LineReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Either a document or the error that stopped the parse."""

    document: Optional[BvhDocument] = None
    error: Optional[BvhError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BvhDocument:
        if self.error is not None:
            raise self.error
        return self.document


def parse(text: str, config: Optional[ParserConfig] = None) -> BvhDocument:
    """
    Parse BVH source text.

    The hierarchy is read first; it fixes the channel layout the motion rows
    are read into.

    Raises:
        BvhError: Any structural, grammar or numeric failure
    """
    config = config or ParserConfig()
    reader = LineReader(text, skip_blank_lines=config.skip_blank_lines)
    root = HierarchyParser(reader, validate_offsets=config.validate_offsets).parse()
    motion = parse_motion(reader, root, dtype=config.dtype)
    return BvhDocument(root, motion.frame_count, motion.frame_time, motion.curves)


def try_parse(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
    try:
        return ParseResult(document=parse(text, config))
    except BvhError as e:
        return ParseResult(error=e)


def load(path: Union[str, Path], config: Optional[ParserConfig] = None) -> BvhDocument:
    """Read and parse a BVH file."""
    config = config or ParserConfig()
    path = Path(path)
    logger.debug(f"Loading BVH: {path}")

    text = path.read_text(encoding=config.encoding)
    document = parse(text, config)

    logger.info(f"Loaded {path.name}: {document}")
    return document
