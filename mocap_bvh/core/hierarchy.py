"""
Skeleton hierarchy: node types, pre-order traversal and the recursive-descent
parser for the HIERARCHY section.

A skeleton is a tree of ``Joint`` nodes. ``End Site`` blocks become ``EndSite``
markers kept on their parent joint in ``end_sites``; they own no channels and
are never part of ``children``, so channel layout only ever follows joints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple, Union

from mocap_bvh.core.channels import Channel, parse_channels
from mocap_bvh.core.errors import GrammarError, MissingBraceError, StructuralError
from mocap_bvh.core.reader import Line, LineReader, parse_float

Offset = Tuple[float, float, float]


@dataclass(frozen=True)
class EndSite:
    """Terminal marker at the tip of a chain."""

    offset: Optional[Offset] = None
    name: str = ""


@dataclass(frozen=True)
class Joint:
    """
    A named joint.

    Attributes:
        name: Joint name as declared
        channels: Animated channels in declaration order
        children: Child joints in declaration order
        offset: Rest offset from the parent (None when not validated)
        end_sites: End Site markers declared inside this joint
    """

    name: str
    channels: Tuple[Channel, ...] = ()
    children: Tuple["Joint", ...] = ()
    offset: Optional[Offset] = None
    end_sites: Tuple[EndSite, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def traverse(self, include_end_sites: bool = False) -> "Traversal":
        """Pre-order traversal rooted at this joint."""
        return Traversal(self, include_end_sites)

    def find(self, name: str) -> Optional["Joint"]:
        """First joint named ``name`` in pre-order, or None."""
        for node in self.traverse():
            if node.name == name:
                return node
        return None


Node = Union[Joint, EndSite]


class _PreOrderIterator:
    def __init__(self, root: Node, include_end_sites: bool) -> None:
        self._stack: List[Node] = [root]
        self._include_end_sites = include_end_sites

    def __iter__(self) -> "_PreOrderIterator":
        return self

    def __next__(self) -> Node:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        if isinstance(node, Joint):
            pending: List[Node] = list(node.children)
            if self._include_end_sites:
                pending.extend(node.end_sites)
            # Reversed so the first child is visited next
            self._stack.extend(reversed(pending))
        return node


class Traversal:
    """
    Finite, restartable pre-order sequence of nodes.

    Each ``iter()`` starts a fresh walk: the root, then each child's traversal
    in declaration order. End Sites are only yielded when requested, after the
    child joints of their parent.
    """

    def __init__(self, root: Node, include_end_sites: bool = False) -> None:
        self.root = root
        self.include_end_sites = include_end_sites

    def __iter__(self) -> Iterator[Node]:
        return _PreOrderIterator(self.root, self.include_end_sites)

    def count(self) -> int:
        return sum(1 for _ in self)


def count_channels(root: Joint) -> int:
    """Total channel count over all joints, the width of one frame row."""
    return sum(len(joint.channels) for joint in root.traverse())


@dataclass
class _OpenJoint:
    """A joint whose closing brace has not been read yet."""

    name: str
    channels: Tuple[Channel, ...]
    offset: Optional[Offset]
    children: List[Joint] = field(default_factory=list)
    end_sites: List[EndSite] = field(default_factory=list)

    def close(self) -> Joint:
        return Joint(
            name=self.name,
            channels=self.channels,
            children=tuple(self.children),
            offset=self.offset,
            end_sites=tuple(self.end_sites),
        )


class HierarchyParser:
    """
    Recursive-descent reader for the HIERARCHY section.

    Open blocks are kept on an explicit stack, so nesting depth is bounded by
    the input rather than the interpreter's recursion limit. The nesting level
    of a declaration is the number of enclosing open joints.
    """

    def __init__(self, reader: LineReader, validate_offsets: bool = True) -> None:
        self.reader = reader
        self.validate_offsets = validate_offsets
        self._names: Set[str] = set()

    def parse(self) -> Joint:
        self.reader.expect_literal("HIERARCHY")
        self._names.clear()

        declaration = self._read_declaration(level=0)
        if declaration is None:
            raise StructuralError(
                "ROOT is not found", line_number=self.reader.line_number, level=0
            )
        stack = [self._open_joint(declaration, level=0)]

        while True:
            level = len(stack)
            declaration = self._read_declaration(level)
            if declaration is None:
                joint = stack.pop().close()
                if not stack:
                    return joint
                stack[-1].children.append(joint)
            elif declaration[0] == "End":
                stack[-1].end_sites.append(self._parse_end_site(level))
            else:
                stack.append(self._open_joint(declaration, level))

    def _read_declaration(self, level: int) -> Optional[Tuple[str, str, Line]]:
        """Read a block header, or return None on the closing brace of the parent."""
        line = self.reader.read("a node declaration or '}'")
        tokens = line.tokens
        if len(tokens) != 2:
            if len(tokens) == 1 and tokens[0] == "}":
                return None
            raise GrammarError(
                "declaration must have two tokens",
                line_number=line.number,
                line=line.text,
                level=level,
                expected=2,
                actual=len(tokens),
            )

        keyword, name = tokens
        if keyword == "ROOT":
            if level != 0:
                self._fail(StructuralError, "nested ROOT", line, level)
        elif keyword == "JOINT":
            if level == 0:
                self._fail(StructuralError, "should be ROOT, but JOINT", line, level)
        elif keyword == "End":
            if level == 0:
                self._fail(StructuralError, "End Site in level 0", line, level)
            if name != "Site":
                self._fail(GrammarError, "End must be followed by Site", line, level)
        else:
            self._fail(GrammarError, f"unknown block type: {keyword}", line, level)

        self.reader.expect_literal("{", MissingBraceError, level)
        return keyword, name, line

    def _open_joint(self, declaration: Tuple[str, str, Line], level: int) -> _OpenJoint:
        _, name, line = declaration
        if name in self._names:
            self._fail(StructuralError, f"duplicate joint name: {name}", line, level)
        self._names.add(name)

        offset = self._parse_offset(level)
        channels = parse_channels(self.reader.read("CHANNELS"), level)
        return _OpenJoint(name, channels, offset)

    def _parse_end_site(self, level: int) -> EndSite:
        offset = self._parse_offset(level)
        self.reader.expect_literal("}", MissingBraceError, level)
        return EndSite(offset=offset)

    def _parse_offset(self, level: int) -> Optional[Offset]:
        line = self.reader.read("OFFSET")
        if not self.validate_offsets:
            return None
        tokens = line.tokens
        if len(tokens) != 4 or tokens[0] != "OFFSET":
            raise GrammarError(
                "OFFSET must be followed by three values",
                line_number=line.number,
                line=line.text,
                level=level,
                expected=4,
                actual=len(tokens),
            )
        x, y, z = (parse_float(token, line) for token in tokens[1:])
        return (x, y, z)

    @staticmethod
    def _fail(error_cls, message: str, line: Line, level: int) -> None:
        raise error_cls(message, line_number=line.number, line=line.text, level=level)
