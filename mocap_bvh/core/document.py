"""
The parsed document: skeleton tree plus the flat array of channel curves.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from mocap_bvh.core.channels import Channel
from mocap_bvh.core.hierarchy import Joint, count_channels
from mocap_bvh.core.motion import ChannelCurve


class BvhDocument:
    """
    Skeleton and motion of one BVH file.

    ``channels`` is laid out in depth-first pre-order over the joints, each
    joint's channels contiguous and in declared order. Column ``i`` of a frame
    row is ``channels[i]``.
    """

    def __init__(
        self,
        root: Joint,
        frame_count: int,
        frame_time: float,
        channels: Sequence[ChannelCurve],
    ) -> None:
        expected = count_channels(root)
        if len(channels) != expected:
            raise ValueError(
                f"{len(channels)} channel curves for a skeleton with {expected} channels"
            )
        for curve in channels:
            if len(curve) != frame_count:
                raise ValueError(
                    f"curve {curve.joint}.{curve.channel.value} has {len(curve)} keys, "
                    f"expected {frame_count}"
                )

        self._root = root
        self._frame_count = frame_count
        self._frame_time = frame_time
        self._channels = tuple(channels)

        self._slices: Dict[str, slice] = {}
        start = 0
        for joint in root.traverse():
            stop = start + len(joint.channels)
            if joint.name in self._slices:
                raise ValueError(f"duplicate joint name {joint.name!r}")
            self._slices[joint.name] = slice(start, stop)
            start = stop

    def __str__(self) -> str:
        return "{0}nodes, {1}channels, {2}frames, {3:.2f}seconds".format(
            self.node_count, self.channel_count, self.frame_count, self.duration
        )

    def __repr__(self) -> str:
        return f"BvhDocument(root={self._root.name!r}, {self})"

    @property
    def root(self) -> Joint:
        return self._root

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def frame_time(self) -> float:
        """Seconds per frame."""
        return self._frame_time

    @property
    def frame_rate(self) -> float:
        return 1.0 / self._frame_time if self._frame_time > 0 else 0.0

    @property
    def duration(self) -> float:
        """Total length in seconds."""
        return self._frame_count * self._frame_time

    @property
    def channels(self) -> Tuple[ChannelCurve, ...]:
        return self._channels

    @property
    def channel_count(self) -> int:
        return len(self._channels)

    @property
    def node_count(self) -> int:
        return self._root.traverse().count()

    def joint_names(self) -> List[str]:
        return [joint.name for joint in self._root.traverse()]

    def find(self, name: str) -> Optional[Joint]:
        return self._root.find(name)

    def channel_layout(self) -> List[Tuple[str, Channel]]:
        """(joint name, channel) for every column of a frame row."""
        return [(curve.joint, curve.channel) for curve in self._channels]

    def channel_slice(self, name: str) -> slice:
        """Columns owned by the joint ``name``."""
        try:
            return self._slices[name]
        except KeyError:
            raise KeyError(f"no joint named {name!r}") from None

    def curve(self, name: str, channel: Channel) -> ChannelCurve:
        for curve in self._channels[self.channel_slice(name)]:
            if curve.channel is channel:
                return curve
        raise KeyError(f"joint {name!r} has no {channel.value} channel")

    def _check_frame(self, frame: int) -> None:
        if not 0 <= frame < self._frame_count:
            raise IndexError(f"frame {frame} out of range [0, {self._frame_count})")

    def joint_values(self, name: str, frame: int) -> Dict[Channel, float]:
        """Channel values of one joint at one frame."""
        self._check_frame(frame)
        return {
            curve.channel: float(curve.keys[frame])
            for curve in self._channels[self.channel_slice(name)]
        }

    def sample(self, frame: int) -> Dict[str, Dict[Channel, float]]:
        """Channel values of every joint at one frame, keyed by joint name."""
        self._check_frame(frame)
        values: Dict[str, Dict[Channel, float]] = {}
        for curve in self._channels:
            values.setdefault(curve.joint, {})[curve.channel] = float(curve.keys[frame])
        return values

    def to_array(self) -> np.ndarray:
        """All samples as a (frames, channels) array."""
        if not self._channels:
            return np.zeros((self._frame_count, 0), dtype=np.float32)
        return np.stack([curve.keys for curve in self._channels], axis=1)
