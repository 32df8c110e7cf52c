"""SegmentWheel - weighted angular layout, rotation and angle resolution."""
from __future__ import annotations

import bisect
import logging
import math
from dataclasses import dataclass
from typing import Iterable

from spinwheel.types import TAU, Entry, Segment, normalize_angle, normalize_weight

logger = logging.getLogger(__name__)

# Screen angle of the fixed pointer (radians, y axis pointing down): top.
POINTER_ANGLE = -math.pi / 2
RIM_FRACTION = 0.04
LABEL_RADIUS = 0.62


@dataclass(frozen=True, slots=True)
class WheelLayout:
    """Device-pixel drawing parameters. Independent of segments and rotation."""

    width: int
    height: int
    pixel_ratio: float
    center_x: float
    center_y: float
    radius: float


@dataclass(frozen=True, slots=True)
class SegmentArc:
    """One segment as it currently appears on screen."""

    entry: Entry
    index: int
    start: float
    end: float
    center: tuple[float, float]
    radius: float
    label_pos: tuple[float, float]
    label_angle: float


def _compute_layout(width: int, height: int, pixel_ratio: float) -> WheelLayout:
    device_w = width * pixel_ratio
    device_h = height * pixel_ratio
    radius = max(0.0, min(device_w, device_h) / 2 * (1 - RIM_FRACTION))
    return WheelLayout(
        width=width,
        height=height,
        pixel_ratio=pixel_ratio,
        center_x=device_w / 2,
        center_y=device_h / 2,
        radius=radius,
    )


class SegmentWheel:
    """Partitions an entry snapshot into arcs and tracks the wheel rotation.

    ``rotation`` is the wheel-face angle currently under the pointer. The
    entry under the pointer is ``resolve_angle(rotation)``.
    """

    def __init__(self, width: int = 400, height: int = 400, pixel_ratio: float = 1.0) -> None:
        self._segments: tuple[Segment, ...] = ()
        self._starts: list[float] = []
        self._rotation = 0.0
        self._locked = False
        self._layout = _compute_layout(width, height, pixel_ratio)

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def has_segments(self) -> bool:
        return bool(self._segments)

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value

    @property
    def layout(self) -> WheelLayout:
        return self._layout

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def rebuild(self, entries: Iterable[Entry]) -> None:
        """Replace all segments from an ordered snapshot and reset rotation.

        Ignored while a run holds the lock.
        """
        if self._locked:
            logger.debug("rebuild ignored: wheel is locked by an active run")
            return

        usable: list[Entry] = []
        for entry in entries:
            name = entry.name.strip()
            if not name:
                continue
            usable.append(Entry(name=name, weight=normalize_weight(entry.weight)))

        total = sum(e.weight for e in usable)
        segments: list[Segment] = []
        cumulative = 0.0
        start = 0.0
        for i, entry in enumerate(usable):
            cumulative += entry.weight
            end = TAU if i == len(usable) - 1 else cumulative / total * TAU
            segments.append(Segment(entry=entry, start=start, end=end, index=i))
            start = end

        self._segments = tuple(segments)
        self._starts = [s.start for s in segments]
        self._rotation = 0.0
        logger.debug("wheel rebuilt with %d segments", len(segments))

    def widths(self) -> list[float]:
        return [s.span for s in self._segments]

    def resolve_angle(self, angle: float) -> Segment | None:
        """Return the segment whose [start, end) holds ``angle`` mod TAU."""
        if not self._segments:
            return None
        a = normalize_angle(angle)
        i = bisect.bisect_right(self._starts, a) - 1
        return self._segments[max(i, 0)]

    @property
    def current_entry(self) -> Entry | None:
        segment = self.resolve_angle(self._rotation)
        return segment.entry if segment is not None else None

    def resize(
        self,
        width: int | None = None,
        height: int | None = None,
        pixel_ratio: float | None = None,
    ) -> WheelLayout:
        """Recompute drawing parameters. Omitted arguments keep their value."""
        current = self._layout
        self._layout = _compute_layout(
            current.width if width is None else width,
            current.height if height is None else height,
            current.pixel_ratio if pixel_ratio is None else pixel_ratio,
        )
        return self._layout

    def draw(self) -> list[SegmentArc]:
        """Screen-space arcs for the current rotation. Mutates nothing."""
        layout = self._layout
        center = (layout.center_x, layout.center_y)
        offset = POINTER_ANGLE - self._rotation
        arcs: list[SegmentArc] = []
        for seg in self._segments:
            start = seg.start + offset
            end = seg.end + offset
            mid = (start + end) / 2
            label_r = layout.radius * LABEL_RADIUS
            arcs.append(
                SegmentArc(
                    entry=seg.entry,
                    index=seg.index,
                    start=start,
                    end=end,
                    center=center,
                    radius=layout.radius,
                    label_pos=(
                        center[0] + math.cos(mid) * label_r,
                        center[1] + math.sin(mid) * label_r,
                    ),
                    label_angle=mid,
                )
            )
        return arcs
