"""Wheel renderer: turns SegmentWheel.draw() arcs into pygame polygons."""
from __future__ import annotations

import math

import pygame

from spinwheel import SegmentArc, SegmentWheel
from spinwheel.easing import ease_out
from spinwheel.wheel import POINTER_ANGLE

from ui.constants import (
    BORDER,
    FLASH_TIME,
    HUB_COLOR,
    POINTER_COLOR,
    SEGMENT_COLORS,
    WINNER_COLOR,
)

ARC_STEP = math.radians(3)


def _arc_points(arc: SegmentArc) -> list[tuple[float, float]]:
    cx, cy = arc.center
    steps = max(2, math.ceil((arc.end - arc.start) / ARC_STEP))
    points = [(cx, cy)]
    for i in range(steps + 1):
        a = arc.start + (arc.end - arc.start) * i / steps
        points.append((cx + math.cos(a) * arc.radius, cy + math.sin(a) * arc.radius))
    return points


def _blend(color: tuple[int, int, int], target: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return tuple(round(c + (g - c) * t) for c, g in zip(color, target))  # type: ignore[return-value]


def draw_wheel(
    surface: pygame.Surface,
    wheel: SegmentWheel,
    font: pygame.font.Font,
    winner_index: int | None = None,
    since_settled: float = 0.0,
) -> None:
    """Draw segments, labels, hub and pointer for the wheel's current rotation."""
    arcs = wheel.draw()
    layout = wheel.layout
    if not arcs:
        pygame.draw.circle(surface, BORDER, (layout.center_x, layout.center_y), layout.radius, 2)
        return

    # Winner pulses from gold back to its own color.
    flash = 0.0
    if winner_index is not None and since_settled < FLASH_TIME:
        flash = 1.0 - ease_out(since_settled / FLASH_TIME)

    for arc in arcs:
        fill = SEGMENT_COLORS[arc.index % len(SEGMENT_COLORS)]
        if arc.index == winner_index:
            fill = _blend(fill, WINNER_COLOR, max(flash, 0.35))
        points = _arc_points(arc)
        pygame.draw.polygon(surface, fill, points)
        if len(arcs) > 1:
            pygame.draw.polygon(surface, BORDER, points, 1)

        label = font.render(arc.entry.name, True, (20, 20, 30))
        label = pygame.transform.rotate(label, -math.degrees(arc.label_angle))
        rect = label.get_rect(center=(round(arc.label_pos[0]), round(arc.label_pos[1])))
        surface.blit(label, rect)

    cx, cy = layout.center_x, layout.center_y
    pygame.draw.circle(surface, HUB_COLOR, (cx, cy), layout.radius * 0.08)

    tip_r = layout.radius * 0.9
    base_r = layout.radius * 1.04
    half = math.radians(4)
    tip = (cx + math.cos(POINTER_ANGLE) * tip_r, cy + math.sin(POINTER_ANGLE) * tip_r)
    left = (cx + math.cos(POINTER_ANGLE - half) * base_r, cy + math.sin(POINTER_ANGLE - half) * base_r)
    right = (cx + math.cos(POINTER_ANGLE + half) * base_r, cy + math.sin(POINTER_ANGLE + half) * base_r)
    pygame.draw.polygon(surface, POINTER_COLOR, [tip, left, right])
