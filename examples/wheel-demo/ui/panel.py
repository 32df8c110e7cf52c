"""Roster sidebar and bottom status bar."""
from __future__ import annotations

import pygame

from spinwheel_roster import Roster

from ui.constants import (
    BORDER,
    LABEL_COLOR,
    LIST_TOP,
    ROW_H,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    STOP_ON,
    TEXT_COLOR,
    TEXT_DIM,
    WHEEL_SIZE,
    WINNER_COLOR,
)


def row_at(pos: tuple[int, int], roster: Roster) -> int | None:
    """Index of the roster row under a mouse position, if any."""
    x, y = pos
    if x < SCREEN_W - SIDEBAR_W or y < LIST_TOP:
        return None
    index = (y - LIST_TOP) // ROW_H
    return index if index < len(roster) else None


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    roster: Roster,
    selected: int,
    total: float,
    decel: float,
    phase: str,
    stop_enabled: bool,
    current: str | None,
    winner: str | None,
    preset: str | None,
) -> None:
    """Draw right-side info panel with durations, status and the roster list."""
    x = SCREEN_W - SIDEBAR_W
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, WHEEL_SIZE))
    pygame.draw.line(surface, BORDER, (x, 0), (x, WHEEL_SIZE))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render(f"Total: {total:.1f}s  Decel: {decel:.1f}s", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Phase: {phase}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    stop_label = "Stop: ready" if stop_enabled else "Stop: --"
    surface.blit(font.render(stop_label, True, STOP_ON if stop_enabled else TEXT_DIM), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Now: {current or '-'}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Winner: {winner or '-'}", True, WINNER_COLOR if winner else TEXT_DIM), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Preset: {preset or 'custom'}", True, LABEL_COLOR), (cx, cy))

    for i, name in enumerate(roster.names):
        y = LIST_TOP + i * ROW_H
        if y + ROW_H > WHEEL_SIZE:
            break
        active = roster.is_active(name)
        mark = "[x]" if active else "[ ]"
        prefix = ">" if i == selected else " "
        color = TEXT_COLOR if active else TEXT_DIM
        text = f"{prefix}{mark} {name}  x{roster.weight(name):g}"
        surface.blit(font.render(text, True, color), (cx, y))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, BORDER, (0, y), (SCREEN_W, y))

    text = (
        "[Space] Spin  [S] Stop  [Up/Dn] Total  [L/R] Decel  [Click] Toggle  [J/K] Select  "
        "[W/Q] Weight  [A/N/I] All/None/Invert  [1-4] Preset  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
