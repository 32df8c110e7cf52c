"""Wheel Demo - weighted spinning-wheel picker.

Exercises spinwheel (wheel, controller, wall clock, signals) and
spinwheel-roster (roster editing, presets, JSON persistence).

Controls:
  Space    Spin
  S        Stop (decelerate now)
  Up/Down  Adjust total duration
  L/R      Adjust deceleration duration
  Click    Toggle an entry in the roster list
  J/K      Select next / previous entry
  W/Q      Raise / lower the selected entry's weight
  A/N/I    Enable all / disable all / invert
  1-4      Apply preset
  Esc      Quit
"""
from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import pygame

from spinwheel import SpinConfig

from game.session import PickerSession
from ui.constants import BG_COLOR, DURATION_STEP, FPS, SCREEN_H, SCREEN_W, WHEEL_SIZE
from ui.panel import draw_sidebar, draw_status_bar, row_at
from ui.wheel_view import draw_wheel


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weighted spinning-wheel picker")
    parser.add_argument("--roster", type=Path, default=Path.home() / ".spinwheel" / "roster.json",
                        help="roster file (created on first save)")
    parser.add_argument("--seed", type=int, default=None, help="fix the random source")
    parser.add_argument("--total", type=float, default=8.0, help="default spin length in seconds")
    parser.add_argument("--decel", type=float, default=3.0, help="default deceleration in seconds")
    parser.add_argument("--turns-per-second", type=float, default=3.0, help="cruise speed")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        config = SpinConfig(
            default_total=args.total,
            default_decel=args.decel,
            cruise_speed=args.turns_per_second * math.tau,
        )
    except ValueError as exc:
        sys.exit(f"invalid spin settings: {exc}")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wheel Demo - spinwheel")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    session = PickerSession(args.roster, config, args.seed, WHEEL_SIZE)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    session.spin()
                elif event.key == pygame.K_s:
                    session.stop()
                elif event.key == pygame.K_UP:
                    session.adjust_total(DURATION_STEP)
                elif event.key == pygame.K_DOWN:
                    session.adjust_total(-DURATION_STEP)
                elif event.key == pygame.K_RIGHT:
                    session.adjust_decel(DURATION_STEP)
                elif event.key == pygame.K_LEFT:
                    session.adjust_decel(-DURATION_STEP)
                elif event.key == pygame.K_j:
                    session.select(session.selected + 1)
                elif event.key == pygame.K_k:
                    session.select(session.selected - 1)
                elif event.key == pygame.K_w:
                    session.nudge_weight(0.5)
                elif event.key == pygame.K_q:
                    session.nudge_weight(-0.5)
                elif event.key == pygame.K_a:
                    session.enable_all()
                elif event.key == pygame.K_n:
                    session.disable_all()
                elif event.key == pygame.K_i:
                    session.invert()
                elif pygame.K_1 <= event.key <= pygame.K_4:
                    session.apply_preset(event.key - pygame.K_1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                row = row_at(event.pos, session.roster)
                if row is not None:
                    session.toggle(row)

        # --- Tick ---
        session.update()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_wheel(
            screen,
            session.wheel,
            font,
            winner_index=session.winner_index,
            since_settled=session.since_settled,
        )
        current = session.wheel.current_entry
        draw_sidebar(
            screen,
            font,
            session.roster,
            selected=session.selected,
            total=session.total,
            decel=session.decel,
            phase=session.controller.phase.value,
            stop_enabled=session.stop_enabled,
            current=current.name if current is not None else None,
            winner=session.winner_name,
            preset=session.preset,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    session.store.flush(session.roster)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
