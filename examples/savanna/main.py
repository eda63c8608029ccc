"""Savanna — tick-wild Pygame grid view

Rabbits, foxes and bears on a grid, one colored tile per animal.

Controls:
  Space   Pause / Resume
  R       Reset (same seed)
  1-4     Speed (1 / 5 / 10 / 30 steps per second)
  Escape  Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from tick_wild import Simulator

TITLE = "Savanna — tick-wild"
BG_COLOR = (235, 235, 235)
HUD_COLOR = (30, 30, 40)
HUD_H = 28
FPS = 60
SPEEDS = {pygame.K_1: 1, pygame.K_2: 5, pygame.K_3: 10, pygame.K_4: 30}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Savanna — tick-wild visual demo")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--depth", type=int, default=80, help="Field rows (default: 80)")
    p.add_argument("--width", type=int, default=120, help="Field columns (default: 120)")
    p.add_argument("--cell", type=int, default=6, help="Cell size in pixels (default: 6)")
    return p.parse_args()


def _draw_field(screen: pygame.Surface, sim: Simulator, cell: int) -> None:
    for loc, animal in sim.field.occupants():
        rect = (loc.col * cell, HUD_H + loc.row * cell, cell, cell)
        pygame.draw.rect(screen, animal.species.color, rect)


def _draw_hud(screen: pygame.Surface, font: pygame.font.Font, sim: Simulator,
              paused: bool) -> None:
    text = f"step {sim.step_number}   {sim.census()}"
    if paused:
        text += "   [paused]"
    elif not sim.is_viable():
        text += "   [collapsed]"
    screen.blit(font.render(text, True, HUD_COLOR), (8, 6))


def main() -> None:
    args = parse_args()
    sim = Simulator(depth=args.depth, width=args.width, seed=args.seed)
    sim.populate()

    pygame.init()
    screen = pygame.display.set_mode(
        (args.width * args.cell, HUD_H + args.depth * args.cell)
    )
    pygame.display.set_caption(TITLE)
    font = pygame.font.SysFont("monospace", 14)
    clock = pygame.time.Clock()

    paused = False
    steps_per_sec = 10
    accumulator = 0.0

    while True:
        dt = clock.tick(FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit()
                    sys.exit()
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    sim.reset()
                elif event.key in SPEEDS:
                    steps_per_sec = SPEEDS[event.key]

        if not paused and sim.is_viable():
            accumulator += dt
            interval = 1.0 / steps_per_sec
            while accumulator >= interval:
                sim.step()
                accumulator -= interval
        else:
            accumulator = 0.0

        screen.fill(BG_COLOR)
        _draw_field(screen, sim, args.cell)
        _draw_hud(screen, font, sim, paused)
        pygame.display.flip()


if __name__ == "__main__":
    main()
