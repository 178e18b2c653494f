"""Demo: move a square with WASD, report jumps and clicks."""

from __future__ import annotations

import argparse
import sys

import pygame

from proto_engine.engine import Engine, EngineError

SPEED = 300.0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="proto_engine", description=__doc__)
    parser.parse_args(argv)

    try:
        engine = Engine(800, 600, "Input Test")
    except EngineError as exc:
        print(exc, file=sys.stderr)
        return 1

    x, y = 400.0, 300.0
    with engine:
        while engine.running:
            engine.update_delta_time()
            engine.poll_events()

            inp = engine.input
            dt = engine.delta_time
            horizontal = inp.get_axis(pygame.KSCAN_A, pygame.KSCAN_D)
            vertical = inp.get_axis(pygame.KSCAN_W, pygame.KSCAN_S)
            x += horizontal * SPEED * dt
            y += vertical * SPEED * dt

            if inp.is_key_pressed(pygame.KSCAN_SPACE):
                print("Jump!")
            if inp.is_mouse_button_pressed(0):
                print(f"Click at ({inp.mouse_x}, {inp.mouse_y})")

            engine.clear()
            engine.draw_rect(x - 50, y - 50, 100, 100)
            engine.present()
            engine.limit_frame_rate()
    return 0


if __name__ == "__main__":
    sys.exit(main())