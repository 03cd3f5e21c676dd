#!/usr/bin/env python3
"""
Play CurveSnake in a window.

Controls
- Left / A: turn left, Right / D: turn right (release to go straight)
- Mouse: steer towards the pointer (with --pointer)
- Click or Space: start / restart
- Esc or window close: quit

Usage:
    python play.py
    python play.py --width 1280 --height 720 --pointer
"""

import os
import sys
import argparse
import logging
from dataclasses import replace

import pygame

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config import GameConfig
from domain.collision import Bounds
from domain.game_state import Phase
from main import SnakeGame
from players import KeyboardPlayer, PointerPlayer
from services.canvas_renderer import CanvasRenderer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

FPS = 60


class PlayWindow:
    """Wires pygame input and display to a SnakeGame and its renderer."""

    def __init__(self, config: GameConfig, use_pointer: bool = False):
        self.config = config
        self.screen = pygame.display.set_mode((int(config.width), int(config.height)))
        pygame.display.set_caption("CurveSnake - Left/Right or A/D | Click: start | Esc: quit")

        self.game = SnakeGame(
            config=config,
            bounds_provider=lambda: Bounds(*self.screen.get_size())
        )
        self.renderer = CanvasRenderer(int(config.width), int(config.height), pixel_ratio=config.pixel_ratio)
        self.game.add_listener(self.renderer)

        self.keyboard = KeyboardPlayer(self.game.heading, turn_rate=config.turn_rate)
        self.pointer = PointerPlayer(turn_rate=config.turn_rate) if use_pointer else None

        self.renderer.show_idle()

    def start(self) -> None:
        if self.game.phase != Phase.RUNNING:
            self.game.start()

    def handle_event(self, event) -> bool:
        """Returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.start()
            else:
                self.keyboard.press(pygame.key.name(event.key))

        elif event.type == pygame.KEYUP:
            self.keyboard.release(pygame.key.name(event.key))

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.start()

        elif event.type == pygame.MOUSEMOTION and self.pointer is not None:
            self.pointer.point_at(*event.pos)

        return True

    def step(self) -> None:
        if self.game.phase != Phase.RUNNING:
            return
        if self.pointer is not None and self.pointer.target is not None:
            self.game.heading.set(self.pointer.get_heading(self.game.state))
        self.game.tick()

    def draw(self) -> None:
        image = self.renderer.image
        surface = pygame.image.frombytes(image.tobytes(), image.size, "RGB")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def loop(self) -> None:
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            self.step()
            self.draw()


def main():
    parser = argparse.ArgumentParser(description="Play CurveSnake in a window")
    defaults = GameConfig.from_env()
    parser.add_argument("--width", type=int, default=int(defaults.width),
                        help="Window width in pixels")
    parser.add_argument("--height", type=int, default=int(defaults.height),
                        help="Window height in pixels")
    parser.add_argument("--pointer", action="store_true",
                        help="Steer towards the mouse pointer")
    args = parser.parse_args()

    config = replace(defaults, width=args.width, height=args.height)

    pygame.init()
    try:
        PlayWindow(config, use_pointer=args.pointer).loop()
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
