"""
Canvas Renderer for CurveSnake

Paints the game incrementally onto a Pillow image, the same way a browser
canvas would be painted:
1. The canvas is cleared when a game starts
2. Every tick draws only the new head segment
3. Segments dropped from the tail are painted over in the trail colour
4. Apples are drawn as squares and painted over when eaten

Nothing is ever redrawn from scratch, so the canvas can be handed to a
window or a video encoder after every tick.
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain import constants
from domain.collision import Apple
from domain.game_state import GameState, TickResult
from domain.listener import GameListener
from domain.snake import Segment

logger = logging.getLogger(__name__)

FONT_CANDIDATES = ("DejaVuSansMono-Bold.ttf", "Consolas.ttf", "Menlo.ttc")


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def load_font(size: int):
    """Load a monospace font, falling back to Pillow's built-in one."""
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("No TrueType monospace font found, using Pillow default")
    return ImageFont.load_default()


class CanvasRenderer(GameListener):
    """Draws game events onto an RGB canvas image."""

    def __init__(
        self,
        width: int,
        height: int,
        pixel_ratio: float = 1.0,
        curve_steps: int = 8,
    ):
        self.pixel_ratio = pixel_ratio
        self.curve_steps = curve_steps
        self.font = load_font(int(self.scale(16)))
        self.resize(width, height)

    def scale(self, n: float) -> float:
        return n * self.pixel_ratio

    def resize(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.image = Image.new('RGB', (self.width, self.height), hex_to_rgb(constants.BACKGROUND_COLOR))
        self.draw = ImageDraw.Draw(self.image)

    # ----------------------------------------------------------------- #
    # Drawing primitives
    # ----------------------------------------------------------------- #

    def clear(self) -> None:
        self.draw.rectangle(
            [0, 0, self.width, self.height],
            fill=hex_to_rgb(constants.BACKGROUND_COLOR)
        )

    def draw_segment(self, segment: Segment, color: str, line_width: float) -> None:
        """Stroke the quadratic curve as a short polyline."""
        points = segment.sample(self.curve_steps)
        width = max(1, int(round(line_width)))
        self.draw.line(points, fill=hex_to_rgb(color), width=width, joint="curve")
        # Round caps, so consecutive strokes join without notches
        radius = width / 2
        for x, y in (points[0], points[-1]):
            self.draw.ellipse(
                [x - radius, y - radius, x + radius, y + radius],
                fill=hex_to_rgb(color)
            )

    def _apple_box(self, apple: Apple, padding: float = 0):
        x, y = apple.position
        r = apple.radius + padding
        return [x - r, y - r, x + r, y + r]

    def draw_apple(self, apple: Apple) -> None:
        self.draw.rectangle(self._apple_box(apple), fill=hex_to_rgb(constants.APPLE_COLOR))

    def erase_apple(self, apple: Apple) -> None:
        self.draw.rectangle(
            self._apple_box(apple, padding=1),
            fill=hex_to_rgb(constants.BACKGROUND_COLOR)
        )

    def write_score(self, score: int) -> None:
        x, y = self.scale(20), self.scale(20)
        text = str(score)
        # Paint over the previous value before writing the new one
        self.draw.rectangle(
            [x - 2, y - 2, x + self.scale(80), y + self.scale(24)],
            fill=hex_to_rgb(constants.BACKGROUND_COLOR)
        )
        self.draw.text((x, y), text, fill=hex_to_rgb(constants.TEXT_COLOR), font=self.font)

    def write_text(self, text: str) -> None:
        """Draw a boxed message in the middle of the canvas."""
        box_width = self.scale(len(text) * 12)
        box_height = self.scale(60)
        left = self.width / 2 - box_width / 2
        top = self.height / 2 - box_height / 2

        self.draw.rectangle(
            [left, top, left + box_width, top + box_height],
            fill=(255, 255, 255),
            outline=hex_to_rgb(constants.TEXT_COLOR),
            width=max(1, int(self.scale(2)))
        )

        bbox = self.draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        self.draw.text(
            (self.width / 2 - text_width / 2, self.height / 2 - text_height / 2),
            text,
            fill=hex_to_rgb(constants.TEXT_COLOR),
            font=self.font
        )

    def show_idle(self) -> None:
        self.clear()
        self.write_text(constants.START_MESSAGE)

    def snapshot(self) -> Image.Image:
        return self.image.copy()

    # ----------------------------------------------------------------- #
    # GameListener callbacks
    # ----------------------------------------------------------------- #

    def _fits(self, state: GameState) -> bool:
        return (int(state.bounds.width), int(state.bounds.height)) == (self.width, self.height)

    def repaint(self, state: GameState, include_head: bool = True) -> None:
        """Redraw the visible snake, the apple and the score on a clean canvas."""
        self.clear()
        segments = list(state.journey)
        if not include_head:
            segments = segments[1:]
        for segment in segments:
            self.draw_segment(segment, constants.SNAKE_COLOR, self.scale(constants.SNAKE_LINE_WIDTH))
        if state.apple is not None:
            self.draw_apple(state.apple)
        self.write_score(state.score)

    def on_started(self, state: GameState) -> None:
        if not self._fits(state):
            self.resize(state.bounds.width, state.bounds.height)
        self.clear()
        if state.apple is not None:
            self.draw_apple(state.apple)
        self.write_score(state.score)

    def on_tick(self, state: GameState, result: TickResult) -> None:
        # A resized canvas starts blank, so everything still visible is redrawn
        if not self._fits(state):
            self.resize(state.bounds.width, state.bounds.height)
            self.repaint(state, include_head=not result.game_over)
            return

        for segment in result.erased:
            self.draw_segment(segment, constants.TRAIL_COLOR, self.scale(constants.TRAIL_LINE_WIDTH))

        if result.apple_eaten is not None:
            self.erase_apple(result.apple_eaten)
        if result.apple_spawned is not None:
            self.draw_apple(result.apple_spawned)

        # The fatal segment is left undrawn; the overlay covers the moment
        if not result.game_over:
            self.draw_segment(result.head, constants.SNAKE_COLOR, self.scale(constants.SNAKE_LINE_WIDTH))

        self.write_score(result.score)

    def on_game_over(self, state: GameState, result: TickResult) -> None:
        self.write_text(constants.GAME_OVER_MESSAGE)


class FrameRecorder(GameListener):
    """
    Captures canvas snapshots from a renderer every ``every`` ticks,
    plus the first and the final frame of a run.
    """

    def __init__(self, renderer: CanvasRenderer, every: int = 1, max_frames: Optional[int] = None):
        self.renderer = renderer
        self.every = max(1, every)
        self.max_frames = max_frames
        self.frames = []

    def _capture(self) -> None:
        if self.max_frames is not None and len(self.frames) >= self.max_frames:
            return
        self.frames.append(self.renderer.snapshot())

    def on_started(self, state: GameState) -> None:
        self.frames = []
        self._capture()

    def on_tick(self, state: GameState, result: TickResult) -> None:
        if result.tick % self.every == 0 and not result.game_over:
            self._capture()

    def on_game_over(self, state: GameState, result: TickResult) -> None:
        self._capture()
