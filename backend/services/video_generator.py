"""
Video Generation Service for CurveSnake runs

This service generates MP4 videos of a headless game by:
1. Running a seeded simulation with a CanvasRenderer attached
2. Capturing canvas snapshots every few ticks
3. Encoding the frames to video using MoviePy/FFmpeg

Runs are reproducible: the same config (including seed) and player give
the same video.
"""

import os
import logging
import tempfile
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

import sys
backend_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if backend_path not in sys.path:
    sys.path.insert(0, backend_path)

from config import GameConfig  # noqa: E402
from main import run_simulation  # noqa: E402
from players import Player  # noqa: E402
from services.canvas_renderer import CanvasRenderer, FrameRecorder  # noqa: E402

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 30
DEFAULT_FRAME_EVERY = 2  # one video frame every N ticks (60 ticks/s -> 30 fps)
DEFAULT_MAX_TICKS = 3000


class SnakeVideoGenerator:
    """Generate MP4 videos from simulated CurveSnake games"""

    def __init__(
        self,
        fps: int = DEFAULT_FPS,
        frame_every: int = DEFAULT_FRAME_EVERY,
        hold_final_frames: int = 30
    ):
        self.fps = fps
        self.frame_every = frame_every
        # Repeat the last frame so the "Game over!" box stays on screen
        self.hold_final_frames = hold_final_frames

    def record_frames(
        self,
        config: GameConfig,
        player: Optional[Player] = None,
        max_ticks: int = DEFAULT_MAX_TICKS
    ) -> List[Image.Image]:
        """Run one game and return the captured canvas frames."""
        renderer = CanvasRenderer(int(config.width), int(config.height), pixel_ratio=config.pixel_ratio)
        recorder = FrameRecorder(renderer, every=self.frame_every)

        # The recorder must follow the renderer so it sees finished frames
        summary = run_simulation(
            config,
            player=player,
            max_ticks=max_ticks,
            listeners=[renderer, recorder]
        )
        logger.info(
            f"Simulated {summary['ticks']} ticks (score {summary['score']}, "
            f"phase {summary['phase']}), captured {len(recorder.frames)} frames"
        )
        return recorder.frames

    def encode(self, frames: List[Image.Image], output_path: str) -> str:
        """Write frames to an MP4 file and return its path."""
        if not frames:
            raise ValueError("Cannot encode a video without frames")

        arrays = [np.array(frame) for frame in frames]
        arrays.extend([arrays[-1]] * self.hold_final_frames)

        logger.info(f"Encoding {len(arrays)} frames at {self.fps} fps to {output_path}")
        clip = ImageSequenceClip(arrays, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )
        return output_path

    def generate_video(
        self,
        config: GameConfig,
        output_path: Optional[str] = None,
        player: Optional[Player] = None,
        max_ticks: int = DEFAULT_MAX_TICKS
    ) -> str:
        """
        Simulate a game and save it as a video

        Args:
            config: Game settings; set a seed for a reproducible run
            output_path: Optional output path (if None, uses temp file)
            player: Steering logic (defaults to the random autopilot)
            max_ticks: Upper limit on simulated ticks

        Returns:
            Path to the generated video file
        """
        frames = self.record_frames(config, player=player, max_ticks=max_ticks)

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"curvesnake_{config.seed}.mp4")

        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        self.encode(frames, output_path)
        logger.info(f"Video created successfully at {output_path}")
        return output_path


def get_video_local_path(name: str) -> str:
    """
    Get the local path for a named video

    Args:
        name: Video name (e.g. the seed used)

    Returns:
        Local path to the video file
    """
    return os.path.join(backend_path, "videos", f"curvesnake_{name}.mp4")
