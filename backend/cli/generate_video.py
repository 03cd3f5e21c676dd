#!/usr/bin/env python3
"""
CLI tool to record a simulated CurveSnake game as a video

Usage:
    python generate_video.py --seed <seed>

Examples:
    # Record a seeded autopilot run to the local videos directory
    python generate_video.py --seed 42

    # Custom output path
    python generate_video.py --seed 42 --output ./my_video.mp4

    # Custom canvas and video settings
    python generate_video.py --seed 7 --width 1280 --height 720 --fps 60 --frame-every 1
"""

import os
import sys
import argparse
import logging
from dataclasses import replace

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config import GameConfig
from main import build_player
from services.video_generator import SnakeVideoGenerator, get_video_local_path, DEFAULT_MAX_TICKS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Record a simulated CurveSnake game as an MP4 video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    defaults = GameConfig.from_env()

    # Game options
    parser.add_argument(
        '--seed',
        type=int,
        default=defaults.seed if defaults.seed is not None else 0,
        help='Random seed for apples and the autopilot (default: 0)'
    )
    parser.add_argument(
        '--player',
        type=str,
        default='random',
        help='Player to steer with (default: random)'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f'Maximum simulated ticks (default: {DEFAULT_MAX_TICKS})'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: local videos directory)'
    )

    # Video settings
    parser.add_argument(
        '--fps',
        type=int,
        default=30,
        help='Frames per second (default: 30)'
    )
    parser.add_argument(
        '--frame-every',
        type=int,
        default=2,
        help='Capture one frame every N ticks (default: 2)'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=int(defaults.width),
        help=f'Canvas width in pixels (default: {int(defaults.width)})'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=int(defaults.height),
        help=f'Canvas height in pixels (default: {int(defaults.height)})'
    )

    args = parser.parse_args()

    try:
        config = replace(defaults, width=args.width, height=args.height, seed=args.seed)
        config.validate()

        if not args.output:
            args.output = get_video_local_path(str(args.seed))

        generator = SnakeVideoGenerator(fps=args.fps, frame_every=args.frame_every)

        logger.info(f"Recording game with seed {args.seed}...")
        video_path = generator.generate_video(
            config,
            output_path=args.output,
            player=build_player(args.player, config),
            max_ticks=args.max_ticks
        )

        logger.info(f"[OK] Video generated successfully: {video_path}")
        logger.info("Done!")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
