#!/usr/bin/env python3
"""
SwipeTargets - sweep a hand through the rectangle in the shown direction.

Usage:
    python swipe_targets.py                      # camera + MediaPipe Pose
    python swipe_targets.py --source mouse       # play with the mouse as right wrist
    python swipe_targets.py --orientation down --timeout-frames 300 --seed 7
"""
import argparse
import logging
import sys

from config import CAM_INDEX_CANDIDATES, PLACEMENT_MARGIN, TARGET_SIZE, TIMEOUT_FRAMES
from game.settings import GameSettings
from game.swipe import run_game
from gesture.types import Orientation

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Swipe-through-the-target game driven by body tracking")
    parser.add_argument("--source", choices=["camera", "mouse"], default="camera",
                        help="joint source (default: camera)")
    parser.add_argument("--camera-index", type=int, action="append", dest="camera_indices",
                        help=f"camera index to try, repeatable (default: {CAM_INDEX_CANDIDATES})")
    parser.add_argument("--orientation", choices=["random"] + [o.value.lower() for o in Orientation],
                        default="random", help="swipe direction of every target (default: random)")
    parser.add_argument("--timeout-frames", type=int, default=TIMEOUT_FRAMES,
                        help=f"frames before an untouched target respawns (default: {TIMEOUT_FRAMES})")
    parser.add_argument("--target-size", type=int, default=TARGET_SIZE,
                        help=f"target edge in pixels (default: {TARGET_SIZE})")
    parser.add_argument("--margin", type=int, default=PLACEMENT_MARGIN,
                        help=f"minimum distance from the display edge (default: {PLACEMENT_MARGIN})")
    parser.add_argument("--seed", type=int, default=None, help="seed for target placement")
    parser.add_argument("--no-preview", action="store_true", help="do not open the camera preview window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    orientation = None if args.orientation == "random" else Orientation(args.orientation.upper())
    return GameSettings(
        source=args.source,
        camera_indices=args.camera_indices,
        orientation=orientation,
        target_size=args.target_size,
        margin=args.margin,
        timeout_frames=args.timeout_frames,
        seed=args.seed,
        show_camera=not args.no_preview,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    settings = settings_from_args(args)
    logger.info("Starting with %s", settings)
    score = run_game(settings)
    logger.info("Final score: %s", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
