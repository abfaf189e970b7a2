"""Command line interface for video_maker."""
from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import List

import yaml

from .builder import describe_inputs, list_images, make_video, plan_video
from .config import DEFAULT_INPUT, DEFAULT_OUTPUT, RenderConfig
from .ffmpeg import FFmpegError
from .validate import validate_args


class _Parser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with exit status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = _Parser(
        description="Video Maker - Convert JPEG images to MP4 video with crossfade transitions"
    )
    parser.add_argument(
        "-i", "--input", default=DEFAULT_INPUT,
        help="Input directory containing JPEG images (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT,
        help="Output video file (default: %(default)s)",
    )
    parser.add_argument(
        "-d", "--duration", type=int, default=5,
        help="Duration to show each image in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "-f", "--fade", type=float, default=1.0,
        help="Fade transition duration in seconds, 0 disables crossfade (default: %(default)s)",
    )
    parser.add_argument(
        "--no-ken-burns", dest="ken_burns", action="store_false",
        help="Disable Ken Burns effect (enabled by default)",
    )
    parser.add_argument("--preset", action="append", default=[], help="Path to YAML preset overriding defaults")
    parser.add_argument("--validate", action="store_true", help="Validate arguments and exit")
    parser.add_argument("--dry-run", action="store_true", help="Print the ffmpeg command instead of running it")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    prelim, _ = parser.parse_known_args(argv)
    for path in prelim.preset:
        try:
            with open(path, "r", encoding="utf8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as e:
            parser.error(f"cannot read preset {path}: {e}")
        if not isinstance(data, dict):
            parser.error(f"preset {path} must be a mapping")
        parser.set_defaults(**data)

    return parser.parse_args(argv)


def _dry_run(args: argparse.Namespace, config: RenderConfig) -> None:
    images = list_images(args.input)
    plan = plan_video(images, args.output, config)
    describe_inputs(images, config)
    print(shlex.join(plan.command()))
    print(plan.describe())


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO, format="%(message)s"
    )

    errs = validate_args(args)
    if errs:
        for e in errs:
            print(f"validation error: {e}", file=sys.stderr)
        raise SystemExit(1)
    if args.validate:
        return

    config = RenderConfig(
        image_duration=args.duration,
        fade_duration=args.fade,
        ken_burns=args.ken_burns,
    )
    try:
        if args.dry_run:
            _dry_run(args, config)
        else:
            make_video(args.input, args.output, config)
    except (OSError, FFmpegError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
