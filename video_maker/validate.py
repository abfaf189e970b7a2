"""Argument validation helpers for the video_maker CLI."""
from __future__ import annotations

from argparse import Namespace
from typing import List


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_args(args: Namespace) -> List[str]:
    """Validate parsed CLI arguments.

    Returns a list of human readable error messages. The caller should abort
    if the list is non-empty. Presets bypass argparse type conversion, so
    value types are checked here too.
    """
    errors: List[str] = []
    if isinstance(args.duration, bool) or not isinstance(args.duration, int):
        errors.append("--duration must be a whole number of seconds")
    elif args.duration <= 0:
        errors.append("--duration must be > 0")
    if not _is_number(args.fade):
        errors.append("--fade must be a number of seconds")
    elif args.fade < 0:
        errors.append("--fade must be >= 0")
    if not isinstance(args.ken_burns, bool):
        errors.append("ken_burns must be true or false")
    return errors
