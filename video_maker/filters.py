"""Per-image filter chains: fit, pad, colour normalisation and zoompan."""
from __future__ import annotations

from typing import List, Tuple

from .config import RenderConfig
from .graph import Stage, source_label
from .motion import KenBurnsTrajectory, select_trajectory

COLORSPACE_FILTER = "colorspace=bt709:iall=bt601-6-625:fast=1"


def _fixed(value: float, digits: int) -> str:
    # str.format never consults the locale for "f", so the separator is "."
    return f"{value:.{digits}f}"


def fit_filters(config: RenderConfig) -> List[str]:
    """Scale into the output box keeping aspect ratio, pad the rest black."""
    w, h = config.width, config.height
    return [
        f"scale={w}:{h}:force_original_aspect_ratio=decrease",
        f"pad={w}:{h}:(ow-iw)/2:(oh-ih)/2:black",
    ]


def zoompan_filter(traj: KenBurnsTrajectory, config: RenderConfig) -> str:
    """Build a ``zoompan`` filter interpolating *traj* over one image.

    Zoom and crop offsets move linearly with the output frame number ``on``
    from the start to the end values across ``config.frame_count`` frames.
    """
    frames = config.frame_count
    sz, ez = _fixed(traj.start_zoom, 2), _fixed(traj.end_zoom, 2)
    sx, ex = _fixed(traj.start_x, 3), _fixed(traj.end_x, 3)
    sy, ey = _fixed(traj.start_y, 3), _fixed(traj.end_y, 3)
    return (
        f"zoompan=z='{sz}+({ez}-{sz})*on/{frames}':"
        f"x='iw/2-(iw/zoom/2)+({sx}+({ex}-{sx})*on/{frames})*iw':"
        f"y='ih/2-(ih/zoom/2)+({sy}+({ey}-{sy})*on/{frames})*ih':"
        f"d=1:s={config.width}x{config.height}:fps={config.fps}"
    )


def image_filters(image_index: int, config: RenderConfig) -> List[str]:
    filters = fit_filters(config) + [COLORSPACE_FILTER]
    if config.ken_burns:
        filters.append(zoompan_filter(select_trajectory(image_index), config))
    return filters


def image_label(input_index: int) -> str:
    return f"v{input_index}"


def image_stage(input_index: int, image_index: int, config: RenderConfig) -> Stage:
    return Stage(
        (source_label(input_index),),
        tuple(image_filters(image_index, config)),
        image_label(input_index),
    )


def build_image_stage(
    input_index: int, image_index: int, config: RenderConfig
) -> Tuple[str, str]:
    """Return ``(stage_text, output_label)`` for one image input."""
    stage = image_stage(input_index, image_index, config)
    return stage.render(), stage.output
