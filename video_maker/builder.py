"""Turn a folder of images into a slideshow video."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from .concat import ConcatEntry, build_concat_manifest, render_manifest, write_manifest
from .config import IMAGE_EXTS, RenderConfig
from .ffmpeg import ProgressCallback, concat_command, crossfade_command, run_ffmpeg
from .transitions import build_crossfade_graph_text
from .utils import fit_geometry, probe_image_size

MANIFEST_PLACEHOLDER = "<manifest>"


def list_images(folder: str) -> List[str]:
    """Return absolute paths of the JPEG files directly inside *folder*.

    Files are sorted by name; playback order and effect selection follow
    this order.
    """
    if not os.path.isdir(folder):
        raise FileNotFoundError(
            f"Input directory {os.path.abspath(folder)} does not exist"
        )
    names = sorted(
        f
        for f in os.listdir(folder)
        if os.path.splitext(f)[1] in IMAGE_EXTS
        and os.path.isfile(os.path.join(folder, f))
    )
    return [os.path.abspath(os.path.join(folder, f)) for f in names]


@dataclass
class RenderPlan:
    images: List[str]
    output: str
    config: RenderConfig
    graph: Optional[str] = None
    manifest: Optional[List[ConcatEntry]] = None

    @property
    def crossfade(self) -> bool:
        return self.graph is not None

    def command(self, manifest_path: str = MANIFEST_PLACEHOLDER) -> List[str]:
        if self.crossfade:
            return crossfade_command(self.images, self.graph, self.output, self.config)
        return concat_command(manifest_path, self.output, self.config)

    def describe(self) -> str:
        """Graph text or manifest contents, for dry runs."""
        if self.crossfade:
            return self.graph
        return render_manifest(self.manifest)


def plan_video(images: List[str], output: str, config: RenderConfig) -> RenderPlan:
    """Pick the render path for *images* and build its graph or manifest."""
    if not images:
        raise FileNotFoundError("No JPEG files found in input directory")
    output = os.path.abspath(output)
    count = len(images)

    if config.use_crossfade(count):
        logging.info("Creating crossfade video with %d images using xfade filter", count)
        if config.fade_duration >= config.image_duration:
            logging.warning(
                "fade %ss is not shorter than image duration %ss; transitions start at or before 0",
                config.fade_duration, config.image_duration,
            )
        graph = build_crossfade_graph_text(count, config)
        return RenderPlan(list(images), output, config, graph=graph)

    logging.info("Creating simple video with %d images (no crossfade)", count)
    if config.ken_burns:
        logging.warning(
            "Ken Burns effect is not supported without crossfade; using standard scaling instead."
        )
    manifest = build_concat_manifest(images, config.image_duration)
    return RenderPlan(list(images), output, config, manifest=manifest)


def render(plan: RenderPlan, on_progress: Optional[ProgressCallback] = None) -> str:
    """Run the encoder for *plan*; the concat manifest never outlives the call."""
    if plan.crossfade:
        run_ffmpeg(plan.command(), on_progress)
        return plan.output

    manifest_path = write_manifest(plan.manifest)
    try:
        run_ffmpeg(plan.command(manifest_path), on_progress)
    finally:
        if os.path.exists(manifest_path):
            os.remove(manifest_path)
    return plan.output


def describe_inputs(images: List[str], config: RenderConfig) -> None:
    """Log how each image will be fitted into the output frame."""
    for path in images:
        size = probe_image_size(path)
        if size is None:
            continue
        w, h, px, py = fit_geometry(size[0], size[1], config.width, config.height)
        logging.info(
            "%s: %dx%d -> %dx%d, pad (%d, %d)",
            os.path.basename(path), size[0], size[1], w, h, px, py,
        )


def make_video(
    folder: str,
    output: str,
    config: Optional[RenderConfig] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> str:
    """Build a slideshow from the JPEGs in *folder* and write it to *output*.

    Returns the absolute output path. Raises :class:`FileNotFoundError` for
    a missing folder or one without images and
    :class:`~video_maker.ffmpeg.FFmpegError` when encoding fails.
    """
    config = config or RenderConfig()
    logging.info("Starting video creation process...")
    images = list_images(folder)
    logging.info("Found %d JPEG files", len(images))
    plan = plan_video(images, output, config)
    out = render(plan, on_progress)
    logging.info("Video created successfully: %s", out)
    return out
