"""Configuration helpers for video_maker."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

# Encoder binary (can be overridden via environment)
FFMPEG_BINARY = os.environ.get("FFMPEG_BINARY") or "ffmpeg"

IMAGE_EXTS = (".jpg", ".jpeg")

DEFAULT_INPUT = "./images"
DEFAULT_OUTPUT = "./output.mp4"

PROGRESS_MARKER = "time="


@dataclass(frozen=True)
class RenderConfig:
    """Settings for a single render run."""

    image_duration: int = 5
    fade_duration: float = 1.0
    ken_burns: bool = True
    width: int = 1920
    height: int = 1080
    fps: int = 25
    crf: int = 23
    ffmpeg_binary: str = field(default_factory=lambda: FFMPEG_BINARY)

    @property
    def frame_count(self) -> int:
        """Frames each image is shown for."""
        return int(round(self.image_duration * self.fps))

    @property
    def input_duration(self) -> float:
        """Per-input length, extended so neighbouring streams overlap."""
        return self.image_duration + self.fade_duration

    def use_crossfade(self, image_count: int) -> bool:
        return image_count >= 2 and self.fade_duration > 0
