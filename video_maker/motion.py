"""Ken Burns pan/zoom trajectories."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class KenBurnsTrajectory:
    """Linear pan/zoom path over one image.

    ``x``/``y`` offsets are fractions of the image width/height, measured from
    the centred crop window.
    """

    start_zoom: float
    end_zoom: float
    start_x: float
    end_x: float
    start_y: float
    end_y: float


KEN_BURNS_EFFECTS: Tuple[KenBurnsTrajectory, ...] = (
    # zoom in, left to right
    KenBurnsTrajectory(1.0, 1.2, 0.0, 0.1, 0.0, 0.0),
    # zoom in, right to left
    KenBurnsTrajectory(1.0, 1.2, 0.1, 0.0, 0.0, 0.0),
    # zoom in, top to bottom
    KenBurnsTrajectory(1.0, 1.2, 0.0, 0.0, 0.0, 0.1),
    # zoom in, bottom to top
    KenBurnsTrajectory(1.0, 1.2, 0.0, 0.0, 0.1, 0.0),
    # zoom out from centre
    KenBurnsTrajectory(1.2, 1.0, 0.0, 0.0, 0.0, 0.0),
    # diagonal, top-left to bottom-right
    KenBurnsTrajectory(1.0, 1.15, 0.0, 0.05, 0.0, 0.05),
    # diagonal, top-right to bottom-left
    KenBurnsTrajectory(1.0, 1.15, 0.05, 0.0, 0.0, 0.05),
    # subtle zoom with slight pan
    KenBurnsTrajectory(1.0, 1.1, 0.0, 0.02, 0.0, 0.02),
)


def select_trajectory(image_index: int) -> KenBurnsTrajectory:
    """Return the trajectory for the image at ``image_index``.

    Selection cycles through :data:`KEN_BURNS_EFFECTS`, so the same image
    order always yields the same motion.
    """
    if image_index < 0:
        raise ValueError("image_index must be >= 0")
    return KEN_BURNS_EFFECTS[image_index % len(KEN_BURNS_EFFECTS)]
