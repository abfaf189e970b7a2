"""Crossfade chaining between per-image streams."""
from __future__ import annotations

from .config import RenderConfig
from .filters import image_filters, image_label
from .graph import OUT_LABEL, FilterGraph, source_label
from .utils import format_seconds

TRANSITION = "fade"


def xfade_offset(index: int, config: RenderConfig) -> float:
    """Start time of transition ``index`` on the chained timeline.

    Each transition is placed one ``image - fade`` interval after the
    previous one. Exact for the first transition only; later ones assume
    every upstream segment keeps that same unfaded length.
    """
    step = config.image_duration - config.fade_duration
    return step * (index + 1)


def xfade_filter(index: int, config: RenderConfig) -> str:
    return (
        f"xfade=transition={TRANSITION}"
        f":duration={format_seconds(config.fade_duration)}"
        f":offset={format_seconds(xfade_offset(index, config))}"
    )


def build_crossfade_graph(image_count: int, config: RenderConfig) -> FilterGraph:
    """Build per-image stages plus a left-to-right ``xfade`` chain.

    Input ``i`` becomes ``[v{i}]``; transitions write ``[x{i}]`` and the last
    one writes ``[out]``.
    """
    if image_count < 2:
        raise ValueError("crossfade needs at least two images")
    if config.fade_duration <= 0:
        raise ValueError("crossfade needs a positive fade duration")

    graph = FilterGraph()
    for i in range(image_count):
        graph.add([source_label(i)], image_filters(i, config), image_label(i))

    current = image_label(0)
    last = image_count - 2
    for i in range(image_count - 1):
        out = OUT_LABEL if i == last else f"x{i}"
        current = graph.add(
            [current, image_label(i + 1)], [xfade_filter(i, config)], out
        )
    return graph


def build_crossfade_graph_text(image_count: int, config: RenderConfig) -> str:
    return build_crossfade_graph(image_count, config).serialize()
