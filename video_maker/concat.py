"""Manifest for the concat demuxer (no-crossfade path)."""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .utils import format_seconds


@dataclass(frozen=True)
class ConcatEntry:
    path: str
    duration: Optional[float] = None

    def lines(self) -> List[str]:
        """Directive lines for this entry in concat demuxer syntax."""
        quoted = self.path.replace("'", "'\\''")
        out = [f"file '{quoted}'"]
        if self.duration is not None:
            out.append(f"duration {format_seconds(self.duration)}")
        return out


def build_concat_manifest(
    images: Sequence[str], image_duration: float
) -> List[ConcatEntry]:
    """Pair every image with ``image_duration``.

    The last image is repeated once without a duration; the demuxer
    otherwise ignores the final ``duration`` directive.
    """
    if not images:
        raise ValueError("manifest needs at least one image")
    entries = [ConcatEntry(path, image_duration) for path in images]
    entries.append(ConcatEntry(images[-1]))
    return entries


def render_manifest(entries: Sequence[ConcatEntry]) -> str:
    return "\n".join(line for e in entries for line in e.lines()) + "\n"


def write_manifest(entries: Sequence[ConcatEntry]) -> str:
    """Write *entries* to a new temporary file and return its path.

    Undecodable file name bytes are written back unchanged. The caller owns
    the file and must remove it; on a failed write it is removed here.
    """
    fd, path = tempfile.mkstemp(prefix="video_maker_", suffix=".txt")
    try:
        with os.fdopen(fd, "w", encoding="utf8", errors="surrogateescape") as fh:
            fh.write(render_manifest(entries))
    except BaseException:
        os.remove(path)
        raise
    return path
