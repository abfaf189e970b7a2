"""Encoder command lines and the child-process runner."""
from __future__ import annotations

import logging
import queue
import subprocess
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .config import PROGRESS_MARKER, RenderConfig
from .filters import fit_filters
from .graph import OUT_LABEL
from .utils import format_seconds

ProgressCallback = Callable[[str], None]

_EOF = object()


class FFmpegError(RuntimeError):
    """The encoder exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"FFmpeg failed with exit code {returncode}: {stderr}")


@dataclass
class FFmpegResult:
    returncode: int
    stdout: str
    stderr: str


def _export_params(config: RenderConfig) -> List[str]:
    """Fixed H.264 output profile shared by every render path."""
    return [
        "-c:v", "libx264",
        "-crf", str(config.crf),
        "-r", str(config.fps),
        "-pix_fmt", "yuv420p",
        "-colorspace", "bt709",
        "-color_primaries", "bt709",
        "-color_trc", "bt709",
    ]


def crossfade_command(
    images: Sequence[str], graph_text: str, output: str, config: RenderConfig
) -> List[str]:
    """Loop every image for ``config.input_duration`` and map ``[out]``."""
    cmd = [config.ffmpeg_binary]
    duration = format_seconds(config.input_duration)
    for path in images:
        cmd += ["-loop", "1", "-t", duration, "-i", path]
    cmd += ["-filter_complex", graph_text, "-map", f"[{OUT_LABEL}]"]
    cmd += _export_params(config)
    cmd += ["-y", output]
    return cmd


def concat_command(manifest_path: str, output: str, config: RenderConfig) -> List[str]:
    cmd = [
        config.ffmpeg_binary,
        "-f", "concat",
        "-safe", "0",
        "-i", manifest_path,
        "-vf", ",".join(fit_filters(config)),
    ]
    cmd += _export_params(config)
    cmd += ["-y", output]
    return cmd


def _log_progress(line: str) -> None:
    logging.info("Processing: %s", line)


def _drain(stream, lines: List[str], events: "queue.Queue") -> None:
    # text mode splits on "\r" too, so each stats refresh arrives as a line
    try:
        for raw in iter(stream.readline, ""):
            line = raw.rstrip("\n")
            lines.append(line)
            if PROGRESS_MARKER in line:
                events.put(line)
    finally:
        stream.close()
        events.put(_EOF)


def run_ffmpeg(
    cmd: Sequence[str], on_progress: Optional[ProgressCallback] = None
) -> FFmpegResult:
    """Run *cmd* to completion, relaying progress lines to *on_progress*.

    stdout and stderr are drained by one thread each; progress lines from
    both are funnelled through a single queue and delivered on the calling
    thread. Raises :class:`FFmpegError` on a non-zero exit status.
    """
    notify = on_progress or _log_progress
    logging.debug("running: %s", subprocess.list2cmdline(list(cmd)))
    proc = subprocess.Popen(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf8",
        errors="replace",
    )
    out_lines: List[str] = []
    err_lines: List[str] = []
    events: "queue.Queue" = queue.Queue()
    readers = [
        threading.Thread(target=_drain, args=(proc.stdout, out_lines, events), daemon=True),
        threading.Thread(target=_drain, args=(proc.stderr, err_lines, events), daemon=True),
    ]
    for t in readers:
        t.start()

    try:
        pending = len(readers)
        while pending:
            item = events.get()
            if item is _EOF:
                pending -= 1
                continue
            notify(item)
    except BaseException:
        proc.kill()
        raise
    finally:
        for t in readers:
            t.join()
        returncode = proc.wait()

    stderr = "\n".join(err_lines)
    if returncode != 0:
        raise FFmpegError(returncode, stderr)
    return FFmpegResult(returncode, "\n".join(out_lines), stderr)
