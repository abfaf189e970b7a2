import sys

import pytest

from video_maker.config import RenderConfig
from video_maker.ffmpeg import (
    FFmpegError,
    concat_command,
    crossfade_command,
    run_ffmpeg,
)


def _script(code):
    return [sys.executable, "-c", code]


def test_crossfade_command_layout():
    cfg = RenderConfig(image_duration=5, fade_duration=1.0, ffmpeg_binary="ffmpeg")
    cmd = crossfade_command(["/p/a.jpg", "/p/b.jpg"], "GRAPH", "/out.mp4", cfg)
    assert cmd[0] == "ffmpeg"
    assert cmd[1:11] == [
        "-loop", "1", "-t", "6", "-i", "/p/a.jpg",
        "-loop", "1", "-t", "6",
    ]
    i = cmd.index("-filter_complex")
    assert cmd[i + 1] == "GRAPH"
    assert cmd[i + 2:i + 4] == ["-map", "[out]"]
    assert cmd[-2:] == ["-y", "/out.mp4"]
    for flag, value in [("-c:v", "libx264"), ("-crf", "23"), ("-r", "25"),
                        ("-pix_fmt", "yuv420p"), ("-colorspace", "bt709"),
                        ("-color_primaries", "bt709"), ("-color_trc", "bt709")]:
        assert cmd[cmd.index(flag) + 1] == value


def test_fractional_input_duration():
    cfg = RenderConfig(image_duration=3, fade_duration=0.5)
    cmd = crossfade_command(["/a.jpg", "/b.jpg"], "G", "/o.mp4", cfg)
    assert cmd[cmd.index("-t") + 1] == "3.5"


def test_concat_command_layout():
    cfg = RenderConfig(ffmpeg_binary="/opt/ffmpeg")
    cmd = concat_command("/tmp/list.txt", "/out.mp4", cfg)
    assert cmd[:7] == ["/opt/ffmpeg", "-f", "concat", "-safe", "0", "-i", "/tmp/list.txt"]
    vf = cmd[cmd.index("-vf") + 1]
    assert vf == (
        "scale=1920:1080:force_original_aspect_ratio=decrease,"
        "pad=1920:1080:(ow-iw)/2:(oh-ih)/2:black"
    )
    assert "-filter_complex" not in cmd
    assert cmd[-2:] == ["-y", "/out.mp4"]


def test_run_success_relays_progress():
    code = (
        "import sys\n"
        "print('frame=1 time=00:00:01.00', file=sys.stderr)\n"
        "print('hello')\n"
        "print('no marker here', file=sys.stderr)\n"
        "print('time=00:00:02.00')\n"
    )
    seen = []
    result = run_ffmpeg(_script(code), on_progress=seen.append)
    assert result.returncode == 0
    assert sorted(seen) == ["frame=1 time=00:00:01.00", "time=00:00:02.00"]
    assert "no marker here" in result.stderr
    assert "hello" in result.stdout


def test_carriage_return_progress_split():
    code = "import sys\nsys.stderr.write('time=1\\rtime=2\\rdone\\n')\n"
    seen = []
    run_ffmpeg(_script(code), on_progress=seen.append)
    assert seen == ["time=1", "time=2"]


def test_run_failure_carries_code_and_stderr():
    code = "import sys\nprint('boom: bad filter', file=sys.stderr)\nsys.exit(3)\n"
    with pytest.raises(FFmpegError) as exc:
        run_ffmpeg(_script(code), on_progress=lambda line: None)
    assert exc.value.returncode == 3
    assert "boom: bad filter" in exc.value.stderr
    assert "exit code 3" in str(exc.value)


def test_default_progress_logs(caplog):
    code = "import sys\nprint('time=00:00:05.00', file=sys.stderr)\n"
    with caplog.at_level("INFO"):
        run_ffmpeg(_script(code))
    assert "Processing: time=00:00:05.00" in caplog.text


def test_missing_binary_raises_oserror():
    with pytest.raises(OSError):
        run_ffmpeg(["/nonexistent/ffmpeg-binary", "-version"])
