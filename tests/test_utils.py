import pytest
from PIL import Image

from video_maker.utils import fit_geometry, format_seconds, probe_image_size


@pytest.mark.parametrize(
    "src, expected",
    [
        ((4000, 3000), (1440, 1080, 240, 0)),
        ((1920, 1080), (1920, 1080, 0, 0)),
        ((3000, 1000), (1920, 640, 0, 220)),
        ((960, 540), (1920, 1080, 0, 0)),
        ((1080, 1920), (608, 1080, 656, 0)),
    ],
)
def test_fit_geometry(src, expected):
    assert fit_geometry(src[0], src[1], 1920, 1080) == expected


def test_fit_geometry_rejects_empty():
    with pytest.raises(ValueError):
        fit_geometry(0, 10, 1920, 1080)


def test_format_seconds():
    assert format_seconds(4.0) == "4"
    assert format_seconds(6) == "6"
    assert format_seconds(0.5) == "0.5"
    assert format_seconds(3.25) == "3.25"


def test_probe_image_size(tmp_path):
    path = tmp_path / "a.jpg"
    Image.new("RGB", (33, 21)).save(path)
    assert probe_image_size(str(path)) == (33, 21)


def test_probe_unreadable(tmp_path):
    path = tmp_path / "a.jpg"
    path.write_bytes(b"garbage")
    assert probe_image_size(str(path)) is None
