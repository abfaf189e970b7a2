"""Turn a folder of JPEG images into an MP4 slideshow.

ffmpeg does the encoding; this package enumerates the images, builds the
crossfade/Ken Burns filter graph or the concat manifest, and runs ffmpeg.
"""

__all__ = ["make_video"]


def make_video(*args, **kwargs):
    from .builder import make_video as _make_video

    return _make_video(*args, **kwargs)
