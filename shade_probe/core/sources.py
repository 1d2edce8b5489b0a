"""Concrete pixel sources: PIL screenshots and a live X11 display.

ImagePixelSource treats each loaded image as a window, which makes
screenshots and tests interchangeable with a real display.

XcbPixelSource talks to an X server through xcffib (install the `x11`
extra). The import is deferred so image-only use does not need it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
from PIL import Image

from shade_probe.core.pixels import PixelReply

# Bits per pixel reported for each PIL mode, as an X server would for a
# window of that visual.
MODE_DEPTHS = {
    '1': 1,
    'L': 8,
    'P': 8,
    'RGB': 24,
    'RGBX': 24,
    'RGBA': 32,
}

ROOT_IMAGE = 0
ALL_PLANES = 0xFFFFFFFF


class ImagePixelSource:
    """Serve pixels from in-memory PIL images keyed by window id."""

    def __init__(self, images: Mapping[int, Image.Image]):
        self.images = dict(images)

    @classmethod
    def open(cls, path: str, mode: str | None = 'RGB') -> ImagePixelSource:
        """Load a screenshot as window 0, converted to mode unless mode is None."""
        image = Image.open(path)
        image.load()
        if mode is not None:
            image = image.convert(mode)
        return cls({ROOT_IMAGE: image})

    def _image(self, window: int) -> Image.Image:
        if window not in self.images:
            raise LookupError(f'No image for window {window:#x}')
        return self.images[window]

    def get_image(self, window: int, x: int, y: int, width: int, height: int) -> PixelReply:
        image = self._image(window)
        # GetImage answers BadMatch for regions leaving the window; never pad.
        if x < 0 or y < 0 or width < 0 or height < 0 or x + width > image.width or y + height > image.height:
            raise ValueError(
                f'Region {width}x{height}+{x}+{y} is outside window {window:#x} ({image.width}x{image.height})'
            )
        depth = MODE_DEPTHS.get(image.mode, 0)
        if depth != 24:
            # Nothing to encode; the caller rejects the depth.
            return PixelReply(depth=depth, data=b'')

        rgb = np.array(image.crop((x, y, x + width, y + height)).convert('RGB'), dtype=np.uint8)
        bgrx = np.zeros((height, width, 4), dtype=np.uint8)
        bgrx[..., 0] = rgb[..., 2]
        bgrx[..., 1] = rgb[..., 1]
        bgrx[..., 2] = rgb[..., 0]
        return PixelReply(depth=depth, data=bgrx.tobytes())


class XcbPixelSource:
    """GetImage requests against an X server connection.

    Usage:

        with XcbPixelSource.connect() as source:
            colour = sample_point(source, source.root_window(), Point(10, 10))
    """

    def __init__(self, conn: Any):
        self.conn = conn

    @classmethod
    def connect(cls, display: str | None = None) -> XcbPixelSource:
        import xcffib

        try:
            conn = xcffib.connect(display=display)
        except xcffib.ConnectionException as exc:
            raise ConnectionError(f'Cannot open X display {display or "(default)"}: {exc}') from exc
        return cls(conn)

    def root_window(self) -> int:
        setup = self.conn.get_setup()
        return setup.roots[self.conn.pref_screen].root

    def get_image(self, window: int, x: int, y: int, width: int, height: int) -> PixelReply:
        from xcffib import xproto

        reply = self.conn.core.GetImage(xproto.ImageFormat.ZPixmap, window, x, y, width, height, ALL_PLANES).reply()
        return PixelReply(depth=reply.depth, data=bytes(reply.data))

    def close(self) -> None:
        self.conn.disconnect()

    def __enter__(self) -> XcbPixelSource:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
