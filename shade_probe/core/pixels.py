"""Decoding raw window pixels into Colors.

A PixelSource answers one synchronous query per call: the pixels of a
rectangle of a window, as a ZPixmap-style byte buffer with 4 bytes per
pixel in (blue, green, red, padding) order, together with the window's
colour depth. Only 24-bit true-colour windows are decoded.

Errors raised by the source itself propagate untouched. There is no retry
and no timeout at this layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Protocol

import numpy as np

from shade_probe.core.color import Color

SUPPORTED_DEPTH = 24
BYTES_PER_PIXEL = 4


class PixelError(RuntimeError):
    """Base class for pixel decoding failures."""


class UnsupportedPixelFormat(PixelError):
    def __init__(self, depth: int):
        super().__init__(f'Unsupported color depth: {depth} (only {SUPPORTED_DEPTH}-bit true colour is decoded)')
        self.depth = depth


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class PixelReply:
    """Raw answer from a pixel source."""

    depth: int
    data: bytes


class PixelSource(Protocol):
    def get_image(self, window: int, x: int, y: int, width: int, height: int) -> PixelReply: ...


def decode_pixels(data: bytes) -> list[Color]:
    """Decode a BGRX buffer into opaque Colors, in buffer order."""
    if len(data) % BYTES_PER_PIXEL:
        raise ValueError(f'Pixel buffer length {len(data)} is not a multiple of {BYTES_PER_PIXEL}')
    arr = np.frombuffer(data, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
    return [Color(r=int(px[2]), g=int(px[1]), b=int(px[0])) for px in arr]


def sample_rect(conn: PixelSource, window: int, rect: Rect) -> list[Color]:
    """Sample every pixel of rect, row-major."""
    x, y, width, height = rect
    reply = conn.get_image(window, x, y, width, height)
    if reply.depth != SUPPORTED_DEPTH:
        raise UnsupportedPixelFormat(reply.depth)
    return decode_pixels(reply.data)


def sample_point(conn: PixelSource, window: int, point: Point) -> Color:
    """Sample a single pixel."""
    pixels = sample_rect(conn, window, Rect(point[0], point[1], 1, 1))
    if len(pixels) != 1:
        raise ValueError(f'Expected 1 pixel at {tuple(point)}, source returned {len(pixels)}')
    return pixels[0]
