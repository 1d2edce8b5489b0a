"""shade-probe — sample window pixels and classify their colours."""

from shade_probe.core.color import BLACK, TRANSPARENT, WHITE, Color
from shade_probe.core.hsl import HSL
from shade_probe.core.pixels import (
    PixelError,
    PixelReply,
    PixelSource,
    Point,
    Rect,
    UnsupportedPixelFormat,
    decode_pixels,
    sample_point,
    sample_rect,
)

__all__ = [
    'BLACK',
    'HSL',
    'TRANSPARENT',
    'WHITE',
    'Color',
    'PixelError',
    'PixelReply',
    'PixelSource',
    'Point',
    'Rect',
    'UnsupportedPixelFormat',
    'decode_pixels',
    'sample_point',
    'sample_rect',
]
