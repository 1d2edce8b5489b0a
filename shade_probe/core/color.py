"""Fixed-point ARGB colour value with distance, interpolation and darkness checks.

One canonical type carries all four channels. Sources with no alpha channel
(24-bit screen pixels) produce fully opaque colours.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

import numpy as np

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


def _compact(n: int) -> bool:
    return (n >> 4) == (n & 0xF)


def _lerp(a: int, b: int, x: np.float32) -> int:
    """Ceil-rounded linear step from a to b, saturated into a channel."""
    v = np.ceil((np.float32(1.0) - x) * np.float32(a) + x * np.float32(b))
    if np.isnan(v):
        return 0
    return int(min(max(v, 0.0), 255.0))


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel colour. Alpha defaults to opaque."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> Color:
        return cls(r=r, g=g, b=b, a=a)

    @classmethod
    def from_pixel(cls, pixel: bytes) -> Color:
        """Decode one BGRX pixel. The padding byte is ignored."""
        return cls(r=pixel[2], g=pixel[1], b=pixel[0], a=0xFF)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse #rgb, #rrggbb or #aarrggbb (hash optional)."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f'Invalid hex colour: {text!r}')
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) == 6:
            digits = 'ff' + digits
        value = int(digits, 16)
        return cls(r=(value >> 16) & 0xFF, g=(value >> 8) & 0xFF, b=value & 0xFF, a=(value >> 24) & 0xFF)

    def __int__(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self, compact: bool = False, alpha: bool = False) -> str:
        """Web hex form. With compact=True, compactable colours use 3 digits."""
        if compact and self.is_compactable() and not alpha:
            return f'#{self.r & 0xF:x}{self.g & 0xF:x}{self.b & 0xF:x}'
        prefix = f'{self.a:02x}' if alpha else ''
        return f'#{prefix}{self.r:02x}{self.g:02x}{self.b:02x}'

    def is_compactable(self) -> bool:
        """True if every RGB channel repeats one hex digit (0xee, 0x33, ...)."""
        return _compact(self.r) and _compact(self.g) and _compact(self.b)

    def distance(self, other: Color) -> float:
        """Euclidean distance in RGB space. Alpha is not part of the metric."""
        return math.sqrt((other.r - self.r) ** 2 + (other.g - self.g) ** 2 + (other.b - self.b) ** 2)

    def is_dark(self) -> bool:
        """True if the colour is nearer to black than to white.

        This is a nearest-reference classification in RGB space, not a
        luminance threshold: pure green (0, 255, 0) counts as dark here even
        though its relative luminance is high.
        """
        return self.distance(BLACK) < self.distance(WHITE)

    def interpolate(self, other: Color, amount: float) -> Color:
        """Step towards other by amount, rounding each channel up.

        amount must lie in [0, 1]; it is not validated. Alpha is kept from self.
        """
        x = np.float32(amount)
        return Color(
            r=_lerp(self.r, other.r, x),
            g=_lerp(self.g, other.g, x),
            b=_lerp(self.b, other.b, x),
            a=self.a,
        )

    def lighten(self, amount: float) -> Color:
        return self.interpolate(WHITE, amount)

    def darken(self, amount: float) -> Color:
        return self.interpolate(BLACK, amount)


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(0xFF, 0xFF, 0xFF)
