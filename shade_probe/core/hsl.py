"""Hue/saturation/lightness derived from a Color.

Follows https://en.wikipedia.org/wiki/HSL_and_HSV#From_RGB with whole-number
rounding: h in degrees [0, 360), s and l as percentages [0, 100].
Arithmetic is done in float32 so results match the reference values exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from shade_probe.core.color import Color

_F0 = np.float32(0.0)
_F1 = np.float32(1.0)
_F2 = np.float32(2.0)
_F100 = np.float32(100.0)


def _round(x: np.float32) -> np.float32:
    """Round half away from zero. Python's round() is half-to-even."""
    if x < 0:
        return -_round(-x)
    floor = np.floor(x)
    return floor + _F1 if x - floor >= np.float32(0.5) else floor


@dataclass(frozen=True)
class HSL:
    h: float
    s: float
    l: float  # noqa: E741

    @classmethod
    def from_rgb(cls, rgb: Color) -> HSL:
        r = np.float32(rgb.r) / np.float32(255.0)
        g = np.float32(rgb.g) / np.float32(255.0)
        b = np.float32(rgb.b) / np.float32(255.0)
        hi = max(r, g, b)
        lo = min(r, g, b)
        h = _F0
        s = _F0
        l = _round((hi + lo) / _F2 * _F100)  # noqa: E741

        if hi != lo:
            delta = hi - lo
            # Compares the rounded percentage, not the 0..1 lightness.
            # Suspect, but kept so existing values do not shift.
            if l > np.float32(50.0):
                s = delta / (_F2 - hi - lo) * _F100
            else:
                s = delta / (hi + lo) * _F100

            if hi == r:
                h = (g - b) / delta + (np.float32(6.0) if g < b else _F0)
            elif hi == g:
                h = (b - r) / delta + _F2
            else:
                h = (r - g) / delta + np.float32(4.0)

            h = _round(h * np.float32(60.0))
            if h >= np.float32(360.0):
                # Reds just below 360 round up onto 0.
                h = _F0
            s = _round(s)

        return cls(h=float(h), s=float(s), l=float(l))
