"""Sample a rectangle and summarise its colours.

The dominant (most frequent) colour is the headline sample. Also reported:
pixel count, the channel-average colour, and the percentage of pixels that
are dark or compactable.

With --expect, the dominant colour is compared against the expected colour.

Example:
    shade-probe rect 0 0 200 30 --image screenshot.png
    shade-probe rect 0 0 1920 24 --expect '#222' --max-distance 10 --json
"""

import numpy as np

from shade_probe.core.color import Color
from shade_probe.core.pixels import Rect, sample_rect
from shade_probe.core.types import Command, Report, Sample

command = Command(name='rect', help='Sample a rectangle: dominant colour, average, dark share.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('x', type=int)
    parser.add_argument('y', type=int)
    parser.add_argument('width', type=int)
    parser.add_argument('height', type=int)


def summarise(pixels: list[Color]) -> tuple[Color, dict]:
    """Return the dominant colour and the region statistics."""
    arr = np.array([(c.r, c.g, c.b) for c in pixels], dtype=np.uint8)
    unique, counts = np.unique(arr, axis=0, return_counts=True)
    top = unique[int(np.argmax(counts))]
    dominant = Color(int(top[0]), int(top[1]), int(top[2]))
    mean = np.rint(arr.mean(axis=0)).astype(int)
    average = Color(int(mean[0]), int(mean[1]), int(mean[2]))
    total = len(pixels)
    dark = sum(1 for c in pixels if c.is_dark())
    compactable = sum(1 for c in pixels if c.is_compactable())
    stats = {
        'pixels': total,
        'average': average.to_hex(),
        'dark_pct': round(dark / total * 100.0, 1),
        'compactable_pct': round(compactable / total * 100.0, 1),
    }
    return dominant, stats


@command.run
def run(source, window, report: Report, args) -> None:
    rect = Rect(args.x, args.y, args.width, args.height)
    if rect.width <= 0 or rect.height <= 0:
        raise ValueError(f'Empty rectangle: {rect.width}x{rect.height}')
    pixels = sample_rect(source, window, rect)
    dominant, stats = summarise(pixels)
    label = f'rect {rect.x},{rect.y} {rect.width}x{rect.height}'
    label = report.add(Sample(label=label, colour=dominant, extra=stats))
    if args.expect:
        report.check(label, dominant, Color.from_hex(args.expect), args.max_distance)
