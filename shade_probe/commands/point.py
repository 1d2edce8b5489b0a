"""Sample a single pixel and classify its colour.

Reports hex (and 3-digit hex when compactable), the packed ARGB integer,
HSL, whether the colour is dark, and a contrasting foreground.

With --expect, the pixel is compared against an expected colour and
passes when the RGB distance is within --max-distance.

Example:
    shade-probe point 10 10 --image screenshot.png
    shade-probe point 10 10 --window 0x3a00007 --expect '#1e1e1e'
"""

from shade_probe.core.color import Color
from shade_probe.core.pixels import Point, sample_point
from shade_probe.core.types import Command, Report, Sample

command = Command(name='point', help='Sample one pixel and classify its colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('x', type=int, help='X coordinate within the window')
    parser.add_argument('y', type=int, help='Y coordinate within the window')


@command.run
def run(source, window, report: Report, args) -> None:
    point = Point(args.x, args.y)
    colour = sample_point(source, window, point)
    label = f'point {point.x},{point.y}'
    label = report.add(Sample(label=label, colour=colour))
    if args.expect:
        report.check(label, colour, Color.from_hex(args.expect), args.max_distance)
