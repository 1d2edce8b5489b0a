"""Describe colours given as hex, without sampling anything.

For each colour: hex forms, packed ARGB integer, HSL, darkness, and five
lighten/darken steps (20% apart) useful when building a theme.

Example:
    shade-probe describe '#0e737b' fff
"""

from shade_probe.core.color import Color
from shade_probe.core.types import Command, Report, Sample

command = Command(
    name='describe',
    help='Describe hex colours: HSL, darkness, lighten/darken steps.',
    needs_source=False,
)

STEPS = (0.2, 0.4, 0.6, 0.8, 1.0)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colours', nargs='+', metavar='COLOUR', help='#rgb, #rrggbb or #aarrggbb')


@command.run
def run(source, window, report: Report, args) -> None:
    for text in args.colours:
        colour = Color.from_hex(text)
        extra = {
            'lighter': [colour.lighten(step).to_hex() for step in STEPS],
            'darker': [colour.darken(step).to_hex() for step in STEPS],
        }
        label = report.add(Sample(label=text, colour=colour, extra=extra))
        if args.expect:
            report.check(label, colour, Color.from_hex(args.expect), args.max_distance)
