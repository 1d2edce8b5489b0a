"""Shared types for shade-probe: Command, Sample, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from shade_probe.core.color import Color
from shade_probe.core.hsl import HSL
from shade_probe.core.pixels import PixelSource

# How far a suggested foreground moves away from its background.
CONTRAST_STEP = 0.8


def suggest_foreground(background: Color) -> Color:
    """A readable text colour for background: lighter on dark, darker on light."""
    if background.is_dark():
        return background.lighten(CONTRAST_STEP)
    return background.darken(CONTRAST_STEP)


@dataclass
class Sample:
    """A sampled colour with everything derived from it."""

    label: str
    colour: Color
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        c = self.colour
        hsl = HSL.from_rgb(c)
        data: dict[str, Any] = {
            'hex': c.to_hex(),
            'short_hex': c.to_hex(compact=True),
            'argb': int(c),
            'rgb': [c.r, c.g, c.b],
            'hsl': {'h': hsl.h, 's': hsl.s, 'l': hsl.l},
            'dark': c.is_dark(),
            'compactable': c.is_compactable(),
            'suggested_fg': suggest_foreground(c).to_hex(),
        }
        data.update(self.extra)
        return data


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='point', help='Sample one pixel', needs_source=True)

        @command.arguments
        def arguments(parser):
            parser.add_argument('x', type=int)

        @command.run
        def run(source, window, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', needs_source: bool = True):
        self.name = name
        self.help = help
        self.needs_source = needs_source
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding positional arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, source: PixelSource | None, window: int | None, report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(source, window, report, args)


@dataclass
class Report:
    """Accumulates samples and expectation results for text/JSON output."""

    source: str = ''
    window: int | None = None
    samples: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, sample: Sample) -> str:
        """Store a sample and return its label, suffixed " (2)", " (3)", ... on repeats."""
        label = sample.label
        n = 1
        while label in self.samples:
            n += 1
            label = f'{sample.label} ({n})'
        self.samples[label] = sample.to_dict()
        return label

    def check(self, label: str, actual: Color, expected: Color, max_distance: float) -> bool:
        """Compare a sample against an expected colour and count the outcome."""
        dist = actual.distance(expected)
        passed = dist <= max_distance
        self.samples[label]['expected'] = expected.to_hex()
        self.samples[label]['distance'] = round(dist, 1)
        self.samples[label]['pass'] = passed
        if passed:
            self.pass_count += 1
        else:
            self.fail_count += 1
        return passed
