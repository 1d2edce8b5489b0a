"""shade-probe — Sample window pixels and classify their colours.

Usage: shade-probe <command> [args] [options]

Commands are auto-discovered from shade_probe/commands/.
Each command module's docstring is its documentation.
Run `shade-probe help <command>` for full module docs.

Pixels come from a screenshot (--image) or a live X11 display (default,
needs the `x11` extra). Window ids are decimal or 0x-prefixed hex.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, shade-probe looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from shade_probe import registry
from shade_probe.core.config import Settings, load_env, parse_window
from shade_probe.core.pixels import PixelError
from shade_probe.core.report import format_json, format_text
from shade_probe.core.sources import ROOT_IMAGE, ImagePixelSource, XcbPixelSource
from shade_probe.core.types import Report

DEFAULT_MAX_DISTANCE = 20.0


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'shade_probe.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.discover()

    epilog = (
        'Examples:\n'
        '  shade-probe point 10 10 --image screenshot.png\n'
        '  shade-probe rect 0 0 1920 24 --window 0x3a00007 --json\n'
        "  shade-probe rect 0 0 200 30 --image shot.png --expect '#222' --max-distance 10\n"
        "  shade-probe describe '#0e737b' fff\n"
        '  shade-probe help rect\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  SHADE_PROBE_DISPLAY  X display name (default: DISPLAY)\n'
        '  SHADE_PROBE_WINDOW   default window id (default: root window)\n'
    )
    parser = argparse.ArgumentParser(
        prog='shade-probe',
        description='Sample window pixels and classify their colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.add_arguments(p)
        if cmd.needs_source:
            p.add_argument('-i', '--image', help='Read pixels from a screenshot instead of the display')
            p.add_argument('-w', '--window', type=parse_window, help='Window id (default: SHADE_PROBE_WINDOW or root)')
            p.add_argument('-D', '--display', help='X display name (default: SHADE_PROBE_DISPLAY or DISPLAY)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-e', '--expect', metavar='COLOUR', help='Expected colour; exit 1 if a sample is too far')
        p.add_argument(
            '-d',
            '--max-distance',
            type=float,
            default=DEFAULT_MAX_DISTANCE,
            metavar='N',
            help=f'RGB distance allowed by --expect (default: {DEFAULT_MAX_DISTANCE:g})',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.discover()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: shade-probe help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def _display_errors() -> tuple[type[Exception], ...]:
    """X protocol errors (BadMatch, BadWindow, ...) when xcffib is installed."""
    try:
        import xcffib
    except ImportError:
        return ()
    return (xcffib.XcffibException,)


def _run(args: argparse.Namespace, settings: Settings) -> Report:
    cmd = registry.get(args.command)
    report = Report()

    if not cmd.needs_source:
        cmd.execute(None, None, report, args)
        return report

    window = args.window if args.window is not None else settings.window

    if args.image:
        if not os.path.isfile(args.image):
            raise FileNotFoundError(f'image not found: {args.image}')
        source = ImagePixelSource.open(args.image)
        report.source = args.image
        report.window = ROOT_IMAGE if window is None else window
        cmd.execute(source, report.window, report, args)
        return report

    display = args.display or settings.display
    with XcbPixelSource.connect(display) as xsource:
        report.source = f'X display {display or "(default)"}'
        report.window = xsource.root_window() if window is None else window
        cmd.execute(xsource, report.window, report, args)
    return report


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'shade-probe: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        report = _run(args, Settings.from_env())
    except ImportError as exc:
        print(f'Error: {exc.name or exc} is required for display access (pip install shade-probe[x11])', file=sys.stderr)
        sys.exit(1)
    except (PixelError, ValueError, LookupError, OSError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)
    except _display_errors() as exc:
        print(f'Error: X server: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate — after output so the report is visible even on failure
    if report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
