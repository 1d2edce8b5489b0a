"""Report builder: text and JSON output for shade-probe results."""

import json
from typing import Any

from shade_probe.core.types import Report


def _window(report: Report) -> str:
    return f'{report.window:#x}' if report.window is not None else '-'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.source:
        lines.append(f'shade-probe: {report.source} (window {_window(report)})')
        lines.append('')

    for label, data in report.samples.items():
        hsl = data['hsl']
        tone = 'dark' if data['dark'] else 'light'
        lines.append(f'── {label}')
        lines.append(f'  colour: {data["hex"]} ({data["short_hex"]})  argb=0x{data["argb"]:08x}  {tone}')
        lines.append(f'  hsl: {hsl["h"]:g}° {hsl["s"]:g}% {hsl["l"]:g}%')
        lines.append(f'  fg: {data["suggested_fg"]}')
        if 'expected' in data:
            mark = '✓' if data['pass'] else '✗'
            lines.append(f'  expected {data["expected"]}  Δ={data["distance"]}  {mark}')
        for key in ('pixels', 'average', 'dark_pct', 'compactable_pct', 'lighter', 'darker'):
            if key in data:
                value = data[key]
                if isinstance(value, list):
                    value = ' '.join(value)
                lines.append(f'  {key}: {value}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'source': report.source or None,
        'window': report.window,
        'samples': [{'label': label, **data} for label, data in report.samples.items()],
    }
    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {'total': total, 'pass': report.pass_count, 'fail': report.fail_count}
    return json.dumps(obj, indent=2)
