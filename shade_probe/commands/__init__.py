"""CLI subcommands.

Each module defines a `command` object of type Command. MODULES is the
single list shade_probe.registry reads; add new command modules here.
"""

from shade_probe.commands import describe, point, rect

MODULES = (describe, point, rect)
