"""Command registration.

Collects the `command` object of every module in shade_probe.commands.MODULES
into a dict keyed by command name. Explicit imports keep frozen binaries
working without any package scanning.
"""

from shade_probe.core.types import Command

_registry: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Return the registry, building it on first use."""
    if not _registry:
        from shade_probe.commands import MODULES

        for module in MODULES:
            cmd = getattr(module, 'command', None)
            if not isinstance(cmd, Command):
                raise TypeError(f'{module.__name__} does not define a Command named `command`')
            if cmd.name in _registry:
                raise ValueError(f'Duplicate command name: {cmd.name}')
            _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]
