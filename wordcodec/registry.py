"""Command discovery.

Every public module in wordcodec/commands/ that defines a `command` object
of type Command is registered under that command's name.
"""

import functools
import importlib
import pkgutil

import wordcodec.commands
from wordcodec.core.types import Command


@functools.lru_cache(maxsize=None)
def discover() -> dict[str, Command]:
    """Import all command modules once and return them keyed by command name."""
    found: dict[str, Command] = {}
    for info in pkgutil.iter_modules(wordcodec.commands.__path__):
        if info.name.startswith('_'):
            continue
        module = importlib.import_module(f'wordcodec.commands.{info.name}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            found[cmd.name] = cmd
    return found


def get(name: str) -> Command:
    """Get a command by name."""
    commands = discover()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]
