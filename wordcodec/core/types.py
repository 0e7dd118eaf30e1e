"""Shared types for the wordcodec CLI: Command and Result."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from wordcodec.core.wordlist import Wordlist


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='encode', help='Encode bytes or an integer as words')

        @command.arguments
        def arguments(parser):
            parser.add_argument('value')

        @command.run
        def run(args, wordlist, result):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._arguments_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function that adds argparse arguments."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: argparse.Namespace, wordlist: Wordlist, result: Result) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, wordlist, result)


@dataclass
class Result:
    """Accumulates a command's output for text/JSON rendering."""

    command: str = ''
    wordlist: str = ''
    data: dict[str, Any] = field(default_factory=dict)
    error: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def add(self, key: str, value: Any) -> None:
        self.data[key] = value

    def fail(self, message: str, index: int | None = None) -> None:
        """Record a failure. index is the position of the offending word, if any."""
        self.error = {'message': message}
        if index is not None:
            self.error['index'] = index
