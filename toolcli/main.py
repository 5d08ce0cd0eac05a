#!/usr/bin/env python3
"""
CLI entry point: resolves the command to a tool and runs it
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console

from . import fallback
from .config import Config, configure_logger
from .help import NO_COMMAND_SPECIFIED, PROGRAM
from .registry import Registry, Resolver
from .tool import run

if TYPE_CHECKING:
    from collections.abc import Sequence

LOGGER = logging.getLogger(__name__)

HELP_COMMAND = "help"


@dataclasses.dataclass
class Context:
    """State shared with every tool taking part in one invocation."""
    config: Config = dataclasses.field(default_factory=Config)
    registry: Registry = dataclasses.field(default_factory=Registry)
    console: Console = dataclasses.field(default_factory=lambda: Console(stderr=True))
    program: str = PROGRAM


def split_command(argv: Sequence[str]) -> tuple[str, list[str]]:
    """First token is the command, the rest are its arguments."""
    if not argv:
        return HELP_COMMAND, [NO_COMMAND_SPECIFIED]
    return argv[0], list(argv[1:])


class CLI:

    def __init__(self, registry=None, config=None, console=None):
        """Initialize the CLI with core components."""
        self.context = Context(
            config=config if config is not None else Config(),
            registry=registry if registry is not None else Registry(),
            console=console if console is not None else Console(stderr=True),
        )
        self.resolver = Resolver(self.context.registry)

    def run(self, argv: Sequence[str]) -> int:
        """Split the command line, resolve the command, then run the matching tool or fall back."""
        command, args = split_command(argv)
        tool = self.resolver.resolve(command)
        if tool is not None:
            return run(tool, args, self.context)

        LOGGER.debug("%r is not a registered command, trying it as a Python name", command)
        target = fallback.locate(command)
        return fallback.invoke(target, args, self.context)


def main(argv: Sequence[str] | None = None) -> int:
    """Load configuration, set up logging and dispatch the command line."""
    config = Config()
    config.load_configuration()
    configure_logger(config.log_level())

    cli = CLI(config=config)
    return cli.run(sys.argv[1:] if argv is None else argv)


if __name__ == '__main__':
    sys.exit(main())
