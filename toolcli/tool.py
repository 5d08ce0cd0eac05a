"""
Tool base classes: the contract every command implements
"""

from __future__ import annotations

import abc
import argparse
import functools
import logging
import sys
from typing import TYPE_CHECKING

from .errors import OptionParseError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .main import Context

LOGGER = logging.getLogger(__name__)

# argparse otherwise sizes help text to the terminal
HELP_WIDTH = 100
# and, from 3.14 on, colours it when stdout is a tty
PARSER_OPTIONS = {"color": False} if sys.version_info >= (3, 14) else {}


class Tool(abc.ABC):
    """A named, runnable command.

    Subclasses advertise themselves with the class attributes below and must be
    constructible without arguments so that discovery can instantiate them."""

    command_name: str | None = None
    command_aliases: frozenset[str] = frozenset()
    help_summary: str | None = None

    _context: Context | None = None

    def name(self) -> str:
        """What command name this tool responds to"""
        if self.command_name:
            return self.command_name
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def aliases(self) -> set[str]:
        """What short aliases this tool also responds to"""
        return set(self.command_aliases)

    def summary(self) -> str:
        """A short sentence about what this tool is for"""
        return self.help_summary or "(no summary provided)"

    def help(self) -> str:
        """A long message about how to use this tool"""
        return self.summary()

    def matches(self, command: str) -> bool:
        return command == self.name() or command in self.aliases()

    def configure(self, context: Context) -> None:
        self._context = context

    @property
    def context(self) -> Context:
        if self._context is None:
            from .main import Context

            self._context = Context()
        return self._context

    @abc.abstractmethod
    def run(self, args: Sequence[str]) -> int:
        """Execute the tool; the return value is the process exit status."""

    def __repr__(self):
        return f"<{type(self).__name__} {self.name()!r}>"


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors by raising instead of exiting the process."""

    def error(self, message):
        raise OptionParseError(f"{self.prog}: {message}")

    def exit(self, status=0, message=None):
        raise OptionParseError(f"{self.prog}: {message or 'exited'}".rstrip())


def _property(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected property=value, got {value!r}")
    return key, val


class ParsedTool(Tool):
    """A tool that understands the global `-D property=value` and `-I indexref` options.

    Properties given with `-D` are applied to the configuration before `execute` is
    called, so they are visible for the whole run of the tool. Subclasses may add
    options of their own in `add_arguments`."""

    def build_parser(self) -> OptionParser:
        parser = OptionParser(
            prog=self.name(),
            description=self.summary(),
            add_help=False,
            allow_abbrev=False,
            formatter_class=functools.partial(argparse.HelpFormatter, width=HELP_WIDTH),
            **PARSER_OPTIONS,
        )
        parser.add_argument(
            "-D",
            dest="properties",
            metavar="property",
            action="append",
            type=_property,
            default=[],
            help="specify property name=value",
        )
        # accepted and stored, nothing reads it yet
        parser.add_argument(
            "-I",
            dest="indexref",
            metavar="indexref",
            help="override the default indexref (location)",
        )
        self.add_arguments(parser)
        parser.add_argument("args", nargs="*", help="arguments for the command")
        return parser

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Hook for subclasses to register additional options."""

    def help(self) -> str:
        return self.build_parser().format_help()

    def run(self, args: Sequence[str]) -> int:
        options = self.build_parser().parse_intermixed_args(list(args))
        config = self.context.config
        for key, value in options.properties:
            config.set_property(key, value)
        return self.execute(options, list(options.args))

    @abc.abstractmethod
    def execute(self, options: argparse.Namespace, args: list[str]) -> int:
        """Tool body, called once the global options have been applied."""


def run(tool: Tool | type[Tool], args: Sequence[str], context: Context | None = None) -> int:
    """Run a tool instance (or a Tool subclass, instantiated here) and return its exit status."""
    if isinstance(tool, type):
        tool = tool()
    if context is not None:
        tool.configure(context)
    LOGGER.debug("running %r with %s", tool, list(args))
    status = tool.run(args)
    return 0 if status is None else status
