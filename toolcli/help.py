"""
Help system with Rich output
Renders the command listings and per-command help of the help tool
"""

from rich.console import Console
from typing import Iterable, Optional

from . import __version__
from .tool import Tool

PROGRAM = "toolcli"

# substituted by the dispatcher when the command line is empty
NO_COMMAND_SPECIFIED = "no-command-specified"


class HelpFormatter:
    """Writes help text for the CLI to a Rich console"""

    def __init__(self, console: Optional[Console] = None, program: str = PROGRAM):
        self.console = console or Console(stderr=True)
        self.program = program

    def _line(self, text: str = ""):
        # tool-provided text is printed verbatim: no markup, no emoji codes, no re-wrapping
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def show_version(self):
        """Display the version banner"""
        self._line(f"{self.program} version {__version__}")

    def show_no_command(self):
        self._line("No command specified. You must specify a command.")

    def show_command_summaries(self, title: str, tools: Iterable[Tool]):
        """List tools as `name<TAB>summary`, padding short names so summaries line up

        Entries go straight to the console stream, since rendering through Rich
        would expand the tabs into spaces."""
        self.console.print(f"[bold]{title}[/bold]", highlight=False)
        for tool in tools:
            name = tool.name()
            if len(name) <= 5:
                name += "\t"
            self.console.file.write(f"\t{name}\t{tool.summary()}\n")

    def show_overview(self, popular: Iterable[Tool], everything: Iterable[Tool]):
        """Display popular commands in their curated order, then all commands sorted by name"""
        self.show_command_summaries("Popular commands:", popular)
        self._line()
        self.show_command_summaries("All possible commands:", sorted(everything, key=lambda t: t.name()))
        self._line()
        self._line(f"See '{self.program} help <command>' to read about a specific command.")

    def show_command_help(self, tool: Tool):
        self._line(tool.help())

    def show_unknown_command(self, command: str):
        self._line(f"No such known command {command}. Use '{self.program} help' to get a list of commands.")
