"""Tool registry and name resolution."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from .autoloader import Autoloader
from .fallback import locate
from .tool import Tool

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

LOGGER = logging.getLogger(__name__)

# Strings rather than classes so that a missing tool does not break the import.
POPULAR_COMMANDS: tuple[str, ...] = (
    "toolcli.commands.help:HelpCommand",
    "toolcli.commands.properties:PropertiesCommand",
    "toolcli.commands.version:VersionCommand",
)


class Registry:
    """Produces the known tools from a curated popular list and from discovery.

    Nothing is cached: every call constructs fresh tool instances, so the result
    always reflects the plugins currently installed."""

    def __init__(
            self,
            discover: Callable[[], Iterable[type[Tool]]] | None = None,
            popular: Sequence[str] = POPULAR_COMMANDS,
    ):
        self.discover = discover if discover is not None else Autoloader().load_components
        self.popular = tuple(popular)

    def popular_tools(self) -> list[Tool]:
        """Instantiate the popular list in order, dropping entries that cannot be constructed."""
        tools = []
        for identifier in self.popular:
            try:
                tool_class = locate(identifier)
                if not (inspect.isclass(tool_class) and issubclass(tool_class, Tool)):
                    raise TypeError(f"{tool_class!r} is not a Tool subclass")
                tools.append(tool_class())
            except Exception as e:
                LOGGER.warning("dropping popular command %s: %s", identifier, e)
        return tools

    def all_tools(self) -> list[Tool]:
        """Instantiate every discovered tool, in discovery order."""
        tools = []
        for tool_class in self.discover():
            try:
                tools.append(tool_class())
            except Exception as e:
                LOGGER.warning("skipping tool %r, construction failed: %s", tool_class, e)
        LOGGER.debug("discovered %d tool(s)", len(tools))
        return tools


class Resolver:
    """Maps a command name or alias to a tool; the first match in discovery order wins."""

    def __init__(self, registry: Registry):
        self.registry = registry

    def resolve(self, command: str) -> Tool | None:
        for tool in self.registry.all_tools():
            if tool.matches(command):
                LOGGER.debug("resolved %r to %r", command, tool)
                return tool
        LOGGER.debug("no tool matches %r", command)
        return None
