#!/usr/bin/env python3
"""
Autoloader that discovers tools from the commands/ package and from installed plugins
"""
import importlib
import inspect
import logging
from importlib import metadata
from pathlib import Path

from .tool import Tool

LOGGER = logging.getLogger(__name__)

# Third-party distributions register tools under this entry point group, e.g.
#   [project.entry-points."toolcli.tools"]
#   evaluate = "mypackage.evaluation:EvaluateCommand"
ENTRY_POINT_GROUP = "toolcli.tools"


class Autoloader:

    def __init__(self, commands_package=f"{__package__}.commands", group=ENTRY_POINT_GROUP):
        self.commands_package = commands_package
        self.group = group

    def load_components(self):
        """Load built-in commands followed by plugin tools, in discovery order."""
        return self.load_commands() + self.load_plugins()

    def load_commands(self):
        """Dynamically load all command classes from the commands/ directory."""
        package = importlib.import_module(self.commands_package)
        commands_path = Path(package.__file__).parent

        commands = []
        for file in sorted(commands_path.glob('*.py')):
            if file.name == '__init__.py':
                continue

            module_name = file.stem
            module = importlib.import_module(f'{self.commands_package}.{module_name}')

            # Each file has a class named after the module (e.g., help.py -> HelpCommand)
            class_name = self._get_class_name(module_name)
            command_class = getattr(module, class_name, None)
            if _is_tool_class(command_class):
                commands.append(command_class)
            else:
                LOGGER.debug("module %s has no tool class %s", module.__name__, class_name)
        return commands

    def load_plugins(self):
        """Load every tool class registered under the entry point group."""
        plugins = []
        for entry_point in metadata.entry_points(group=self.group):
            try:
                plugin = entry_point.load()
            except Exception as e:
                LOGGER.warning("skipping plugin %s (%s): %s", entry_point.name, entry_point.value, e)
                continue
            if not _is_tool_class(plugin):
                LOGGER.warning("skipping plugin %s: %s is not a Tool subclass", entry_point.name, entry_point.value)
                continue
            plugins.append(plugin)
        LOGGER.debug("found %d plugin tool(s) in group %s", len(plugins), self.group)
        return plugins

    def _get_class_name(self, module_name):
        """Convert module name to class name (help -> HelpCommand, batch_indexing -> BatchIndexingCommand)."""
        words = module_name.split('_')
        class_base = ''.join(word.capitalize() for word in words)
        return f"{class_base}Command"


def _is_tool_class(obj):
    return inspect.isclass(obj) and issubclass(obj, Tool) and not inspect.isabstract(obj)
