from __future__ import annotations

import io

import pytest
from rich.console import Console

from tests import sample_tools
from toolcli.commands.help import HelpCommand
from toolcli.config import Config
from toolcli.main import CLI, Context
from toolcli.registry import Registry

SAMPLE_TOOLS = [sample_tools.AlphaTool, sample_tools.BetaTool, sample_tools.GammaTool]


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def console() -> Console:
    """A console writing plain text into memory."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def registry() -> Registry:
    """Registry with a pinned discovery order instead of the installed plugins."""
    return Registry(
        discover=lambda: [HelpCommand, *SAMPLE_TOOLS, sample_tools.FailingTool, sample_tools.RecordingTool],
        popular=("toolcli.commands.help:HelpCommand", "tests.sample_tools:AlphaTool"),
    )


@pytest.fixture
def context(config: Config, registry: Registry, console: Console) -> Context:
    return Context(config=config, registry=registry, console=console)


@pytest.fixture
def cli(config: Config, registry: Registry, console: Console) -> CLI:
    return CLI(registry=registry, config=config, console=console)
