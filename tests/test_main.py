from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from tests import sample_tools
from tests.conftest import output_of
from toolcli import main as toolcli_main
from toolcli.errors import CommandNotFoundError, FallbackInvocationError, OptionParseError
from toolcli.main import CLI, split_command

if TYPE_CHECKING:
    from toolcli.config import Config
    from toolcli.registry import Registry


class TestSplitCommand:
    def test_empty_command_line(self):
        assert split_command([]) == ("help", ["no-command-specified"])

    def test_command_and_arguments(self):
        assert split_command(["alpha", "-D", "x=1", "rest"]) == ("alpha", ["-D", "x=1", "rest"])


class TestDispatch:
    def test_runs_resolved_tool(self, cli: CLI, console: Console):
        assert cli.run(["alpha", "one", "two"]) == 0
        assert "alpha ran with ['one', 'two']" in output_of(console)

    def test_alias(self, cli: CLI, console: Console):
        cli.run(["a"])
        assert "alpha ran with []" in output_of(console)

    def test_exit_status_is_propagated(self, cli: CLI):
        assert cli.run(["beta"]) == 3

    def test_tool_failure_is_not_wrapped(self, cli: CLI):
        with pytest.raises(KeyError, match="boom"):
            cli.run(["explode"])

    def test_option_parse_error(self, cli: CLI):
        with pytest.raises(OptionParseError):
            cli.run(["record", "-D", "oops"])

    def test_properties_reach_the_shared_config(self, cli: CLI, config: Config):
        assert cli.run(["record", "-D", "x=1", "-D", "y=2", "rest"]) == 5
        assert config.properties() == {"x": "1", "y": "2"}

    def test_no_arguments_same_as_explicit_marker(self, registry: Registry, config: Config):
        outputs = []
        for argv in ([], ["help", "no-command-specified"]):
            console = Console(file=io.StringIO(), width=200, color_system=None)
            assert CLI(registry=registry, config=config, console=console).run(argv) == 0
            outputs.append(output_of(console))

        assert outputs[0] == outputs[1]
        assert "No command specified. You must specify a command." in outputs[0]

    def test_end_to_end_listing_and_alias(self, cli: CLI, console: Console):
        cli.run([])
        output = output_of(console)
        all_commands = output.split("All possible commands:")[1]
        positions = [all_commands.index(name) for name in ("alpha", "beta", "gamma")]
        assert positions == sorted(positions)

        assert cli.resolver.resolve("a").name() == "alpha"


class TestFallback:
    def test_tool_class_by_name(self, cli: CLI):
        assert cli.run(["tests.sample_tools.ShadowTool"]) == 7

    def test_tool_class_by_module_and_attribute(self, cli: CLI):
        assert cli.run(["tests.sample_tools:ShadowTool"]) == 7

    def test_main_entry_point(self, cli: CLI):
        sample_tools.LegacyProgram.calls.clear()
        assert cli.run(["tests.sample_tools.LegacyProgram", "x", "y"]) == 4
        assert sample_tools.LegacyProgram.calls == [["x", "y"]]

    def test_module_main(self, cli: CLI):
        assert cli.run(["tests.sample_tools", "x", "y", "z"]) == 3

    def test_default_package_prefix(self, cli: CLI, console: Console):
        assert cli.run(["commands.version.VersionCommand"]) == 0
        assert "toolcli version" in output_of(console)

    def test_system_exit_becomes_status(self, cli: CLI):
        assert cli.run(["tests.sample_tools.ExitingProgram"]) == 2

    def test_main_failure_is_wrapped(self, cli: CLI):
        with pytest.raises(FallbackInvocationError) as excinfo:
            cli.run(["tests.sample_tools.FailingProgram", "q"])
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_unknown_command(self, cli: CLI):
        with pytest.raises(CommandNotFoundError, match="definitely-not-a-real-command"):
            cli.run(["definitely-not-a-real-command"])

    def test_abstract_tool_class(self, cli: CLI):
        with pytest.raises(CommandNotFoundError, match="abstract"):
            cli.run(["toolcli.tool.ParsedTool"])

    def test_class_without_entry_point(self, cli: CLI):
        with pytest.raises(CommandNotFoundError, match="NoEntryPoint"):
            cli.run(["tests.sample_tools.NoEntryPoint"])


class TestMain:
    def test_main_loads_configuration_and_dispatches(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[log]\nlevel = "DEBUG"\n')
        monkeypatch.setenv("TOOLCLI_CONFIG", str(config_file))
        monkeypatch.delenv("TOOLCLI_LOG_LEVEL", raising=False)

        seen = {}

        def fake_run(self, argv):
            seen["argv"] = argv
            seen["level"] = self.context.config.get_property("log.level")
            return 9

        monkeypatch.setattr(CLI, "run", fake_run)
        monkeypatch.setattr("sys.argv", ["toolcli", "alpha", "x"])

        assert toolcli_main.main() == 9
        assert seen == {"argv": ["alpha", "x"], "level": "DEBUG"}
