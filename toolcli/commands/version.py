from ..help import HelpFormatter
from ..tool import Tool


class VersionCommand(Tool):
    """Shows the installed version"""

    command_name = "version"
    command_aliases = frozenset({"--version"})
    help_summary = "shows the version of toolcli"

    def run(self, args):
        HelpFormatter(self.context.console, program=self.context.program).show_version()
        return 0
