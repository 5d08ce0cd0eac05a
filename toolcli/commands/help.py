from ..help import NO_COMMAND_SPECIFIED, HelpFormatter
from ..registry import Resolver
from ..tool import Tool


class HelpCommand(Tool):
    """Lists the available commands, or shows the help of one command"""

    command_name = "help"
    command_aliases = frozenset({"-h", "--help"})
    help_summary = "provides a list of available commands"

    def run(self, args):
        context = self.context
        formatter = HelpFormatter(context.console, program=context.program)
        formatter.show_version()

        args = list(args)
        if args == [NO_COMMAND_SPECIFIED]:
            formatter.show_no_command()
            args = []

        if not args:
            registry = context.registry
            formatter.show_overview(registry.popular_tools(), registry.all_tools())
            return 0

        tool = Resolver(context.registry).resolve(args[0])
        if tool is not None:
            formatter.show_command_help(tool)
        else:
            formatter.show_unknown_command(args[0])
        return 0
