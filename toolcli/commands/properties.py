from ..tool import ParsedTool


class PropertiesCommand(ParsedTool):
    """Prints the effective configuration, including `-D` overrides"""

    command_name = "properties"
    command_aliases = frozenset({"props"})
    help_summary = "shows configuration properties, optionally only the given keys"

    def execute(self, options, args):
        config = self.context.config
        console = self.context.console
        properties = config.properties()

        keys = args or sorted(properties)
        status = 0
        for key in keys:
            if key in properties:
                console.print(f"{key}={properties[key]}", markup=False, emoji=False, highlight=False, soft_wrap=True)
            else:
                console.print(f"{key} is not set", markup=False, emoji=False, highlight=False, style="yellow")
                status = 1
        return status
