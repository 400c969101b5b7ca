from .handlers.start_handler import StartHandler
from .handlers.help_handler import HelpHandler
from .cli.special_commands import handle_show_settings


class CommandHandler:

    def __init__(self, args, console, configuration_manager, config):
        self.args = args
        self.console = console
        self.configuration_manager = configuration_manager
        self.config = config

        # Initialize handlers
        self.handlers = {
            'start': StartHandler(args, console, configuration_manager, config),
            'help': HelpHandler(args, console, configuration_manager, config),
        }

    def handle_show_settings(self):
        handle_show_settings(
            self.configuration_manager,
            self.config,
            config_name=self.args.config_name or self.configuration_manager.get_default_configuration_name(),
            format_output=getattr(self.args, 'format', None)
        )
        return 0

    def execute(self):
        command_handlers = {
            'start': self.handlers['start'].handle_start,
            'resolve': self.handlers['start'].handle_resolve,
            'help': self.handlers['help'].handle_help,
            'show-settings': self.handle_show_settings,
        }

        handler = command_handlers.get(self.args.command)
        if handler:
            return handler()
        print(f"Unknown command: {self.args.command}")
        return 1
