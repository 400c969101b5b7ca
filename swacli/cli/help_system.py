"""
Help system module for swacli.
Provides Rich-formatted help display.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

TOPIC_HELP = {
    'start': [
        ("swacli start", "Run the startup script from swa-cli.config.json"),
        ("swacli start ./app --run npm:dev", "Run an npm script from ./app"),
        ("swacli start --run ./server.js", "Run a script file relative to the app location"),
        ("swacli start --run npx:vite --dry-run", "Print the command without running it"),
    ],
    'resolve': [
        ("swacli resolve npm:build", "npm run build --if-present"),
        ("swacli resolve yarn:start", "yarn run start --if-present"),
        ("swacli resolve npx:vite", "npx vite"),
        ("swacli resolve ./dist/server.js --app-location ./app", "Absolute path to the script"),
    ],
    'show-settings': [
        ("swacli show-settings", "Show the effective configuration as a table"),
        ("swacli --config-name app show-settings --format json", "JSON output for a named configuration"),
    ],
}


def show_custom_help():
    """Display the custom help interface."""
    console = Console()

    title_panel = Panel(
        Text("Static Web App Command-Line Tool", style="bold cyan", justify="center"),
        subtitle="Startup script resolution and launching",
        border_style="cyan",
        padding=(1, 2)
    )

    commands_table = Table.grid(padding=(0, 3))
    commands_table.add_column(style="bold yellow", no_wrap=True)
    commands_table.add_column(style="white")
    commands_table.add_row("start", "Resolve and run the app startup script")
    commands_table.add_row("resolve", "Resolve a startup script reference to a command")
    commands_table.add_row("show-settings", "Show the effective configuration")
    commands_table.add_row("version", "Show version information")
    commands_table.add_row("help", "Show detailed help for a command")

    footer_text = Text("Global Options: ", style="bold white")
    footer_text.append("--config <path>", style="bold yellow")
    footer_text.append(" (config file)  ", style="white")
    footer_text.append("--config-name <name>", style="bold yellow")
    footer_text.append(" (configuration)  ", style="white")
    footer_text.append("--verbose", style="bold yellow")
    footer_text.append(" (debug logging)  ", style="white")
    footer_text.append("--log-file <path>", style="bold yellow")
    footer_text.append(" (log to file)", style="white")

    console.print(title_panel)
    console.print(Panel(commands_table, title="[bold yellow]Commands[/bold yellow]",
                        border_style="yellow", padding=(1, 1)))
    console.print(Panel(footer_text, border_style="dim white"))


def show_topic_help(topic, console=None):
    """Display usage examples for a single command."""
    console = console or Console()

    examples = Table(show_header=True, header_style="bold white")
    examples.add_column("Example", style="cyan", no_wrap=True)
    examples.add_column("Result", style="white")
    for example, result in TOPIC_HELP.get(topic, []):
        examples.add_row(example, result)

    console.print(Panel(examples, title=f"[bold cyan]{topic}[/bold cyan]", border_style="cyan"))
