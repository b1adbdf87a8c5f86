import click
import sys
import asyncio
import logging
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from mind_it.config.logging_config import setup_logging
from mind_it.config.settings import settings
from mind_it.models.activity import list_activities
from mind_it.models.chat import ChatMode

# Set up logging
logger = logging.getLogger(__name__)

# Initialize console
console = Console()

@click.group()
@click.option('--debug', is_flag=True, help='Enable debug output')
def cli(debug):
    """Mind It - Rest, Reset, Report"""
    # Set up logging before anything else
    setup_logging(debug=debug)

@cli.command()
@click.option('--host', default=settings.WEB_HOST, show_default=True, help='Interface to bind')
@click.option('--port', default=settings.WEB_PORT, show_default=True, type=int, help='Port to listen on')
def serve(host, port):
    """Serve the Mind It page and API"""
    try:
        console.print(f"[yellow]Starting Mind It on http://{host}:{port}[/yellow]")
        uvicorn.run("mind_it.web.app:app", host=host, port=port, log_level="info")
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        console.print(f"[red]Failed to start server: {e}[/red]")
        sys.exit(1)

@cli.command()
@click.argument('text')
@click.option(
    '--mode',
    type=click.Choice([m.value for m in ChatMode]),
    default=ChatMode.STANDARD.value,
    show_default=True,
    help='Assistant configuration'
)
def chat(text, mode):
    """Ask the Mind Coach a single question"""
    from mind_it.services.chat import GeminiChatProxy

    chat_mode = ChatMode(mode)
    proxy = GeminiChatProxy()
    with console.status(f"[cyan]{chat_mode.label}...[/cyan]"):
        reply = asyncio.run(proxy.send_message(text, chat_mode))

    header = Text()
    header.append("Mind Coach", style="bold cyan")
    header.append(f" ({chat_mode.label})", style="dim")
    console.print(Panel(reply, title=header, expand=False))

@cli.command()
def activities():
    """List the available rest activities"""
    table = Table(title="Activities")
    table.add_column("Activity", justify="left", style="cyan")
    table.add_column("Color", justify="left")
    table.add_column("Icon", justify="left", style="dim")

    for activity in list_activities():
        table.add_row(
            activity["name"],
            Text(activity["color"], style=activity["color"]),
            activity["icon"]
        )

    console.print(table)

if __name__ == '__main__':
    cli()
