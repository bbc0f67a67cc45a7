"""History CLI commands: saved calculations."""

import json

import click
from rich.console import Console

from rescisao.sdk import history as sdk_history
from rescisao.sdk.history import HistoryItemNotFoundError

from .renderers.severance_renderer import render_history_list, render_severance


@click.group("history")
def history_cli():
    """Saved calculations (most recent 20)."""
    pass


@history_cli.command("list")
@click.option("--count", is_flag=True, help="Only print the number of saved calculations")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def history_list(count, output_format):
    """List saved calculations, newest first."""
    items = sdk_history.load_history()

    if count:
        click.echo(len(items))
        return

    if output_format == "json":
        click.echo(json.dumps([i.model_dump(mode="json") for i in items], indent=2, ensure_ascii=False))
        return

    if not items:
        click.echo("No saved calculations.")
        return

    render_history_list(Console(), items)


@history_cli.command("show")
@click.argument("item_id")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def history_show(item_id, output_format):
    """Show a saved calculation by ID."""
    try:
        item = sdk_history.get_history_item(item_id)
    except HistoryItemNotFoundError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(item.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    render_severance(Console(), item.case, item.result)


@history_cli.command("clear")
@click.confirmation_option(prompt="Delete all saved calculations?")
def history_clear():
    """Delete all saved calculations."""
    removed = sdk_history.clear_history()
    click.echo(f"Removed {removed} saved calculation(s).")
