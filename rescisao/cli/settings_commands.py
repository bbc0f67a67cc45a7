"""Settings CLI commands for Rescisao Calc.

Manages settings.json - data directory and onboarding state.
"""

import click
from pathlib import Path

from rescisao.sdk import (
    load_settings,
    save_settings,
    set_setting,
    get_settings_path,
    get_data_path,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - data_dir: custom data directory path (history storage)
    - first_open_done: onboarding completed
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo(f"Data directory: {get_data_path()}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom data_dir, revert to default")
def settings_data_dir(path, clear):
    """Set or clear the custom data directory."""
    if clear:
        current = load_settings()
        if "data_dir" in current:
            del current["data_dir"]
            save_settings(current)
            click.echo("Cleared data_dir setting.")
        else:
            click.echo("data_dir was not set.")
        click.echo(f"Data directory is now: {get_data_path()}")
        return

    if not path:
        click.echo(f"Data directory: {get_data_path()}")
        return

    data_path = Path(path).expanduser().resolve()
    if data_path.exists() and not data_path.is_dir():
        raise click.ClickException(f"Path exists but is not a directory: {data_path}")
    try:
        data_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise click.ClickException(f"Cannot create directory: {data_path}\n{e}")

    set_setting("data_dir", str(data_path))
    click.echo(f"Set data_dir: {data_path}")
