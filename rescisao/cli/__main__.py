"""Rescisao Calc CLI - Command-line interface for termination calculations."""

import click

from rescisao import __version__

from .calc_commands import calc as calc_command
from .taxes_commands import taxes as taxes_group
from .history_commands import history_cli as history_group
from .tables_commands import tables as tables_group
from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="rescisao-calc")
def cli():
    """Rescisao Calc - Brazilian employment termination calculator.

    Computes verbas rescisórias (CLT), INSS/IRRF deductions and
    seguro-desemprego from salary, dates and termination cause.

    Configuration is loaded from (in order):

    \b
    1. RESCISAO_CONFIG_PATH environment variable
    2. ~/.config/rescisao-calc/ (XDG default)

    Run 'rescisao-calc profile show' to see the current profile.
    """
    pass


cli.add_command(calc_command)
cli.add_command(taxes_group)
cli.add_command(history_group, name="history")
cli.add_command(tables_group)
cli.add_command(profile_group)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
