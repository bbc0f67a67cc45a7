"""Tables CLI commands: view and override the INSS/IRRF bracket tables.

Overrides are stored in tables.yaml in the config directory.
"""

from typing import List

import click
import yaml
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table
from rich import box

from rescisao.sdk import format_brl, get_tables_path
from rescisao.sdk.taxes import (
    BracketTables,
    ContributionBracket,
    TableConfigError,
    WithholdingBracket,
    load_bracket_tables,
    load_contribution_table,
    load_withholding_table,
    reset_tables,
    save_contribution_table,
    save_withholding_table,
)


def _load_rows(path: str, name: str, row_type) -> list:
    """Load and validate a bracket list from a YAML file.

    The file holds a list of brackets, e.g.:

        - {ceiling: 1412.00, rate: 7.5}
        - {ceiling: 2666.68, rate: 9}

    Raises:
        click.ClickException: If the YAML or the table is invalid
    """
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in {path}: {e}")

    try:
        rows = TypeAdapter(List[row_type]).validate_python(raw)
        BracketTables.model_validate({name: [r.model_dump() for r in rows]})
    except ValidationError as e:
        raise click.ClickException(f"Invalid {name} table in {path}:\n{e}")
    return rows


@click.group()
def tables():
    """View or override the INSS/IRRF bracket tables."""
    pass


@tables.command("show")
def tables_show():
    """Show the bracket tables in effect."""
    try:
        stored = load_bracket_tables()
        contribution = load_contribution_table()
        withholding = load_withholding_table()
    except TableConfigError as e:
        raise click.ClickException(str(e))

    console = Console()
    console.print(f"Overrides file: {get_tables_path()}")

    inss = Table(
        title=f"INSS ({'custom' if stored.contribution else 'default'})",
        box=box.SIMPLE_HEAD,
    )
    inss.add_column("Até", justify="right")
    inss.add_column("Alíquota", justify="right")
    for bracket in contribution:
        inss.add_row(format_brl(bracket.ceiling), f"{bracket.rate:g}%")
    console.print(inss)

    irrf = Table(
        title=f"IRRF ({'custom' if stored.withholding else 'default'})",
        box=box.SIMPLE_HEAD,
    )
    irrf.add_column("Até", justify="right")
    irrf.add_column("Alíquota", justify="right")
    irrf.add_column("Dedução", justify="right")
    for bracket in withholding:
        ceiling = "∞" if bracket.unbounded else format_brl(bracket.ceiling)
        irrf.add_row(ceiling, f"{bracket.rate:g}%", format_brl(bracket.deduction))
    console.print(irrf)


@tables.command("set-contribution")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def tables_set_contribution(path):
    """Override the INSS table with the brackets in a YAML file."""
    rows = _load_rows(path, "contribution", ContributionBracket)
    try:
        save_contribution_table(rows)
    except TableConfigError as e:
        raise click.ClickException(str(e))
    click.echo(f"Saved {len(rows)} INSS bracket(s) to {get_tables_path()}")


@tables.command("set-withholding")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def tables_set_withholding(path):
    """Override the IRRF table with the brackets in a YAML file.

    The last bracket always applies with no upper limit.
    """
    rows = _load_rows(path, "withholding", WithholdingBracket)
    try:
        save_withholding_table(rows)
    except TableConfigError as e:
        raise click.ClickException(str(e))
    click.echo(f"Saved {len(rows)} IRRF bracket(s) to {get_tables_path()}")


@tables.command("reset")
def tables_reset():
    """Discard overrides and return to the default tables."""
    if reset_tables():
        click.echo("Removed table overrides. Default tables in effect.")
    else:
        click.echo("No overrides were set.")
