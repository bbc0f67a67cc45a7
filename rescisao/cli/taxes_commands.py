"""Taxes CLI commands: standalone INSS, IRRF and unemployment insurance."""

import json

import click

from rescisao.sdk import (
    TableConfigError,
    compute_contribution,
    compute_unemployment_insurance,
    compute_withholding,
    format_brl,
)


@click.group()
def taxes():
    """Standalone INSS, IRRF and seguro-desemprego calculations.

    INSS and IRRF use the bracket tables in effect (see 'tables show').
    """
    pass


@taxes.command("contribution")
@click.argument("base", type=float)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def taxes_contribution(base, output_format):
    """Calculate INSS on BASE (R$)."""
    try:
        result = compute_contribution(base)
    except TableConfigError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(), indent=2))
        return

    click.echo(f"Base:  {format_brl(result.base)}")
    click.echo(f"INSS:  {format_brl(result.amount)}")


@taxes.command("withholding")
@click.argument("base", type=float)
@click.option("--dependents", "-d", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def taxes_withholding(base, dependents, output_format):
    """Calculate IRRF on BASE (R$), after INSS on the same base."""
    try:
        inss = compute_contribution(base)
        result = compute_withholding(base, inss.amount, dependents)
    except TableConfigError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        output = {"contribution": inss.model_dump(), "withholding": result.model_dump()}
        click.echo(json.dumps(output, indent=2))
        return

    click.echo(f"INSS:        {format_brl(inss.amount)}")
    click.echo(f"IRRF base:   {format_brl(result.base)}")
    click.echo(f"IRRF:        {format_brl(result.amount)} ({result.bracket_label})")


@taxes.command("unemployment")
@click.argument("average_salary", type=float)
@click.argument("months_worked", type=click.IntRange(min=0))
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
def taxes_unemployment(average_salary, months_worked, output_format):
    """Estimate seguro-desemprego for AVERAGE_SALARY and MONTHS_WORKED."""
    result = compute_unemployment_insurance(average_salary, months_worked)

    if output_format == "json":
        click.echo(json.dumps(result.model_dump() if result else None, indent=2))
        return

    if result is None:
        click.echo(f"Not eligible: {months_worked} month(s) worked, at least 6 required.")
        return

    click.echo(f"{result.installments} installment(s) of {format_brl(result.per_installment)}")
    click.echo(f"Total: {format_brl(result.total)}")
