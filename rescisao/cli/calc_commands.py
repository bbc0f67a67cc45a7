"""Calc command: full termination calculation.

Input validation (positive salary, date order, no future dates, employee
name in HR mode) happens here, before the SDK is called. The SDK assumes
pre-validated input.
"""

import json
from datetime import date, datetime
from typing import List, Optional

import click
from rich.console import Console

from rescisao.sdk import (
    PeriodOverrides,
    Raise,
    TerminationCase,
    compute_severance,
    estimate_periods_from_last_vacation,
    summarize_termination,
    TableConfigError,
)
from rescisao.sdk import history as sdk_history
from rescisao.sdk.profile import is_hr_mode

from .renderers.severance_renderer import render_severance

DATE_FORMAT = click.DateTime(formats=["%Y-%m-%d"])
CAUSES = {
    "sem-justa-causa": "without_cause",
    "justa-causa": "for_cause",
    "pedido-demissao": "resignation",
}
RAISE_KINDS = {"pct": "percentage", "fixed": "fixed"}


def parse_raise(text: str) -> Raise:
    """Parse a raise given as DATE:KIND:VALUE.

    Examples:
        2021-06-01:pct:10     -> 10% raise
        2022-03-01:fixed:250  -> R$ 250 raise
    """
    parts = text.split(":")
    if len(parts) != 3:
        raise click.BadParameter(
            f"'{text}' - expected DATE:pct:VALUE or DATE:fixed:VALUE", param_hint="--raise"
        )
    date_text, kind_text, value_text = parts

    try:
        effective = datetime.strptime(date_text, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date '{date_text}'. Use YYYY-MM-DD.", param_hint="--raise")

    kind = RAISE_KINDS.get(kind_text.lower())
    if kind is None:
        raise click.BadParameter(f"Invalid kind '{kind_text}'. Use pct or fixed.", param_hint="--raise")

    try:
        value = float(value_text.replace(",", "."))
    except ValueError:
        raise click.BadParameter(f"Invalid value '{value_text}'.", param_hint="--raise")
    if value <= 0:
        raise click.BadParameter(f"Raise value must be positive, got {value_text}.", param_hint="--raise")

    return Raise(effective_date=effective, kind=kind, magnitude=value)


def validate_inputs(
    salary: float,
    admission: date,
    termination: date,
    employee_name: Optional[str],
    hr_mode: bool,
    today: Optional[date] = None,
) -> None:
    """Reject input the calculation engine does not accept.

    Raises:
        click.BadParameter: On the first invalid input
    """
    today = today or date.today()
    if hr_mode and not (employee_name or "").strip():
        raise click.BadParameter("Employee name or ID is required in HR mode.", param_hint="--name")
    if salary <= 0:
        raise click.BadParameter("Salary must be positive.", param_hint="--salary")
    if termination <= admission:
        raise click.BadParameter("Termination must be after admission.", param_hint="--termination")
    if termination > today:
        raise click.BadParameter("Termination date cannot be in the future.", param_hint="--termination")


def resolve_overrides(
    pending: Optional[int],
    doubled: Optional[int],
    last_vacation: Optional[date],
    termination: date,
) -> Optional[PeriodOverrides]:
    """Manual period counts, or an estimate from the last vacation date."""
    if pending is not None or doubled is not None:
        if last_vacation is not None:
            raise click.UsageError("Use either --pending/--doubled or --last-vacation, not both.")
        return PeriodOverrides(pending=pending or 0, doubled=doubled or 0)
    if last_vacation is not None:
        return estimate_periods_from_last_vacation(last_vacation, termination)
    return None


@click.command("calc")
@click.option("--salary", "-s", type=float, required=True, help="Monthly salary at admission (R$)")
@click.option("--admission", "-a", type=DATE_FORMAT, required=True, help="Admission date (YYYY-MM-DD)")
@click.option("--termination", "-t", type=DATE_FORMAT, required=True, help="Termination date (YYYY-MM-DD)")
@click.option("--cause", "-c", type=click.Choice(list(CAUSES)), default="sem-justa-causa",
              show_default=True, help="Termination cause")
@click.option("--fgts-balance", type=float, help="Known FGTS balance (default: estimated)")
@click.option("--pending", type=click.IntRange(min=0), help="Known pending vacation periods")
@click.option("--doubled", type=click.IntRange(min=0), help="Known doubled vacation periods")
@click.option("--last-vacation", type=DATE_FORMAT, help="Start of last vacation, to estimate owed periods")
@click.option("--raise", "raises", multiple=True, metavar="DATE:KIND:VALUE",
              help="Salary raise, repeatable (e.g. 2021-06-01:pct:10, 2022-01-01:fixed:300)")
@click.option("--dependents", "-d", type=click.IntRange(min=0), default=0, show_default=True,
              help="IRRF dependents")
@click.option("--name", "employee_name", help="Employee name or ID (required in HR mode)")
@click.option("--save", is_flag=True, help="Save the calculation to history")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              show_default=True)
def calc(salary, admission, termination, cause, fgts_balance, pending, doubled, last_vacation,
         raises, dependents, employee_name, save, output_format):
    """Calculate a full termination: line items, deductions and net.

    \b
    Examples:
        rescisao-calc calc -s 3000 -a 2020-01-10 -t 2023-01-10
        rescisao-calc calc -s 2000 -a 2021-01-01 -t 2022-01-01 --raise 2021-06-01:pct:10
        rescisao-calc calc -s 4500 -a 2019-03-01 -t 2024-02-15 -c pedido-demissao --pending 1
    """
    admission = admission.date()
    termination = termination.date()
    validate_inputs(salary, admission, termination, employee_name, is_hr_mode())

    parsed_raises: List[Raise] = [parse_raise(r) for r in raises]
    overrides = resolve_overrides(
        pending, doubled, last_vacation.date() if last_vacation else None, termination
    )

    case = TerminationCase(
        salary=salary,
        admission_date=admission,
        termination_date=termination,
        cause=CAUSES[cause],
        fund_balance=fgts_balance,
        period_overrides=overrides,
        raises=parsed_raises,
        employee_name=(employee_name or "").strip() or None,
    )

    result = compute_severance(case)
    try:
        summary = summarize_termination(result, case.cause, salary, dependents)
    except TableConfigError as e:
        raise click.ClickException(str(e))

    if save:
        item = sdk_history.save_history_item(case, result)
        if output_format == "text":
            click.echo(f"Saved to history as {item.id}")

    if output_format == "json":
        output = {
            "case": case.model_dump(mode="json"),
            "result": result.model_dump(mode="json"),
            "summary": summary.model_dump(mode="json"),
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    render_severance(Console(), case, result, summary)
