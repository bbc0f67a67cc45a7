"""Rich renderer for severance calculations.

Transforms SDK results into formatted Rich tables.
"""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from rescisao.sdk import (
    HistoryItem,
    SeveranceResult,
    TerminationCase,
    TerminationSummary,
    cause_label,
    format_brl,
)


def render_severance(
    console: Console,
    case: TerminationCase,
    result: SeveranceResult,
    summary: Optional[TerminationSummary] = None,
) -> None:
    """Render a severance result, and its deductions when a summary is given.

    Args:
        console: Rich Console instance
        case: Input facts
        result: compute_severance() output
        summary: summarize_termination() output
    """
    _render_facts(console, case, result)
    _render_line_items(console, result)
    if result.salary_trace:
        _render_trace(console, case, result)
    if summary is not None:
        _render_summary(console, summary)


def _render_facts(console: Console, case: TerminationCase, result: SeveranceResult) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    if case.employee_name:
        table.add_row("Funcionário", case.employee_name)
    table.add_row("Tipo", cause_label(case.cause))
    table.add_row("Período", f"{case.admission_date:%d/%m/%Y} a {case.termination_date:%d/%m/%Y}")
    table.add_row(
        "Tempo de serviço",
        f"{result.whole_years} ano(s) e {result.remainder_months} mês(es) ({result.total_months} meses)",
    )
    table.add_row("Salário final", format_brl(result.final_salary))
    table.add_row(
        "Períodos de férias",
        f"{result.pending_periods} vencido(s), {result.doubled_periods} em dobro",
    )

    console.print(Panel(table, title="Dados", border_style="dim"))


def _render_line_items(console: Console, result: SeveranceResult) -> None:
    table = Table(title="Verbas Rescisórias", box=box.SIMPLE_HEAD)
    table.add_column("Verba")
    table.add_column("Valor", justify="right")

    table.add_row(f"Saldo de Salário ({result.days_worked_in_termination_month} dias)",
                  format_brl(result.balance_of_salary))
    rows = [
        ("Férias Vencidas", result.pending_vacation),
        ("Férias em Dobro", result.doubled_vacation),
        ("Férias Proporcionais", result.proportional_vacation),
        ("13º Proporcional", result.year_end_bonus),
        (f"Aviso Prévio ({result.notice_days} dias)", result.notice_in_lieu),
        ("Multa 40% FGTS", result.fund_penalty),
    ]
    for label, value in rows:
        if value > 0:
            table.add_row(label, format_brl(value))

    table.add_row("[bold]TOTAL BRUTO[/bold]", f"[bold]{format_brl(result.grand_total)}[/bold]")
    table.add_row("[dim]Saldo FGTS (saque)[/dim]", f"[dim]{format_brl(result.fund_balance)}[/dim]")

    console.print(table)


def _render_trace(console: Console, case: TerminationCase, result: SeveranceResult) -> None:
    table = Table(title="Histórico de Aumentos", box=box.SIMPLE_HEAD)
    table.add_column("Data")
    table.add_column("Aumento")
    table.add_column("Salário", justify="right")

    table.add_row(f"{case.admission_date:%d/%m/%Y}", "[dim]inicial[/dim]", format_brl(case.salary))
    for snapshot in result.salary_trace:
        if snapshot.kind == "percentage":
            change = f"+{snapshot.magnitude:g}%"
        else:
            change = f"+{format_brl(snapshot.magnitude)}"
        table.add_row(
            f"{snapshot.effective_date:%d/%m/%Y}",
            change,
            format_brl(snapshot.resulting_salary),
        )

    console.print(table)


def _render_summary(console: Console, summary: TerminationSummary) -> None:
    table = Table(title="Descontos", box=box.SIMPLE_HEAD)
    table.add_column("Desconto")
    table.add_column("Base", justify="right")
    table.add_column("Valor", justify="right")

    table.add_row("INSS", format_brl(summary.contribution_base), format_brl(summary.contribution))
    table.add_row(
        f"IRRF ({summary.withholding_bracket}, {summary.dependents} dep.)",
        format_brl(summary.withholding_base),
        format_brl(summary.withholding),
    )
    table.add_row("[bold]TOTAL DESCONTOS[/bold]", "", f"[bold]{format_brl(summary.total_deductions)}[/bold]")
    console.print(table)

    console.print(Panel(
        f"[bold green]{format_brl(summary.net_total)}[/bold green]",
        title="TOTAL LÍQUIDO",
        border_style="green",
    ))

    insurance = summary.unemployment_insurance
    if insurance is not None:
        console.print(Panel(
            f"{insurance.installments} parcela(s) de {format_brl(insurance.per_installment)} "
            f"= {format_brl(insurance.total)}",
            title="Seguro-Desemprego",
            border_style="cyan",
        ))


def render_history_list(console: Console, items: List[HistoryItem]) -> None:
    """Render saved calculations as a table."""
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("ID", style="cyan")
    table.add_column("Salvo em")
    table.add_column("Funcionário")
    table.add_column("Tipo")
    table.add_column("Total", justify="right")

    for item in items:
        table.add_row(
            item.id,
            f"{item.saved_at:%d/%m/%Y %H:%M}",
            item.case.employee_name or "-",
            cause_label(item.case.cause),
            format_brl(item.result.grand_total),
        )

    console.print(table)
