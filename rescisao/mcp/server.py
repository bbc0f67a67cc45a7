"""Rescisao Calc MCP Server - FastMCP implementation for termination tools."""

import logging
from datetime import date
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field, ValidationError

from rescisao.sdk import (
    PeriodOverrides,
    Raise,
    TableConfigError,
    TerminationCase,
    compute_contribution,
    compute_severance,
    compute_unemployment_insurance,
    compute_withholding,
    summarize_termination,
)
from rescisao.sdk import history as sdk_history

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("rescisao-calc")


# --- Tools ---

@mcp.tool()
async def calculate_termination(
    salary: float = Field(description="Monthly salary at admission (R$)"),
    admission_date: date = Field(description="Admission date (YYYY-MM-DD)"),
    termination_date: date = Field(description="Termination date (YYYY-MM-DD)"),
    cause: str = Field(description="'without_cause', 'for_cause' or 'resignation'"),
    fund_balance: Optional[float] = Field(default=None, description="Known FGTS balance (R$)"),
    pending_periods: Optional[int] = Field(default=None, description="Known pending vacation periods"),
    doubled_periods: Optional[int] = Field(default=None, description="Known doubled vacation periods"),
    raises: Optional[list[dict[str, Any]]] = Field(
        default=None,
        description="Raises as {effective_date, kind: 'percentage'|'fixed', magnitude}",
    ),
    dependents: int = Field(default=0, description="IRRF dependents"),
    save: bool = Field(default=False, description="Save to calculation history"),
) -> dict[str, Any]:
    """Calculate severance line items, INSS/IRRF deductions, net payout and unemployment insurance."""
    try:
        overrides = None
        if pending_periods is not None or doubled_periods is not None:
            overrides = PeriodOverrides(pending=pending_periods or 0, doubled=doubled_periods or 0)

        case = TerminationCase(
            salary=salary,
            admission_date=admission_date,
            termination_date=termination_date,
            cause=cause,
            fund_balance=fund_balance,
            period_overrides=overrides,
            raises=[Raise.model_validate(r) for r in raises or []],
        )
        result = compute_severance(case)
        summary = summarize_termination(result, case.cause, salary, dependents)

        output = {
            "result": result.model_dump(mode="json"),
            "summary": summary.model_dump(mode="json"),
        }
        if save:
            output["history_id"] = sdk_history.save_history_item(case, result).id
        return output

    except (ValidationError, TableConfigError) as e:
        logger.error(f"Error calculating termination: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_deductions(
    base: float = Field(description="Taxable base (R$)"),
    dependents: int = Field(default=0, description="IRRF dependents"),
) -> dict[str, Any]:
    """Calculate INSS and IRRF on a base using the bracket tables in effect."""
    try:
        inss = compute_contribution(base)
        irrf = compute_withholding(base, inss.amount, dependents)
        return {"contribution": inss.model_dump(), "withholding": irrf.model_dump()}
    except TableConfigError as e:
        logger.error(f"Error calculating deductions: {e}")
        return {"error": str(e)}


@mcp.tool()
async def calculate_unemployment_insurance(
    average_salary: float = Field(description="Average salary (R$)"),
    months_worked: int = Field(description="Months worked"),
) -> dict[str, Any]:
    """Estimate seguro-desemprego installments. Not eligible under 6 months."""
    result = compute_unemployment_insurance(average_salary, months_worked)
    if result is None:
        return {"eligible": False, "insurance": None}
    return {"eligible": True, "insurance": result.model_dump()}


@mcp.tool()
async def list_history(
    limit: int = Field(default=20, description="Maximum number of items to return"),
) -> dict[str, Any]:
    """List saved calculations, newest first."""
    items = sdk_history.load_history()
    return {
        "items": [
            {
                "id": item.id,
                "saved_at": item.saved_at.isoformat(),
                "employee_name": item.case.employee_name,
                "cause": item.case.cause,
                "grand_total": item.result.grand_total,
            }
            for item in items[:limit]
        ],
        "count": min(len(items), limit),
        "total_available": len(items),
    }


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
