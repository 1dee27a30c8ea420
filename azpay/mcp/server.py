"""azpay MCP Server - FastMCP implementation for salary calculation tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from azpay.sdk import (
    SalaryBreakdown,
    format_breakdown,
    get_tax_bracket_info,
    gross_to_net as sdk_gross_to_net,
    load_tax_rules,
    net_to_gross as sdk_net_to_gross,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("azpay")


def _breakdown_result(breakdown: SalaryBreakdown) -> dict[str, Any]:
    info = get_tax_bracket_info(breakdown.gross_salary) if breakdown.gross_salary > 0 else None
    return {
        "breakdown": breakdown.model_dump(),
        "formatted": format_breakdown(breakdown),
        "tax_bracket": info.description if info else None,
    }


# --- Tools ---

@mcp.tool()
async def gross_to_net(
    gross_salary: float = Field(description="Monthly gross salary in AZN"),
) -> dict[str, Any]:
    """Calculate net salary from gross salary under 2026 Azerbaijan tax law. Returns income tax, DSMF, unemployment and medical insurance, total deductions and net salary."""
    logger.debug(f"gross_to_net({gross_salary})")
    return _breakdown_result(sdk_gross_to_net(gross_salary))


@mcp.tool()
async def net_to_gross(
    net_salary: float = Field(description="Desired monthly net salary in AZN"),
) -> dict[str, Any]:
    """Calculate the gross salary required for a given net salary. Returns the same breakdown as gross_to_net."""
    logger.debug(f"net_to_gross({net_salary})")
    return _breakdown_result(sdk_net_to_gross(net_salary))


@mcp.tool()
async def tax_bracket_info(
    salary: float = Field(description="Monthly gross salary in AZN"),
) -> dict[str, Any]:
    """Find the income tax bracket a salary falls into."""
    info = get_tax_bracket_info(salary)
    if info is None:
        return {"error": f"No tax bracket covers {salary}", "bracket": None}
    return {
        "bracket": info.bracket.model_dump(),
        "description": info.description,
    }


# --- Resources ---

@mcp.resource("azpay://tax-rules")
async def tax_rules_resource() -> str:
    """Income tax brackets and social security rates in effect."""
    return json.dumps(load_tax_rules().model_dump(), indent=2)


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
