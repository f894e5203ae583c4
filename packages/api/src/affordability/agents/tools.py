# This project was developed with assistance from AI tools.
"""LangChain tool exposing the affordability calculator to an agent.

The tool wraps the same pure calculator as the HTTP routes and answers
with the formatted lines of every visible result group.
"""

from langchain_core.tools import tool

from ..services.calculator import calculate
from ..services.presentation import present, summarize


@tool
def affordability_calc(
    price: float,
    rent: float = 0,
    annual_rate_percent: float = 3.5,
    term_months: int = 240,
    income: float = 0,
    current_monthly_debt: float = 0,
    max_debt_ratio: float | None = None,
    rent_inclusion_ratio: float | None = None,
) -> str:
    """Assess whether a property purchase is affordable and worth negotiating.

    Args:
        price: Purchase price of the property.
        rent: Expected monthly rent; 0 if the buyer will live there.
        annual_rate_percent: Nominal annual interest rate, in percent.
        term_months: Loan duration in months.
        income: Buyer's monthly net income.
        current_monthly_debt: Existing monthly loan repayments.
        max_debt_ratio: Acceptable debt ratio as a fraction (default 0.35).
        rent_inclusion_ratio: Share of rent lenders count, as a fraction (default 0.7).
    """
    fields = {
        "price": price,
        "rent": rent,
        "rate": annual_rate_percent,
        "term": term_months,
        "income": income,
        "currentDebt": current_monthly_debt,
        "maxDebtRatio": max_debt_ratio,
        "rentInclusionRatio": rent_inclusion_ratio,
    }
    display = present(calculate(fields))
    return "\n".join(summarize(display))
