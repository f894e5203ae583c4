# This project was developed with assistance from AI tools.
"""Fixed-rate amortizing loan mathematics.

Standard annuity relations with r the monthly rate and n the number of
monthly payments:

    payment        = P * r / (1 - (1 + r) ** -n)
    annuity_factor = (1 - (1 + r) ** -n) / r          (principal per unit of payment)
    payment_factor = r * (1 + r) ** n / ((1 + r) ** n - 1)   (payment per unit of principal)

``1 - (1 + r) ** -n`` is evaluated with ``log1p``/``expm1`` so it stays
positive for rates far below float resolution. A rate whose discount
term still underflows to zero falls back to straight-line repayment.
No rounding here; rounding is a display concern.
"""

import math


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert a nominal annual percentage to a monthly fraction."""
    return annual_rate_percent / 1200


def _discount(r: float, term_months: int) -> float:
    """``1 - (1 + r) ** -n`` without cancellation for tiny ``r``."""
    return -math.expm1(-term_months * math.log1p(r))


def monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Level monthly payment that amortizes ``principal`` over ``term_months``."""
    r = monthly_rate(annual_rate_percent)
    discount = _discount(r, term_months) if r > 0 else 0.0
    if discount <= 0:
        return principal / term_months
    return principal * r / discount


def annuity_factor(annual_rate_percent: float, term_months: int) -> float:
    """Present value of one currency unit paid monthly for ``term_months``."""
    r = monthly_rate(annual_rate_percent)
    discount = _discount(r, term_months) if r > 0 else 0.0
    if discount <= 0:
        return float(term_months)
    return discount / r


def payment_factor(annual_rate_percent: float, term_months: int) -> float:
    """Monthly payment per currency unit of principal (the loan constant)."""
    r = monthly_rate(annual_rate_percent)
    discount = _discount(r, term_months) if r > 0 else 0.0
    if discount <= 0:
        return 1 / term_months
    return r / discount
