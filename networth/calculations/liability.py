"""
Liability Calculations

Values an amortizing liability at an arbitrary date. A fixed monthly
payment reduces the principal linearly over fractional 30.44-day months.
Liability values are reported as negative numbers and reach exactly zero
once the debt is paid off.
"""

from networth.calculations.records import AssetRecord
from networth.calculations.utils import (
    DateLike,
    floor_at_zero,
    months_between,
    parse_amount,
    parse_decimal,
    to_datetime,
)


def _initial_debt(liability: AssetRecord) -> float:
    # Storage may carry either sign; the magnitude is authoritative.
    return abs(parse_amount(liability.current_value))


def _monthly_payment(liability: AssetRecord) -> float:
    payment = parse_decimal(liability.monthly_expense)
    return abs(payment) if payment is not None else 0.0


def _as_balance(remaining_debt: float) -> float:
    # Paid-off debt is reported as 0, not -0.0.
    if remaining_debt == 0:
        return 0.0
    return -remaining_debt


def calculate_value_at_date(liability: AssetRecord, target_date: DateLike) -> float:
    """
    Calculate the remaining balance of a liability at a given date.

    Args:
        liability: Liability snapshot; other record types value at 0
        target_date: Date to value the liability at (past or future)

    Returns:
        Remaining debt as a negative USD amount, or 0
    """
    if not liability.is_liability:
        return 0.0

    start_date = to_datetime(liability.purchase_date) or to_datetime(
        liability.created_at
    )
    target = to_datetime(target_date)
    if start_date is None or target < start_date:
        return 0.0

    initial_debt = _initial_debt(liability)
    monthly_payment = _monthly_payment(liability)

    if monthly_payment == 0:
        return _as_balance(initial_debt)

    months = months_between(start_date, target)
    amount_paid = monthly_payment * months
    remaining_debt = floor_at_zero(initial_debt - amount_paid)

    return _as_balance(remaining_debt)


def project_value(liability: AssetRecord, months: float) -> float:
    """
    Project the current balance of a liability N months forward.

    Uses the stored current_value directly rather than re-deriving the
    balance from the original debt, so it can disagree with
    calculate_value_at_date for the same moment.
    """
    if not liability.is_liability:
        return 0.0

    remaining_debt = floor_at_zero(
        _initial_debt(liability) - _monthly_payment(liability) * months
    )
    return _as_balance(remaining_debt)
