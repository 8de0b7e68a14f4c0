"""
Asset Value Calculations

Values an appreciating or depreciating asset at an arbitrary past or
future date, and projects its current value forward by a number of months.

Rates are stored as percent per year and compound annually on a
365.25-day year. Appreciation is unbounded; depreciation is floored at
zero. When both rates are present the appreciation rate is used.
"""

import math

from networth.calculations.records import AssetRecord
from networth.calculations.utils import (
    DateLike,
    floor_at_zero,
    is_number,
    parse_amount,
    parse_decimal,
    to_datetime,
    utcnow,
    years_between,
)


def _growth_factor(annual_change_pct: float, years: float) -> float:
    # A rate beyond -100% would take the base negative; it bottoms out at zero.
    factor = 1 + annual_change_pct / 100
    if factor <= 0:
        return 1.0 if years == 0 else 0.0
    try:
        return factor ** years
    except OverflowError:
        return math.inf


def apply_rate(asset: AssetRecord, base_value: float, years: float) -> float:
    """
    Compound a base value over a number of years using the asset's rate.

    Args:
        asset: Record carrying appreciation_rate or depreciation_rate
        base_value: Value at the start of the period
        years: Elapsed years (fractional)

    Returns:
        Value at the end of the period
    """
    appreciation = parse_decimal(asset.appreciation_rate)
    if appreciation is not None:
        return base_value * _growth_factor(appreciation, years)

    depreciation = parse_decimal(asset.depreciation_rate)
    if depreciation is not None:
        return floor_at_zero(base_value * _growth_factor(-depreciation, years))

    return base_value


def calculate_value_at_date(asset: AssetRecord, target_date: DateLike) -> float:
    """
    Calculate the value of an asset at a given date.

    The value is zero before the record existed and before the purchase
    date. From the purchase date on, the purchase price (or the current
    value when no purchase price is stored) is compounded by the asset's
    rate over the elapsed years.

    Args:
        asset: Asset snapshot; the type is not checked here
        target_date: Date to value the asset at (past or future)

    Returns:
        Value in USD
    """
    target = to_datetime(target_date)
    created_at = to_datetime(asset.created_at) or utcnow()
    if target < created_at:
        return 0.0

    purchase_date = to_datetime(asset.purchase_date) or created_at

    purchase_price = parse_decimal(asset.purchase_price)
    if is_number(purchase_price):
        base_value = purchase_price
    else:
        base_value = parse_amount(asset.current_value)

    if target < purchase_date:
        return 0.0

    years = years_between(purchase_date, target)
    return apply_rate(asset, base_value, years)


def project_value(asset: AssetRecord, months: float) -> float:
    """
    Project the current value of an asset N months forward.

    Starts from current_value, not the purchase price.
    """
    current_value = parse_amount(asset.current_value)
    return apply_rate(asset, current_value, months / 12)
