"""
Net Worth Calculations

Aggregates asset and liability valuations across a user's records:
current summary, per-asset change since purchase, net worth at a date,
monthly history and capital forecasts.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from networth.calculations import asset_value, liability
from networth.calculations.records import AssetRecord
from networth.calculations.utils import (
    DateLike,
    is_number,
    parse_amount,
    parse_decimal,
    to_datetime,
    utcnow,
    years_between,
)

logger = logging.getLogger(__name__)


@dataclass
class NetWorthSummary:
    """Current totals and monthly cashflow for a set of records."""

    total_assets: float
    total_liabilities: float
    net_worth: float
    monthly_income: float
    monthly_expense: float
    monthly_cashflow: float
    change_percent: float  # annualized cashflow relative to net worth


@dataclass
class AssetChange:
    """Change in value of a single asset since purchase."""

    change_amount: float
    change_percent: float
    ownership_years: float


@dataclass
class NetWorthPoint:
    """Net worth at a single date; liabilities are <= 0."""

    date: str
    assets: float
    liabilities: float
    assets_net: float


@dataclass
class CapitalForecast:
    """Current and projected total capital (wallets plus net worth)."""

    months: int
    current: float
    projected: float
    breakdown: Dict[str, float] = field(default_factory=dict)


def _finite(value: float, record: AssetRecord, context: str) -> float:
    """Drop non-finite valuations from totals, with a warning."""
    if math.isfinite(value):
        return value
    logger.warning(
        f"Skipping non-finite {context} for record {record.id} ({record.name}): {value}"
    )
    return 0.0


def _cashflow_amount(value) -> float:
    parsed = parse_decimal(value)
    return parsed if is_number(parsed) else 0.0


def calculate_net_worth(records: Iterable[AssetRecord]) -> NetWorthSummary:
    """
    Calculate net worth from stored current values.

    Liabilities are summed as magnitudes and subtracted from assets.
    """
    total_assets = 0.0
    total_liabilities = 0.0
    monthly_income = 0.0
    monthly_expense = 0.0

    for record in records:
        current_value = _finite(
            abs(parse_amount(record.current_value)), record, "current value"
        )
        if record.is_asset:
            total_assets += current_value
        elif record.is_liability:
            total_liabilities += current_value

        monthly_income += _cashflow_amount(record.monthly_income)
        monthly_expense += _cashflow_amount(record.monthly_expense)

    net_worth = total_assets - total_liabilities
    monthly_cashflow = monthly_income - monthly_expense
    change_percent = (
        (monthly_cashflow / net_worth) * 100 * 12 if net_worth > 0 else 0.0
    )

    return NetWorthSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        monthly_income=monthly_income,
        monthly_expense=monthly_expense,
        monthly_cashflow=monthly_cashflow,
        change_percent=change_percent,
    )


def calculate_asset_change(
    record: AssetRecord, as_of: DateLike = None
) -> AssetChange:
    """
    Calculate how much an asset's current value differs from its purchase price.

    Args:
        record: Asset snapshot
        as_of: Date ownership is measured up to (defaults to now)

    Returns:
        AssetChange; all zeros when purchase price or purchase date is missing
    """
    purchase_price = parse_decimal(record.purchase_price)
    purchase_date = to_datetime(record.purchase_date)

    if not is_number(purchase_price) or purchase_price == 0 or purchase_date is None:
        return AssetChange(change_amount=0.0, change_percent=0.0, ownership_years=0.0)

    current_value = parse_amount(record.current_value)
    change_amount = current_value - purchase_price
    change_percent = (change_amount / purchase_price) * 100

    as_of_date = to_datetime(as_of) or utcnow()
    ownership_years = years_between(purchase_date, as_of_date)

    return AssetChange(
        change_amount=change_amount,
        change_percent=change_percent,
        ownership_years=ownership_years,
    )


def calculate_net_worth_at_date(
    records: Iterable[AssetRecord],
    target_date: DateLike,
    include_assets: bool = True,
    include_liabilities: bool = True,
) -> NetWorthPoint:
    """
    Value every record at a date and total assets and liabilities.

    Liabilities come back from the liability calculator as negative
    amounts, so assets_net is their plain sum.
    """
    target = to_datetime(target_date)
    total_assets = 0.0
    total_liabilities = 0.0

    for record in records:
        if record.is_asset and include_assets:
            value = asset_value.calculate_value_at_date(record, target)
            total_assets += _finite(value, record, "asset value")
        elif record.is_liability and include_liabilities:
            value = liability.calculate_value_at_date(record, target)
            total_liabilities += _finite(value, record, "liability value")

    return NetWorthPoint(
        date=target.date().isoformat(),
        assets=total_assets,
        liabilities=total_liabilities,
        assets_net=total_assets + total_liabilities,
    )


def generate_history_dates(start_date: date, end_date: date) -> List[date]:
    """Generate monthly dates from start to end, inclusive of start."""
    if start_date > end_date:
        raise ValueError("start_date must not be after end_date")

    dates = []
    period = 0
    current = start_date
    while current <= end_date:
        dates.append(current)
        period += 1
        current = start_date + relativedelta(months=period)
    return dates


def generate_net_worth_history(
    records: List[AssetRecord],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    default_days: int = 180,
) -> List[Dict]:
    """
    Generate a monthly net worth history.

    Args:
        records: All of a user's assets and liabilities
        start_date: First point (defaults to default_days before end_date)
        end_date: Last date covered (defaults to today)
        default_days: Window used when start_date is omitted

    Returns:
        List of rows with date, assets, liabilities (as a positive
        magnitude) and net_worth
    """
    end = end_date or utcnow().date()
    start = start_date or end - timedelta(days=default_days)

    history = []
    for point_date in generate_history_dates(start, end):
        point = calculate_net_worth_at_date(records, point_date)
        history.append(
            {
                "date": point.date,
                "assets": round(point.assets, 2),
                "liabilities": round(-point.liabilities, 2),
                "net_worth": round(point.assets_net, 2),
            }
        )

    logger.debug(f"Generated {len(history)} history points from {start} to {end}")
    return history


def _payments_until_payoff(debt: float, payment: float, months: int) -> float:
    """Total payments made over the horizon, stopping once the debt is cleared."""
    months_of_payment = min(months, math.ceil(debt / payment))
    return min(payment * months_of_payment, debt)


def forecast_total_capital(
    records: List[AssetRecord],
    months: int,
    current_wallets_balance: float = 0.0,
) -> CapitalForecast:
    """
    Forecast total capital (wallets plus net worth) N months ahead.

    Assets grow or decay from their current value and their monthly
    cashflow accumulates in the wallets. Liabilities with a payment are
    amortized, and only the payments made before payoff leave the wallets.

    Raises:
        ValueError: If months is negative
    """
    if months < 0:
        raise ValueError("months must not be negative")

    summary = calculate_net_worth(records)

    projected_assets = 0.0
    projected_liabilities = 0.0
    adjusted_cashflow = 0.0

    for record in records:
        monthly_income = _cashflow_amount(record.monthly_income)
        monthly_expense = _cashflow_amount(record.monthly_expense)

        if record.is_asset:
            value = asset_value.project_value(record, months)
            projected_assets += _finite(value, record, "projected asset value")
            adjusted_cashflow += (monthly_income - monthly_expense) * months
        elif record.is_liability:
            debt = _finite(
                abs(parse_amount(record.current_value)), record, "current value"
            )
            payment = abs(monthly_expense)
            if payment > 0:
                value = -liability.project_value(record, months)
                projected_liabilities += _finite(
                    value, record, "projected liability value"
                )
                adjusted_cashflow -= _payments_until_payoff(debt, payment, months)
            else:
                projected_liabilities += debt
                adjusted_cashflow += monthly_income * months

    projected_wallets = current_wallets_balance + adjusted_cashflow
    projected_total = projected_wallets + projected_assets - projected_liabilities
    current_total = current_wallets_balance + summary.net_worth

    return CapitalForecast(
        months=months,
        current=current_total,
        projected=projected_total,
        breakdown={
            "wallets": projected_wallets,
            "assets": projected_assets,
            "liabilities": projected_liabilities,
        },
    )


def forecast_net_worth_series(
    records: List[AssetRecord],
    offsets: Iterable[int],
    current_wallets_balance: float = 0.0,
) -> List[CapitalForecast]:
    """Forecast total capital at each month offset, in the order given."""
    return [
        forecast_total_capital(records, months, current_wallets_balance)
        for months in offsets
    ]
