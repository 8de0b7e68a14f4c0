"""
Net worth API endpoints.

Aggregate a posted collection of asset/liability snapshots into a
summary, a dated history or a capital forecast.
"""

from dataclasses import asdict
from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from networth.api.valuations import AssetInput, check_months
from networth.calculations import net_worth
from networth.config import get_settings

router = APIRouter()


class RecordsInput(BaseModel):
    """A user's full asset/liability collection."""

    records: List[AssetInput] = []

    def to_records(self):
        return [r.to_record() for r in self.records]


class NetWorthAtDateInput(RecordsInput):
    """Input for net worth at a single date."""

    target_date: date
    include_assets: bool = True
    include_liabilities: bool = True


class HistoryInput(RecordsInput):
    """Input for a monthly net worth history."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ForecastInput(RecordsInput):
    """Input for a total capital forecast."""

    months: Optional[int] = Field(default=None, ge=1)
    current_wallets_balance: float = 0.0


class ForecastSeriesInput(RecordsInput):
    """Input for forecasts at several month offsets."""

    offsets: List[Annotated[int, Field(ge=1)]] = Field(min_length=1)
    current_wallets_balance: float = 0.0


class AssetChangeInput(BaseModel):
    """Input for an asset's change since purchase."""

    record: AssetInput
    as_of: Optional[date] = None


@router.post("/summary")
async def calculate_summary(inputs: RecordsInput):
    """Net worth and monthly cashflow from current values."""
    summary = net_worth.calculate_net_worth(inputs.to_records())
    return asdict(summary)


@router.post("/at-date")
async def calculate_at_date(inputs: NetWorthAtDateInput):
    """Assets, liabilities and net worth at a single date."""
    point = net_worth.calculate_net_worth_at_date(
        inputs.to_records(),
        inputs.target_date,
        include_assets=inputs.include_assets,
        include_liabilities=inputs.include_liabilities,
    )
    return asdict(point)


@router.post("/history")
async def calculate_history(inputs: HistoryInput):
    """Monthly net worth history (default: last 180 days)."""
    settings = get_settings()

    try:
        history = net_worth.generate_net_worth_history(
            inputs.to_records(),
            start_date=inputs.start_date,
            end_date=inputs.end_date,
            default_days=settings.history_default_days,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"history": history, "total": len(history)}


@router.post("/forecast")
async def calculate_forecast(inputs: ForecastInput):
    """Forecast total capital N months ahead."""
    months = inputs.months or get_settings().forecast_default_months
    check_months(months)

    forecast = net_worth.forecast_total_capital(
        inputs.to_records(),
        months,
        current_wallets_balance=inputs.current_wallets_balance,
    )
    return asdict(forecast)


@router.post("/forecast-series")
async def calculate_forecast_series(inputs: ForecastSeriesInput):
    """Forecast total capital at each requested month offset."""
    for months in inputs.offsets:
        check_months(months)

    series = net_worth.forecast_net_worth_series(
        inputs.to_records(),
        inputs.offsets,
        current_wallets_balance=inputs.current_wallets_balance,
    )

    return {"forecasts": [asdict(f) for f in series]}


@router.post("/asset-change")
async def calculate_asset_change(inputs: AssetChangeInput):
    """Change in an asset's value since purchase."""
    change = net_worth.calculate_asset_change(
        inputs.record.to_record(), as_of=inputs.as_of
    )
    return asdict(change)
