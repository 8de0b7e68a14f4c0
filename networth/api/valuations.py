"""
Valuation API endpoints.

Accept a snapshot of a single asset or liability and return its value
at a date or projected N months ahead. Nothing is persisted.
"""

import math
from datetime import date, datetime
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, model_validator

from networth.calculations import asset_value, liability
from networth.calculations.records import AssetRecord, LIABILITY
from networth.config import get_settings

router = APIRouter()

DECIMAL_PATTERN = r"^-?\d+(\.\d+)?$"


class AssetInput(BaseModel):
    """Asset or liability record snapshot."""

    id: Optional[int] = None
    name: Optional[str] = None
    type: Literal["asset", "liability"]

    # Amounts are decimal strings, as stored
    current_value: str = Field(pattern=DECIMAL_PATTERN)
    purchase_price: Optional[str] = Field(default=None, pattern=DECIMAL_PATTERN)
    monthly_income: Optional[str] = Field(default=None, pattern=DECIMAL_PATTERN)
    monthly_expense: Optional[str] = Field(default=None, pattern=DECIMAL_PATTERN)

    # Percent per year
    appreciation_rate: Optional[str] = Field(default=None, pattern=DECIMAL_PATTERN)
    depreciation_rate: Optional[str] = Field(default=None, pattern=DECIMAL_PATTERN)

    purchase_date: Optional[date] = None
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_single_rate(self):
        if self.appreciation_rate is not None and self.depreciation_rate is not None:
            raise ValueError(
                "appreciation_rate and depreciation_rate are mutually exclusive"
            )
        return self

    def to_record(self) -> AssetRecord:
        return AssetRecord(**self.model_dump())


def value_at_date(record: AssetRecord, target_date: date) -> float:
    """Dispatch to the calculator matching the record type."""
    if record.type == LIABILITY:
        return liability.calculate_value_at_date(record, target_date)
    return asset_value.calculate_value_at_date(record, target_date)


def projected_value(record: AssetRecord, months: int) -> float:
    if record.type == LIABILITY:
        return liability.project_value(record, months)
    return asset_value.project_value(record, months)


def check_months(months: int) -> None:
    """Reject horizons beyond the configured maximum."""
    max_months = get_settings().forecast_max_months
    if months > max_months:
        raise HTTPException(
            status_code=400,
            detail=f"months must be at most {max_months}",
        )


def check_finite(value: float) -> None:
    """Reject values that overflow or cannot be computed."""
    if not math.isfinite(value):
        raise HTTPException(
            status_code=400,
            detail="Value is not a finite number",
        )


class ValueAtDateInput(BaseModel):
    """Input for valuing a record at a date."""

    record: AssetInput
    target_date: date


class ProjectionInput(BaseModel):
    """Input for projecting a record forward."""

    record: AssetInput
    months: int = Field(ge=0)


class ValuationResponse(BaseModel):
    """Calculated value of a single record."""

    type: str
    value: float
    target_date: Optional[date] = None
    months: Optional[int] = None


@router.post("/value-at-date", response_model=ValuationResponse)
async def calculate_value_at_date_endpoint(inputs: ValueAtDateInput):
    """Value an asset or liability at a past or future date."""
    record = inputs.record.to_record()
    value = value_at_date(record, inputs.target_date)
    check_finite(value)

    return ValuationResponse(
        type=record.type,
        value=round(value, 2),
        target_date=inputs.target_date,
    )


@router.post("/projection", response_model=ValuationResponse)
async def project_value_endpoint(inputs: ProjectionInput):
    """Project an asset or liability N months forward from its current value."""
    check_months(inputs.months)

    record = inputs.record.to_record()
    value = projected_value(record, inputs.months)
    check_finite(value)

    return ValuationResponse(
        type=record.type,
        value=round(value, 2),
        months=inputs.months,
    )
