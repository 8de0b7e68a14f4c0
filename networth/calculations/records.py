"""
Asset/liability record snapshot consumed by the calculators.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from networth.calculations.utils import DecimalLike

ASSET = "asset"
LIABILITY = "liability"


@dataclass
class AssetRecord:
    """A single asset or liability row, discriminated by ``type``."""

    type: str  # 'asset' or 'liability'
    current_value: DecimalLike  # USD, non-negative in storage
    purchase_price: DecimalLike = None  # USD, compounding base when set
    purchase_date: Optional[Union[date, datetime, str]] = None
    created_at: Optional[Union[date, datetime, str]] = None
    appreciation_rate: DecimalLike = None  # % per year
    depreciation_rate: DecimalLike = None  # % per year
    monthly_income: DecimalLike = None  # e.g. rent received
    monthly_expense: DecimalLike = None  # maintenance, or loan payment for liabilities
    id: Optional[int] = None
    name: Optional[str] = None

    @property
    def is_asset(self) -> bool:
        return self.type == ASSET

    @property
    def is_liability(self) -> bool:
        return self.type == LIABILITY
