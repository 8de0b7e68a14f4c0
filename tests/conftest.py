"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from networth.calculations.records import AssetRecord


@pytest.fixture
def house():
    """Appreciating asset with rental cashflow."""
    return AssetRecord(
        id=1,
        name="House",
        type="asset",
        current_value="200000",
        purchase_price="150000",
        purchase_date=date(2020, 1, 1),
        created_at=date(2020, 1, 1),
        appreciation_rate="5",
        monthly_income="1000",
        monthly_expense="200",
    )


@pytest.fixture
def car():
    """Depreciating asset with running costs."""
    return AssetRecord(
        id=2,
        name="Car",
        type="asset",
        current_value="20000",
        purchase_price="30000",
        purchase_date=date(2022, 1, 1),
        created_at=date(2022, 1, 1),
        depreciation_rate="20",
        monthly_expense="100",
    )


@pytest.fixture
def car_loan():
    """Liability paid down by a fixed monthly payment."""
    return AssetRecord(
        id=3,
        name="Car loan",
        type="liability",
        current_value="12000",
        purchase_date=date(2024, 1, 1),
        created_at=date(2024, 1, 1),
        monthly_expense="1000",
    )


@pytest.fixture
def portfolio(house, car, car_loan):
    """A user's full asset/liability collection."""
    return [house, car, car_loan]
