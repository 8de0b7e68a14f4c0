"""
Print a net worth history and forecast for a sample portfolio.
Run with: python scripts/demo_forecast.py
"""
import sys
import os
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from networth.calculations import net_worth
from networth.calculations.records import AssetRecord


def sample_portfolio():
    return [
        AssetRecord(
            id=1,
            name="Apartment",
            type="asset",
            current_value="185000",
            purchase_price="150000",
            purchase_date=date(2021, 6, 1),
            created_at=date(2021, 6, 1),
            appreciation_rate="6",
            monthly_income="900",
            monthly_expense="150",
        ),
        AssetRecord(
            id=2,
            name="Car",
            type="asset",
            current_value="18000",
            purchase_price="26000",
            purchase_date=date(2023, 3, 15),
            created_at=date(2023, 3, 15),
            depreciation_rate="15",
            monthly_expense="120",
        ),
        AssetRecord(
            id=3,
            name="Car loan",
            type="liability",
            current_value="14000",
            purchase_date=date(2023, 3, 15),
            created_at=date(2023, 3, 15),
            monthly_expense="450",
        ),
    ]


def main():
    records = sample_portfolio()
    today = date.today()

    summary = net_worth.calculate_net_worth(records)
    print(f"Net worth today: ${summary.net_worth:,.0f}")
    print(f"  Assets:      ${summary.total_assets:,.0f}")
    print(f"  Liabilities: ${summary.total_liabilities:,.0f}")
    print(f"  Cashflow:    ${summary.monthly_cashflow:,.0f}/month")

    print("\nHistory (last 6 months):")
    for row in net_worth.generate_net_worth_history(records, end_date=today):
        print(
            f"  {row['date']}  assets ${row['assets']:>12,.0f}"
            f"  liabilities ${row['liabilities']:>10,.0f}"
            f"  net ${row['net_worth']:>12,.0f}"
        )

    print("\nForecast:")
    for forecast in net_worth.forecast_net_worth_series(
        records, [6, 12, 24, 60], current_wallets_balance=10000
    ):
        print(
            f"  +{forecast.months:>3} months  ${forecast.projected:,.0f}"
            f"  (wallets ${forecast.breakdown['wallets']:,.0f})"
        )


if __name__ == "__main__":
    main()
