"""
Tests for valuation, net worth and goal API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from networth.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def house_payload():
    return {
        "id": 1,
        "name": "House",
        "type": "asset",
        "current_value": "200000",
        "purchase_price": "100000",
        "purchase_date": "2022-01-01",
        "created_at": "2022-01-01T00:00:00",
        "appreciation_rate": "5",
        "monthly_income": "1000",
        "monthly_expense": "200",
    }


@pytest.fixture
def loan_payload():
    return {
        "id": 2,
        "name": "Car loan",
        "type": "liability",
        "current_value": "12000",
        "purchase_date": "2024-01-01",
        "created_at": "2024-01-01T00:00:00",
        "monthly_expense": "1000",
    }


class TestHealth:
    """Test health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


# ============================================================================
# VALUATION API TESTS
# ============================================================================

class TestValuationAPI:
    """Test single-record valuation endpoints."""

    def test_asset_value_at_date(self, client, house_payload):
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": house_payload, "target_date": "2024-01-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "asset"
        assert data["value"] == pytest.approx(100000 * 1.05 ** (730 / 365.25), abs=0.01)

    def test_asset_value_before_purchase(self, client, house_payload):
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": house_payload, "target_date": "2021-06-01"},
        )
        assert response.status_code == 200
        assert response.json()["value"] == 0

    def test_liability_value_at_date(self, client, loan_payload):
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": loan_payload, "target_date": "2030-01-01"},
        )
        assert response.status_code == 200
        assert response.json()["value"] == 0

        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": loan_payload, "target_date": "2024-01-01"},
        )
        assert response.json()["value"] == -12000

    def test_projection(self, client, house_payload):
        house_payload["current_value"] = "5000"
        house_payload["appreciation_rate"] = "10"
        response = client.post(
            "/api/valuations/projection",
            json={"record": house_payload, "months": 12},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["value"] == pytest.approx(5500)
        assert data["months"] == 12

    def test_liability_projection(self, client, loan_payload):
        response = client.post(
            "/api/valuations/projection",
            json={"record": loan_payload, "months": 3},
        )
        assert response.status_code == 200
        assert response.json()["value"] == -9000

    def test_projection_beyond_max_months(self, client, house_payload):
        response = client.post(
            "/api/valuations/projection",
            json={"record": house_payload, "months": 121},
        )
        assert response.status_code == 400

    def test_overflowing_value_rejected(self, client, house_payload):
        house_payload["appreciation_rate"] = "50"
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": house_payload, "target_date": "9999-01-01"},
        )
        assert response.status_code == 400

    def test_both_rates_rejected(self, client, house_payload):
        house_payload["depreciation_rate"] = "10"
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": house_payload, "target_date": "2024-01-01"},
        )
        assert response.status_code == 422

    def test_malformed_amount_rejected(self, client, house_payload):
        house_payload["current_value"] = "200,000"
        response = client.post(
            "/api/valuations/value-at-date",
            json={"record": house_payload, "target_date": "2024-01-01"},
        )
        assert response.status_code == 422

    def test_unknown_type_rejected(self, client, house_payload):
        house_payload["type"] = "equity"
        response = client.post(
            "/api/valuations/projection",
            json={"record": house_payload, "months": 1},
        )
        assert response.status_code == 422


# ============================================================================
# NET WORTH API TESTS
# ============================================================================

class TestNetWorthAPI:
    """Test collection-level net worth endpoints."""

    def test_summary(self, client, house_payload, loan_payload):
        response = client.post(
            "/api/net-worth/summary",
            json={"records": [house_payload, loan_payload]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_assets"] == 200000
        assert data["total_liabilities"] == 12000
        assert data["net_worth"] == 188000
        assert data["monthly_cashflow"] == -200

    def test_at_date(self, client, house_payload, loan_payload):
        response = client.post(
            "/api/net-worth/at-date",
            json={
                "records": [house_payload, loan_payload],
                "target_date": "2023-06-01",
                "include_liabilities": False,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["date"] == "2023-06-01"
        assert data["liabilities"] == 0
        assert data["assets"] > 100000

    def test_history(self, client, house_payload, loan_payload):
        response = client.post(
            "/api/net-worth/history",
            json={
                "records": [house_payload, loan_payload],
                "start_date": "2024-01-01",
                "end_date": "2024-12-31",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 12
        assert data["history"][0]["liabilities"] == 12000
        assert data["history"][-1]["liabilities"] < 2000

    def test_history_invalid_range(self, client, house_payload):
        response = client.post(
            "/api/net-worth/history",
            json={
                "records": [house_payload],
                "start_date": "2024-12-01",
                "end_date": "2024-01-01",
            },
        )
        assert response.status_code == 400

    def test_forecast(self, client, house_payload, loan_payload):
        response = client.post(
            "/api/net-worth/forecast",
            json={
                "records": [house_payload, loan_payload],
                "months": 12,
                "current_wallets_balance": 1000,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["months"] == 12
        assert data["current"] == 189000
        assert data["breakdown"]["assets"] == pytest.approx(210000)
        assert data["breakdown"]["liabilities"] == 0
        assert data["breakdown"]["wallets"] == pytest.approx(1000 + 800 * 12 - 12000)

    def test_forecast_default_months(self, client, house_payload):
        response = client.post(
            "/api/net-worth/forecast", json={"records": [house_payload]}
        )
        assert response.status_code == 200
        assert response.json()["months"] == 12

    def test_forecast_beyond_max_months(self, client, house_payload):
        response = client.post(
            "/api/net-worth/forecast",
            json={"records": [house_payload], "months": 240},
        )
        assert response.status_code == 400

    def test_forecast_series(self, client, house_payload, loan_payload):
        response = client.post(
            "/api/net-worth/forecast-series",
            json={"records": [house_payload, loan_payload], "offsets": [1, 6, 12]},
        )
        assert response.status_code == 200
        forecasts = response.json()["forecasts"]
        assert [f["months"] for f in forecasts] == [1, 6, 12]

    def test_forecast_series_rejects_negative_offset(self, client, house_payload):
        response = client.post(
            "/api/net-worth/forecast-series",
            json={"records": [house_payload], "offsets": [6, -1]},
        )
        assert response.status_code == 422

    def test_forecast_series_rejects_zero_offset(self, client, house_payload):
        response = client.post(
            "/api/net-worth/forecast-series",
            json={"records": [house_payload], "offsets": [0, 12]},
        )
        assert response.status_code == 422

    def test_asset_change(self, client, house_payload):
        response = client.post(
            "/api/net-worth/asset-change",
            json={"record": house_payload, "as_of": "2024-01-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["change_amount"] == 100000
        assert data["change_percent"] == pytest.approx(100)


# ============================================================================
# GOAL API TESTS
# ============================================================================

class TestGoalAPI:
    """Test goal prediction endpoints."""

    def test_predict(self, client):
        response = client.post(
            "/api/goals/predict",
            json={
                "goal_amount": 4500,
                "monthly_income": [5000, 5000, 5000],
                "monthly_expenses": [3500, 3500, 3500],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["free_capital"] == 1500
        assert data["prediction"]["months_to_afford"] == 3
        assert data["prediction"]["can_afford"] is False

    def test_predict_already_affordable(self, client):
        response = client.post(
            "/api/goals/predict",
            json={"goal_amount": 1000, "current_capital": 2000},
        )
        assert response.status_code == 200
        prediction = response.json()["prediction"]
        assert prediction["can_afford"] is True
        assert prediction["months_to_afford"] == 0

    def test_predict_target_date(self, client):
        response = client.post(
            "/api/goals/predict",
            json={"goal_amount": 1000, "target_date": "2026-12-01"},
        )
        assert response.status_code == 200
        assert response.json()["prediction"]["affordable_date"] == "2026-12-01"

    def test_predict_requires_positive_amount(self, client):
        response = client.post("/api/goals/predict", json={"goal_amount": 0})
        assert response.status_code == 422

    def test_predict_batch(self, client):
        response = client.post(
            "/api/goals/predict-batch",
            json={
                "goal_amounts": [1500, 3000],
                "monthly_income": [4000],
                "monthly_expenses": [2500],
                "budget_limits": 3000,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [p["months_to_afford"] for p in data["predictions"]] == [2, 3]

    def test_predict_batch_requires_positive_amounts(self, client):
        response = client.post(
            "/api/goals/predict-batch",
            json={"goal_amounts": [1500, 0], "monthly_income": [4000]},
        )
        assert response.status_code == 422
