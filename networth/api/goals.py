"""
Goal prediction API endpoints.
"""

from dataclasses import asdict
from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from networth.calculations import goal_predictor
from networth.config import get_settings

router = APIRouter()


class GoalStatsInput(BaseModel):
    """Monthly history used to estimate free capital."""

    monthly_income: List[float] = []  # oldest first
    monthly_expenses: List[float] = []
    budget_limits: float = 0.0
    current_capital: Optional[float] = None


class GoalInput(GoalStatsInput):
    """Input for a single goal prediction."""

    goal_amount: float = Field(gt=0)
    target_date: Optional[date] = None


class GoalBatchInput(GoalStatsInput):
    """Input for predicting several goals at once."""

    goal_amounts: List[Annotated[float, Field(gt=0)]] = Field(min_length=1)


def _monthly_stats(inputs: GoalStatsInput) -> goal_predictor.MonthlyStats:
    try:
        return goal_predictor.calculate_monthly_stats(
            inputs.monthly_income,
            inputs.monthly_expenses,
            window=get_settings().goal_stats_window_months,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/predict")
async def predict_goal(inputs: GoalInput):
    """Predict when a single goal becomes affordable."""
    stats = _monthly_stats(inputs)

    prediction = goal_predictor.predict_goal(
        inputs.goal_amount,
        stats,
        budget_limits=inputs.budget_limits,
        current_capital=inputs.current_capital,
        target_date=inputs.target_date,
    )

    return {"stats": asdict(stats), "prediction": asdict(prediction)}


@router.post("/predict-batch")
async def predict_goals(inputs: GoalBatchInput):
    """Predict several goals against the same monthly stats."""
    stats = _monthly_stats(inputs)

    predictions = goal_predictor.predict_goals(
        inputs.goal_amounts,
        stats,
        budget_limits=inputs.budget_limits,
        current_capital=inputs.current_capital,
    )

    return {
        "stats": asdict(stats),
        "predictions": [asdict(p) for p in predictions],
        "total": len(predictions),
    }
