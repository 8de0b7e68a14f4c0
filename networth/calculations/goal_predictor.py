"""
Goal Affordability Prediction

Estimates when a wishlist goal becomes affordable from the user's monthly
free capital (average income minus average expenses over recent months).
Accumulated savings are not tracked, so a positive prediction is a
timeline to save up from the monthly surplus, not an "affordable now".
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

import numpy as np
from dateutil.relativedelta import relativedelta

DEFAULT_WINDOW_MONTHS = 3


@dataclass
class MonthlyStats:
    """Average monthly income and expenses."""

    income: float
    expenses: float
    free_capital: float  # income - expenses


@dataclass
class GoalPrediction:
    """Affordability estimate for a single goal."""

    can_afford: bool
    free_capital: float
    months_to_afford: Optional[int]
    affordable_date: Optional[str]  # YYYY-MM-DD


def _recent_average(values: Sequence[float], window: int) -> float:
    recent = np.asarray(list(values)[-window:], dtype=float)
    recent = recent[np.isfinite(recent)]
    if recent.size == 0:
        return 0.0
    return float(np.mean(recent))


def calculate_monthly_stats(
    monthly_income: Sequence[float],
    monthly_expenses: Sequence[float],
    window: int = DEFAULT_WINDOW_MONTHS,
) -> MonthlyStats:
    """
    Average the last `window` months of income and expenses.

    Args:
        monthly_income: Income totals per month, oldest first
        monthly_expenses: Expense totals per month, oldest first
        window: Number of trailing months to average

    Returns:
        MonthlyStats; users with no history get zeros

    Raises:
        ValueError: If window is not positive
    """
    if window <= 0:
        raise ValueError("window must be positive")

    income = _recent_average(monthly_income, window)
    expenses = _recent_average(monthly_expenses, window)

    return MonthlyStats(
        income=income,
        expenses=expenses,
        free_capital=income - expenses,
    )


def _calculate_prediction(
    goal_amount: float, stats: MonthlyStats, today: date
) -> GoalPrediction:
    if stats.free_capital <= 0:
        return GoalPrediction(
            can_afford=False,
            free_capital=stats.free_capital,
            months_to_afford=None,
            affordable_date=None,
        )

    months_to_afford = math.ceil(goal_amount / stats.free_capital)
    affordable_date = today + relativedelta(months=months_to_afford)

    return GoalPrediction(
        can_afford=False,
        free_capital=stats.free_capital,
        months_to_afford=months_to_afford,
        affordable_date=affordable_date.isoformat(),
    )


def apply_budget_limits(stats: MonthlyStats, budget_limits: float) -> MonthlyStats:
    """
    Make free capital conservative when budget limits are stricter than spending.

    Uses min(actual free capital, income - budget limits). Budgets that
    exceed income are unrealistic and ignored.
    """
    if budget_limits <= 0 or budget_limits >= stats.income:
        return stats

    budget_constrained = stats.income - budget_limits
    return MonthlyStats(
        income=stats.income,
        expenses=stats.expenses,
        free_capital=min(stats.free_capital, budget_constrained),
    )


def predict_goal(
    goal_amount: float,
    stats: MonthlyStats,
    budget_limits: float = 0.0,
    current_capital: Optional[float] = None,
    target_date: Optional[date] = None,
    today: Optional[date] = None,
) -> GoalPrediction:
    """
    Predict when a goal becomes affordable.

    A user-chosen target date is returned as-is. A goal already covered by
    current capital is affordable today. Otherwise the timeline comes from
    the (budget-adjusted) monthly surplus.
    """
    today = today or date.today()

    if target_date:
        return GoalPrediction(
            can_afford=current_capital is not None and current_capital >= goal_amount,
            free_capital=stats.free_capital,
            months_to_afford=None,
            affordable_date=target_date.isoformat(),
        )

    if current_capital is not None and current_capital >= goal_amount:
        return GoalPrediction(
            can_afford=True,
            free_capital=stats.free_capital,
            months_to_afford=0,
            affordable_date=today.isoformat(),
        )

    return _calculate_prediction(
        goal_amount, apply_budget_limits(stats, budget_limits), today
    )


def predict_goals(
    goal_amounts: Sequence[float],
    stats: MonthlyStats,
    budget_limits: float = 0.0,
    current_capital: Optional[float] = None,
    today: Optional[date] = None,
) -> List[GoalPrediction]:
    """Predict several goals against one stats snapshot."""
    return [
        predict_goal(
            amount,
            stats,
            budget_limits=budget_limits,
            current_capital=current_capital,
            today=today,
        )
        for amount in goal_amounts
    ]
