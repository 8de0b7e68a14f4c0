"""
Valuation and Forecast Engine

Pure calculation modules for valuing assets and liabilities over time
and projecting net worth. No module here performs I/O or keeps state.
"""

from networth.calculations import asset_value, liability, net_worth, goal_predictor

__all__ = ["asset_value", "liability", "net_worth", "goal_predictor"]
