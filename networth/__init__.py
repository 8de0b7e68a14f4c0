"""
Net worth valuation and forecasting service.
"""

__version__ = "0.1.0"
