"""
API routes for the valuation engine.
"""

from fastapi import APIRouter

from networth.api import valuations, net_worth, goals

router = APIRouter()

# Include sub-routers
router.include_router(valuations.router, prefix="/valuations", tags=["valuations"])
router.include_router(net_worth.router, prefix="/net-worth", tags=["net-worth"])
router.include_router(goals.router, prefix="/goals", tags=["goals"])
