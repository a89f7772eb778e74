"""
Top‑level REST router.

Aggregates the domain routers under a unified prefix.  When new
domains are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import juices, orders

router = APIRouter()

router.include_router(juices.router, prefix="/juices", tags=["juices"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
