"""
Order endpoints.

Listing, placement, lookup and status changes.  Orders cannot be
deleted.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.juice import JuiceRead
from ...schemas.order import OrderCreate, OrderRead, OrderStatusUpdate
from ...services import Catalog
from ..deps import get_catalog

router = APIRouter()


@router.get("", response_model=List[OrderRead])
async def list_orders(catalog: Catalog = Depends(get_catalog)) -> List[OrderRead]:
    return await catalog.orders.list_orders()


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(order_in: OrderCreate, catalog: Catalog = Depends(get_catalog)) -> OrderRead:
    """Place an order.

    ``customerName`` and an ``items`` list of juice ids are required.
    The total is the sum of the current prices of the juices that
    exist; unknown ids are kept in ``items`` but cost nothing.
    """
    return await catalog.orders.create_order(order_in)


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(order_id: str, catalog: Catalog = Depends(get_catalog)) -> OrderRead:
    return await catalog.orders.get_order(order_id)


@router.get("/{order_id}/juices", response_model=List[JuiceRead])
async def get_order_juices(order_id: str, catalog: Catalog = Depends(get_catalog)) -> List[JuiceRead]:
    """Return the juices of an order that still exist, in item order."""
    order = await catalog.orders.get_order(order_id)
    return await catalog.orders.resolve_order_juices(order)


@router.patch("/{order_id}/status", response_model=OrderRead)
async def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> OrderRead:
    return await catalog.orders.update_order_status(order_id, body.status)
