"""
Business logic for customer orders.

Orders reference juices by id.  The total is computed once, at
creation, from the prices of the referenced juices that exist at that
moment; unknown ids contribute nothing.  Resolving an order's juices
silently drops ids that no longer exist.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.events import EventBroker, ORDER_CREATED
from ..core.exceptions import NotFoundError
from ..core.store import RecordStore
from ..schemas.juice import JuiceRead
from ..schemas.order import OrderCreate, OrderRead, STATUS_PENDING

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Order not found"


class OrderService:
    """Order placement, lookup and status changes."""

    def __init__(self, store: RecordStore, broker: Optional[EventBroker] = None) -> None:
        self._store = store
        self._broker = broker

    async def list_orders(self) -> List[OrderRead]:
        with self._store.lock:
            return [order.model_copy(deep=True) for order in self._store.orders]

    async def get_order(self, order_id: str) -> OrderRead:
        with self._store.lock:
            return self._find(order_id).model_copy(deep=True)

    async def resolve_order_juices(self, order: OrderRead) -> List[JuiceRead]:
        """Return the juices referenced by ``order`` in item order."""
        with self._store.lock:
            by_id = {juice.id: juice for juice in self._store.juices}
            return [by_id[item].model_copy() for item in order.items if item in by_id]

    async def compute_total(self, items: List[str]) -> float:
        with self._store.lock:
            return self._total(items)

    async def create_order(self, data: OrderCreate) -> OrderRead:
        with self._store.lock:
            order = OrderRead(
                id=self._store.next_order_id(),
                customer_name=data.customer_name,
                items=list(data.items),
                total=self._total(data.items),
                status=STATUS_PENDING,
                created_at=datetime.now(timezone.utc),
            )
            self._store.orders.append(order)
        logger.info("Created order %s for %s, total %.2f", order.id, order.customer_name, order.total)
        if self._broker is not None:
            self._broker.publish(ORDER_CREATED, order.model_copy(deep=True))
        return order.model_copy(deep=True)

    async def update_order_status(self, order_id: str, status: str) -> OrderRead:
        """Set ``status`` verbatim; no transition rules are enforced."""
        with self._store.lock:
            order = self._find(order_id)
            order.status = status
            result = order.model_copy(deep=True)
        logger.info("Order %s status set to %s", order_id, status)
        return result

    def _total(self, items: List[str]) -> float:
        prices = {juice.id: juice.price for juice in self._store.juices}
        return sum(prices.get(item, 0.0) for item in items)

    def _find(self, order_id: str) -> OrderRead:
        for order in self._store.orders:
            if order.id == order_id:
                return order
        logger.warning("Order %s not found", order_id)
        raise NotFoundError(ORDER_NOT_FOUND)
