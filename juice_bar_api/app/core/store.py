"""
In‑memory record store.

``RecordStore`` holds the two ordered collections (juices and orders)
that make up the whole state of the service.  A single re‑entrant
lock guards both lists; services hold it for the duration of each
read or write and never across an ``await``.

Ids are drawn from per‑collection counters that only move forward, so
an id is never handed out twice, even after the record it belonged to
has been deleted.
"""

import itertools
import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..schemas.juice import JuiceRead
from ..schemas.order import OrderRead

SEED_JUICES = [
    {"id": "1", "name": "Orange Juice", "description": "Freshly squeezed oranges", "price": 4.99,
     "category": "Fruit", "in_stock": True, "image_url": "./images/first.jpg"},
    {"id": "2", "name": "Green Detox", "description": "Spinach, kale, and apple blend", "price": 5.99,
     "category": "Vegetable", "in_stock": True, "image_url": "./images/second.jpg"},
    {"id": "3", "name": "Berry Blast", "description": "Mixed berries with yogurt", "price": 6.99,
     "category": "Smoothie", "in_stock": True, "image_url": "./images/third.jpg"},
    {"id": "4", "name": "Carrot Boost", "description": "Fresh carrots with ginger", "price": 4.49,
     "category": "Vegetable", "in_stock": False, "image_url": "./images/look.jpg"},
    {"id": "5", "name": "Pineapple Paradise", "description": "Tropical pineapple with coconut", "price": 7.99,
     "category": "Fruit", "in_stock": True, "image_url": "./images/first.jpg"},
]

SEED_ORDERS = [
    {"id": "1", "customer_name": "Pavan", "items": ["1", "2"], "total": 10.98, "status": "completed",
     "created_at": datetime(2024, 1, 15, tzinfo=timezone.utc)},
    {"id": "2", "customer_name": "Sunny", "items": ["3"], "total": 6.99, "status": "pending",
     "created_at": datetime(2024, 1, 16, tzinfo=timezone.utc)},
]


def _highest_numeric_id(records: Iterable) -> int:
    return max((int(r.id) for r in records if r.id.isdigit()), default=0)


class RecordStore:
    """Process‑wide container for juices and orders."""

    def __init__(
        self,
        juices: Optional[Iterable[JuiceRead]] = None,
        orders: Optional[Iterable[OrderRead]] = None,
    ) -> None:
        self.lock = threading.RLock()
        self.juices: List[JuiceRead] = list(juices or [])
        self.orders: List[OrderRead] = list(orders or [])
        self._juice_ids = itertools.count(_highest_numeric_id(self.juices) + 1)
        self._order_ids = itertools.count(_highest_numeric_id(self.orders) + 1)

    @classmethod
    def seeded(cls) -> "RecordStore":
        """Return a store populated with the demo catalog."""
        return cls(
            juices=[JuiceRead(**data) for data in SEED_JUICES],
            orders=[OrderRead(**data) for data in SEED_ORDERS],
        )

    def next_juice_id(self) -> str:
        with self.lock:
            return str(next(self._juice_ids))

    def next_order_id(self) -> str:
        with self.lock:
            return str(next(self._order_ids))
