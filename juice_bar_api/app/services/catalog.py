"""
Composition of the juice and order services over one store.
"""

from typing import Optional

from ..core.events import EventBroker
from ..core.store import RecordStore
from .juice_service import JuiceService
from .order_service import OrderService


class Catalog:
    """The shared data‑access layer handed to both front‑ends."""

    def __init__(self, store: RecordStore, broker: Optional[EventBroker] = None) -> None:
        self.store = store
        self.broker = broker if broker is not None else EventBroker()
        self.juices = JuiceService(store, self.broker)
        self.orders = OrderService(store, self.broker)
