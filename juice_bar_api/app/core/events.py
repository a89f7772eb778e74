"""
In‑process publish/subscribe broker.

Services publish newly created records on a topic; GraphQL
subscriptions consume them.  Each subscriber owns a bounded
``asyncio.Queue`` and is registered as soon as ``subscribe`` returns,
so nothing published after that call is missed.  When a subscriber
falls ``max_pending`` payloads behind, further payloads for it are
dropped and logged until it catches up.
"""

import asyncio
import logging
import threading
from collections import defaultdict
from typing import Any, DefaultDict, List

logger = logging.getLogger(__name__)

JUICE_ADDED = "juice_added"
ORDER_CREATED = "order_created"

DEFAULT_MAX_PENDING = 100


class TopicSubscription:
    """Async iterator over the payloads published on one topic."""

    def __init__(self, broker: "EventBroker", topic: str, max_pending: int) -> None:
        self.topic = topic
        self._broker = broker
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_pending)

    def __aiter__(self) -> "TopicSubscription":
        return self

    async def __anext__(self) -> Any:
        return await self._queue.get()

    def deliver(self, payload: Any) -> bool:
        """Queue ``payload``; returns ``False`` if the subscriber is full."""
        try:
            self._queue.put_nowait(payload)
        except asyncio.QueueFull:
            logger.warning(
                "Subscriber on %s is %d events behind; dropping event",
                self.topic,
                self._queue.qsize(),
            )
            return False
        return True

    def close(self) -> None:
        self._broker.unsubscribe(self)


class EventBroker:
    """Fan‑out of published payloads to every live subscription."""

    def __init__(self, max_pending: int = DEFAULT_MAX_PENDING) -> None:
        self.max_pending = max_pending
        self._lock = threading.Lock()
        self._subscriptions: DefaultDict[str, List[TopicSubscription]] = defaultdict(list)

    def subscribe(self, topic: str) -> TopicSubscription:
        subscription = TopicSubscription(self, topic, self.max_pending)
        with self._lock:
            self._subscriptions[topic].append(subscription)
        logger.debug("New subscriber on %s", topic)
        return subscription

    def unsubscribe(self, subscription: TopicSubscription) -> None:
        with self._lock:
            subscribers = self._subscriptions.get(subscription.topic, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
                logger.debug("Subscriber on %s left", subscription.topic)

    def subscriber_count(self, topic: str) -> int:
        """Number of live subscriptions on ``topic``.

        Lets callers wait until a client has actually subscribed, or has
        gone away, before acting on it.
        """
        with self._lock:
            return len(self._subscriptions.get(topic, []))

    def publish(self, topic: str, payload: Any) -> int:
        """Deliver ``payload`` to all subscribers of ``topic``.

        Returns the number of subscriptions the payload was queued for.
        """
        with self._lock:
            subscribers = list(self._subscriptions.get(topic, []))
        return sum(1 for subscription in subscribers if subscription.deliver(payload))
