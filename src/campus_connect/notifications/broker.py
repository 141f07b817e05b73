from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.constants import DEFAULT_NOTIFICATION_QUEUE_SIZE
from ..common.ids import new_id

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Subscription:
    """One live connection on a channel. Messages are read with ``get``."""

    channel_key: str
    subscription_id: str = field(default_factory=new_id)
    _queue: "queue.Queue[Any]" = field(default_factory=queue.Queue, repr=False)

    def get(self, timeout: Optional[float] = None) -> Optional[Any]:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def pending(self) -> int:
        return self._queue.qsize()


class NotificationBroker:
    """In-process publish/subscribe hub keyed by channel (the user id).

    Delivery is best effort: a subscriber whose queue is full misses the message.
    """

    def __init__(self, *, queue_size: int = DEFAULT_NOTIFICATION_QUEUE_SIZE):
        self._queue_size = int(queue_size)
        self._channels: dict[str, list[Subscription]] = {}
        self._lock = threading.Lock()

    def subscribe(self, channel_key: str) -> Subscription:
        sub = Subscription(channel_key=channel_key, _queue=queue.Queue(maxsize=self._queue_size))
        with self._lock:
            self._channels.setdefault(channel_key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            subs = self._channels.get(sub.channel_key, [])
            if sub in subs:
                subs.remove(sub)
            if not subs:
                self._channels.pop(sub.channel_key, None)

    def is_connected(self, channel_key: str) -> bool:
        with self._lock:
            return bool(self._channels.get(channel_key))

    def publish(self, channel_key: str, message: Any) -> int:
        """Deliver to every subscription on the channel. Returns how many got it."""
        with self._lock:
            subs = list(self._channels.get(channel_key, []))

        delivered = 0
        for sub in subs:
            try:
                sub._queue.put_nowait(message)
                delivered += 1
            except queue.Full:
                logger.warning("Dropping live message for channel %s (queue full)", channel_key)
        return delivered
