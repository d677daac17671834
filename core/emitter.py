"""Best-effort delivery of normalized payloads to the current subscriber."""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Any

from core.subscription_slot import SubscriptionSlot

logger = logging.getLogger("nb.emitter")


@dataclass
class EmitterStats:
    """Counters for emissions that did or did not reach a subscriber."""

    delivered: int = 0
    dropped_unsubscribed: int = 0
    delivery_failed: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


class Emitter:
    """Forwards each payload to whoever is subscribed at that moment."""

    def __init__(self, slot: SubscriptionSlot) -> None:
        self.slot = slot
        self.stats = EmitterStats()
        self._stats_lock = threading.Lock()

    def emit(self, payload: dict[str, Any]) -> None:
        """Deliver `payload` once, or drop it. Never raises."""
        handle = self.slot.current_handle()
        if handle is None:
            self._count("dropped_unsubscribed")
            return
        try:
            delivered = handle.deliver(payload)
        except Exception as exc:
            logger.warning("Delivery to subscriber raised, dropping event: %s", exc)
            self._count("delivery_failed")
            return
        if delivered is False:
            logger.debug("Subscriber rejected event, dropping it.")
            self._count("delivery_failed")
            return
        self._count("delivered")

    def _count(self, name: str) -> None:
        with self._stats_lock:
            setattr(self.stats, name, getattr(self.stats, name) + 1)
