"""Single-subscriber slot shared by the producer and consumer lifecycles."""

from __future__ import annotations

import threading
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SubscriberHandle(Protocol):
    """Capability representing one attached consumer."""

    def deliver(self, payload: dict[str, Any]) -> bool:
        """Hand one payload to the consumer; False when it could not be delivered."""
        ...


class SubscriptionSlot:
    """Holds at most one subscriber handle.

    The handle reference is swapped whole under a lock, so readers observe
    either the previous or the new handle. The lock only guards the swap and
    is never held while a payload is being delivered.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handle: SubscriberHandle | None = None

    def attach(self, handle: SubscriberHandle) -> None:
        """Install `handle`, replacing any previous subscriber."""
        with self._lock:
            self._handle = handle

    def detach(self) -> None:
        """Clear the current subscriber. No-op when nothing is attached."""
        with self._lock:
            self._handle = None

    def current_handle(self) -> SubscriberHandle | None:
        with self._lock:
            return self._handle

    @property
    def is_subscribed(self) -> bool:
        return self.current_handle() is not None
