"""Subscription slot state machine tests."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

from core.subscription_slot import SubscriptionSlot


def test_starts_unsubscribed() -> None:
    slot = SubscriptionSlot()

    assert slot.current_handle() is None
    assert slot.is_subscribed is False


def test_attach_then_current_handle_returns_it() -> None:
    slot = SubscriptionSlot()
    handle = MagicMock()

    slot.attach(handle)

    assert slot.current_handle() is handle
    assert slot.is_subscribed is True


def test_newest_attach_wins_without_touching_old_handle() -> None:
    slot = SubscriptionSlot()
    first, second = MagicMock(), MagicMock()

    slot.attach(first)
    slot.attach(second)

    assert slot.current_handle() is second
    assert first.method_calls == []


def test_detach_clears_and_is_idempotent() -> None:
    slot = SubscriptionSlot()
    slot.detach()
    assert slot.current_handle() is None

    slot.attach(MagicMock())
    slot.detach()
    slot.detach()

    assert slot.current_handle() is None


def test_concurrent_attach_detach_only_observes_whole_handles() -> None:
    slot = SubscriptionSlot()
    handles = [MagicMock(name=f"h{i}") for i in range(8)]
    seen: list[object] = []
    stop = threading.Event()

    def churn() -> None:
        for _ in range(500):
            for handle in handles:
                slot.attach(handle)
            slot.detach()
        stop.set()

    def read() -> None:
        while not stop.is_set():
            seen.append(slot.current_handle())

    writer = threading.Thread(target=churn)
    reader = threading.Thread(target=read)
    reader.start()
    writer.start()
    writer.join()
    reader.join()

    assert all(item is None or item in handles for item in seen)
    assert slot.current_handle() is None
