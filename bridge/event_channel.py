"""Named event stream connecting consumer subscriptions to the slot."""

from __future__ import annotations

import json
import logging
import queue
from typing import Any, Protocol, TextIO

from core.subscription_slot import SubscriptionSlot

DEFAULT_CHANNEL_NAME = "notifybridge/notification_events"

logger = logging.getLogger("nb.channel")


class EventSink(Protocol):
    """Consumer-side end of the stream."""

    def success(self, event: Any) -> None: ...

    def error(self, code: str, message: str | None, details: Any = None) -> None: ...

    def end_of_stream(self) -> None: ...


class SinkHandle:
    """Subscriber handle that forwards payloads to an event sink."""

    def __init__(self, sink: EventSink) -> None:
        self.sink = sink

    def deliver(self, payload: dict[str, Any]) -> bool:
        try:
            self.sink.success(payload)
        except Exception as exc:
            logger.debug("Sink rejected event: %s", exc)
            return False
        return True


class EventChannel:
    """Binds consumer listen/cancel actions to a subscription slot.

    `arguments` on `listen` and `cancel` mirrors the transport's stream
    handler signature; the bridge takes no subscription arguments.
    """

    def __init__(self, slot: SubscriptionSlot, name: str = DEFAULT_CHANNEL_NAME) -> None:
        self.slot = slot
        self.name = name

    def listen(self, sink: EventSink, arguments: Any = None) -> SinkHandle:
        """Start streaming to `sink`, replacing any earlier listener."""
        handle = SinkHandle(sink)
        self.slot.attach(handle)
        logger.info("Listener attached on %s", self.name)
        return handle

    def cancel(self, arguments: Any = None) -> None:
        """Stop streaming. Safe to call when nobody is listening."""
        self.slot.detach()
        logger.info("Listener detached on %s", self.name)


class SinkClosedError(RuntimeError):
    """Raised when an event reaches a sink that has already ended."""


class QueueSink:
    """In-process sink that buffers received events for a local consumer."""

    def __init__(self) -> None:
        self._queue: queue.Queue[Any] = queue.Queue()
        self.errors: list[tuple[str, str | None, Any]] = []
        self.closed = False

    def success(self, event: Any) -> None:
        if self.closed:
            raise SinkClosedError("Sink has reached end of stream.")
        self._queue.put(event)

    def error(self, code: str, message: str | None, details: Any = None) -> None:
        self.errors.append((code, message, details))

    def end_of_stream(self) -> None:
        self.closed = True

    def drain(self) -> list[Any]:
        """Return and remove every buffered event."""
        events: list[Any] = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events


class JsonLinesSink:
    """Writes each event as one JSON line."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def success(self, event: Any) -> None:
        self.stream.write(json.dumps(event, ensure_ascii=True) + "\n")
        self.stream.flush()

    def error(self, code: str, message: str | None, details: Any = None) -> None:
        payload = {"error": code, "message": message, "details": details}
        self.stream.write(json.dumps(payload, ensure_ascii=True, default=str) + "\n")

    def end_of_stream(self) -> None:
        self.stream.flush()
