"""Producer-facing entry point for posted notifications."""

from __future__ import annotations

import logging
import threading
from typing import Any

from capture.extractor import FieldExtractor
from core.emitter import Emitter

logger = logging.getLogger("nb.listener")


class NotificationListener:
    """Passive listener invoked by the system event source.

    Callbacks arrive on the producer's own thread. Nothing raised while
    handling one escapes back into the producer.
    """

    def __init__(self, emitter: Emitter, extractor: FieldExtractor | None = None) -> None:
        self.emitter = emitter
        self.extractor = extractor or FieldExtractor()
        self.received = 0
        self.failed = 0
        self._lock = threading.Lock()

    def on_notification_posted(self, raw: Any) -> None:
        with self._lock:
            self.received += 1
        try:
            payload = self.extractor.extract(raw)
            self.emitter.emit(payload)
        except Exception:
            logger.exception("Dropping posted notification after unexpected error.")
            with self._lock:
                self.failed += 1

    def on_notification_removed(self, raw: Any) -> None:
        """Removals are not forwarded."""
        return None
