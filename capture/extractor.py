"""Normalize posted notification records into flat payloads."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypedDict

from pydantic import BaseModel

logger = logging.getLogger("nb.extractor")

NormalizedPayload = TypedDict(
    "NormalizedPayload",
    {
        "title": str,
        "text": str,
        "source-identifier": str,
        "timestamp": int,
    },
)

PAYLOAD_KEYS: tuple[str, ...] = ("title", "text", "source-identifier", "timestamp")


class FieldMap(BaseModel):
    """Extras keys the title and body are read from."""

    title_key: str = "android.title"
    text_key: str = "android.text"


def _lookup(record: Any, name: str) -> Any:
    """Read `name` from a mapping key or an attribute, None when absent."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _extras(raw: Any) -> Any:
    return _lookup(_lookup(raw, "notification"), "extras")


class FieldExtractor:
    """Derives a fully populated payload from one raw notification record.

    Every field is read on its own; an absent or unreadable field falls back
    to its default and never affects the others.
    """

    def __init__(self, field_map: FieldMap | None = None) -> None:
        self.field_map = field_map or FieldMap()

    def extract(self, raw: Any) -> NormalizedPayload:
        return {
            "title": self._field("title", "", lambda: self._title(raw)),
            "text": self._field("text", "", lambda: self._text(raw)),
            "source-identifier": self._field(
                "source-identifier", "", lambda: self._source(raw)
            ),
            "timestamp": self._field("timestamp", 0, lambda: self._timestamp(raw)),
        }

    @staticmethod
    def _field(name: str, default: Any, read: Callable[[], Any]) -> Any:
        try:
            value = read()
        except Exception as exc:
            logger.debug("Field %s unreadable, using default: %s", name, exc)
            return default
        if value is None:
            logger.debug("Field %s absent, using default.", name)
            return default
        return value

    def _title(self, raw: Any) -> str | None:
        value = _lookup(_extras(raw), self.field_map.title_key)
        # Typed string lookup: anything else counts as missing.
        return value if isinstance(value, str) else None

    def _text(self, raw: Any) -> str | None:
        value = _lookup(_extras(raw), self.field_map.text_key)
        return None if value is None else str(value)

    @staticmethod
    def _source(raw: Any) -> str | None:
        value = _lookup(raw, "package_name")
        return None if value is None else str(value)

    @staticmethod
    def _timestamp(raw: Any) -> int | None:
        value = _lookup(raw, "post_time")
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                value = float(text)
        return int(value)


_default_extractor = FieldExtractor()


def extract(raw: Any) -> NormalizedPayload:
    """Extract with the default field map."""
    return _default_extractor.extract(raw)
