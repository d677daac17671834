"""Top-level wiring of the capture-and-forwarding bridge."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bridge.event_channel import EventChannel
from bridge.listener import NotificationListener
from capture.extractor import FieldExtractor
from core.config import BridgeSettings, load_settings
from core.emitter import Emitter
from core.subscription_slot import SubscriptionSlot


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: BridgeSettings
    slot: SubscriptionSlot
    emitter: Emitter
    listener: NotificationListener
    channel: EventChannel


class Orchestrator:
    """Creates and wires one independent set of bridge components."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self, settings: BridgeSettings | None = None) -> RuntimeBundle:
        config = settings or load_settings(self.root)
        slot = SubscriptionSlot()
        emitter = Emitter(slot)
        listener = NotificationListener(
            emitter=emitter,
            extractor=FieldExtractor(config.fields),
        )
        channel = EventChannel(slot, name=config.channel_name)
        return RuntimeBundle(
            config=config,
            slot=slot,
            emitter=emitter,
            listener=listener,
            channel=channel,
        )
