"""Typer command handlers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

from bridge.event_channel import JsonLinesSink
from core.logging_setup import configure_logging
from core.orchestrator import Orchestrator, RuntimeBundle


def _runtime(root: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=root).build()
    configure_logging(bundle.config.log_level)
    return bundle


def replay(events_file: Path, detach_after: int | None = None, root: Path | None = None) -> None:
    """Push each recorded raw event through the listener."""
    bundle = _runtime(root)
    sink = JsonLinesSink(sys.stdout)
    bundle.channel.listen(sink)

    fed = 0
    # Undecodable bytes become U+FFFD; such lines then fail JSON parsing below.
    with events_file.open("r", encoding="utf-8", errors="replace") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            if detach_after is not None and fed == detach_after:
                bundle.channel.cancel()
            fed += 1
            try:
                raw = json.loads(line)
            except json.JSONDecodeError:
                # Unparsable lines still reach the listener as an empty event.
                raw = None
            bundle.listener.on_notification_posted(raw)

    bundle.channel.cancel()
    sink.end_of_stream()

    summary = {
        "received": bundle.listener.received,
        "failed": bundle.listener.failed,
        **bundle.emitter.stats.as_dict(),
    }
    typer.echo(json.dumps(summary), err=True)


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = Orchestrator(root=root).build()
    typer.echo(json.dumps(bundle.config.model_dump(), indent=2))
