"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import BridgeSettings, load_effective_config, load_settings, merge_dicts
from core.orchestrator import Orchestrator


def test_missing_config_falls_back_to_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path)

    assert settings == BridgeSettings()
    assert settings.fields.title_key == "android.title"


def test_local_override_merges_over_default(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "channel_name: base/events\nfields:\n  title_key: android.title\n  text_key: android.text\n",
        encoding="utf-8",
    )
    (config_dir / "local.yaml").write_text("fields:\n  text_key: android.bigText\n", encoding="utf-8")

    settings = load_settings(tmp_path)

    assert settings.channel_name == "base/events"
    assert settings.fields.title_key == "android.title"
    assert settings.fields.text_key == "android.bigText"


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_effective_config(tmp_path)


def test_invalid_field_types_are_rejected(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text("fields: nope\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings(tmp_path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 5}})

    assert merged == {"a": {"b": 1, "c": 5}, "d": 3}


def test_each_bundle_owns_its_own_slot(tmp_path: Path) -> None:
    first = Orchestrator(root=tmp_path).build()
    second = Orchestrator(root=tmp_path).build()

    assert first.slot is not second.slot
    assert first.channel.slot is first.slot
    assert first.emitter.slot is first.slot
    assert first.listener.emitter is first.emitter
