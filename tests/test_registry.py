"""Tests for the static system plugin registry."""
from __future__ import annotations

import json

import pytest

from pluginhub.config import REPO_ROOT
from pluginhub.registry import SystemPluginRegistry


class TestSystemPluginRegistry:
    """Test loading and read-only access."""

    def test_from_file(self, tmp_path):
        registry_file = tmp_path / "plugins.json"
        registry_file.write_text(json.dumps([
            {"id": "community-a", "name": "A"},
            {"name": "no id"},
            "not a dict",
        ]), encoding="utf-8")

        registry = SystemPluginRegistry.from_file(registry_file)

        assert len(registry) == 1
        assert registry.list_plugins()[0]["id"] == "community-a"

    def test_missing_file_is_empty(self, tmp_path):
        assert len(SystemPluginRegistry.from_file(tmp_path / "missing.json")) == 0

    def test_non_list_file_rejected(self, tmp_path):
        registry_file = tmp_path / "plugins.json"
        registry_file.write_text(json.dumps({"id": "community-a"}), encoding="utf-8")
        with pytest.raises(ValueError):
            SystemPluginRegistry.from_file(registry_file)

    def test_entries_are_copies(self):
        source = {"id": "community-a", "workflow": {"nodes": []}}
        registry = SystemPluginRegistry([source])

        entry = registry.list_plugins()[0]
        entry["workflow"]["nodes"].append({"node_id": "x"})
        source["name"] = "changed"

        fresh = registry.list_plugins()[0]
        assert fresh["workflow"]["nodes"] == []
        assert "name" not in fresh

    def test_bundled_registry_loads(self):
        registry = SystemPluginRegistry.from_file(REPO_ROOT / "data" / "system_plugins.json")
        ids = {plugin["id"] for plugin in registry.list_plugins()}
        assert {"commercial-weather-tool", "commercial-licensed-search", "community-dev-tools"} <= ids
