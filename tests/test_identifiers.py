"""Tests for the combined plugin id codec."""
from __future__ import annotations

import pytest

from pluginhub.domain.constants import PluginSource
from pluginhub.domain.errors import InvalidIdentifierError
from pluginhub.domain.identifiers import combine_plugin_id, split_combined_plugin_id


class TestSplitCombinedPluginId:
    """Test provenance detection and bare id extraction."""

    @pytest.mark.parametrize("plugin_id", ["64f1a2b3c4d5e6f708192a3b", "abc", "x"])
    def test_single_segment_is_personal(self, plugin_id):
        source, bare_id = split_combined_plugin_id(plugin_id)
        assert source is PluginSource.PERSONAL
        assert bare_id == plugin_id

    def test_commercial_keeps_prefixed_id(self):
        result = split_combined_plugin_id("commercial-weather-tool")
        assert result.source is PluginSource.COMMERCIAL
        assert result.plugin_id == "commercial-weather-tool"

    def test_community_keeps_prefixed_id(self):
        result = split_combined_plugin_id("community-dev-tools")
        assert result.source is PluginSource.COMMUNITY
        assert result.plugin_id == "community-dev-tools"

    def test_personal_prefix_is_stripped(self):
        result = split_combined_plugin_id("personal-64f1a2b3")
        assert result.source is PluginSource.PERSONAL
        assert result.plugin_id == "64f1a2b3"

    @pytest.mark.parametrize(
        "plugin_id",
        ["", "-", "commercial-", "-weather", "commercial--weather", "commercial-weather-"],
    )
    def test_empty_segments_rejected(self, plugin_id):
        with pytest.raises(InvalidIdentifierError):
            split_combined_plugin_id(plugin_id)

    def test_unknown_source_rejected(self):
        with pytest.raises(InvalidIdentifierError, match="Unknown plugin source"):
            split_combined_plugin_id("private-weather")

    @pytest.mark.parametrize(
        "plugin_id",
        ["commercial-weather-tool", "community-a", "personal-abc", "commercial-a-b-c"],
    )
    def test_multi_segment_never_yields_empty_parts(self, plugin_id):
        source, bare_id = split_combined_plugin_id(plugin_id)
        assert source.value
        assert bare_id


class TestCombinePluginId:
    """Test building combined ids."""

    def test_personal_passthrough(self):
        assert combine_plugin_id(PluginSource.PERSONAL, "abc") == "abc"

    def test_adds_prefix(self):
        assert combine_plugin_id(PluginSource.COMMUNITY, "dev-tools") == "community-dev-tools"

    def test_does_not_double_prefix(self):
        assert combine_plugin_id(PluginSource.COMMERCIAL, "commercial-weather") == "commercial-weather"

    def test_split_recovers_source(self):
        combined = combine_plugin_id(PluginSource.COMMERCIAL, "weather")
        assert split_combined_plugin_id(combined).source is PluginSource.COMMERCIAL
