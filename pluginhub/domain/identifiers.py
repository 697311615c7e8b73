"""Combined plugin id codec.

Plugin id rule:
  personal:   <app id>
  community:  community-<id>
  commercial: commercial-<id>

Registry ids keep their provenance prefix, so for community and commercial
ids the bare id is the whole combined string.
"""
from __future__ import annotations

from typing import NamedTuple

from pluginhub.domain.constants import PluginSource
from pluginhub.domain.errors import InvalidIdentifierError

SEPARATOR = "-"


class PluginIdentity(NamedTuple):
    source: PluginSource
    plugin_id: str


def split_combined_plugin_id(combined_id: str) -> PluginIdentity:
    """Split a combined id into its provenance and the id to look up."""
    if not combined_id:
        raise InvalidIdentifierError("Plugin id is required")

    parts = combined_id.split(SEPARATOR)
    if len(parts) == 1:
        return PluginIdentity(PluginSource.PERSONAL, combined_id)

    source_tag, remainder = combined_id.split(SEPARATOR, 1)
    if not source_tag or not remainder or any(not part for part in parts):
        raise InvalidIdentifierError(f"Malformed plugin id: {combined_id}")

    try:
        source = PluginSource(source_tag)
    except ValueError:
        raise InvalidIdentifierError(f"Unknown plugin source '{source_tag}' in id: {combined_id}")

    if source is PluginSource.PERSONAL:
        return PluginIdentity(source, remainder)
    return PluginIdentity(source, combined_id)


def combine_plugin_id(source: PluginSource, plugin_id: str) -> str:
    """Inverse of split_combined_plugin_id for a bare id."""
    if source is PluginSource.PERSONAL:
        return plugin_id
    prefix = f"{source.value}{SEPARATOR}"
    if plugin_id.startswith(prefix):
        return plugin_id
    return f"{prefix}{plugin_id}"
