from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence

from pluginhub.domain.entities import RegistryEntry

logger = logging.getLogger(__name__)


class SystemPluginRegistry:
    """Read-only, in-memory registry of community and commercial plugins."""

    def __init__(self, plugins: Iterable[RegistryEntry] = ()) -> None:
        self._plugins: List[RegistryEntry] = [copy.deepcopy(plugin) for plugin in plugins]

    @classmethod
    def from_file(cls, registry_file: Path) -> SystemPluginRegistry:
        """Load entries from a JSON list; a missing file yields an empty registry."""
        if not registry_file.exists():
            logger.warning(f"System plugin file not found: {registry_file}")
            return cls()
        with registry_file.open("r", encoding="utf-8") as handle:
            raw: Any = json.load(handle)
        if not isinstance(raw, list):
            raise ValueError(f"System plugin file must hold a JSON list: {registry_file}")
        plugins = [item for item in raw if isinstance(item, dict) and item.get("id")]
        logger.info(f"Loaded {len(plugins)} system plugins from {registry_file}")
        return cls(plugins)

    def list_plugins(self) -> Sequence[RegistryEntry]:
        return tuple(copy.deepcopy(plugin) for plugin in self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)
