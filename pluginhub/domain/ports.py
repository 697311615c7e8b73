"""Ports the resolver depends on; adapters live in pluginhub.db and pluginhub.registry."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from pluginhub.domain.entities import AppDocument, AppVersion, CustomizationRecord, RegistryEntry


class AppDocumentPort(Protocol):
    async def find_app_by_id(self, app_id: str) -> Optional[AppDocument]:
        ...


class VersionPort(Protocol):
    async def get_latest_version(self, app_id: str, app: Optional[AppDocument] = None) -> AppVersion:
        """Newest published version, or the app's own graph when nothing is published."""
        ...

    async def get_version_by_id(
        self, app_id: str, version_id: Optional[str] = None, app: Optional[AppDocument] = None
    ) -> AppVersion:
        """Version ``version_id`` of the app, falling back to the latest one."""
        ...


class SystemPluginRegistryPort(Protocol):
    def list_plugins(self) -> Sequence[RegistryEntry]:
        ...


class CustomizationPort(Protocol):
    async def find_customization(
        self, plugin_id: str, associated_plugin_id: str
    ) -> Optional[CustomizationRecord]:
        ...
