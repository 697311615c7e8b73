from __future__ import annotations

from pathlib import Path

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pluginhub.config import settings
from pluginhub.db.database import get_db
from pluginhub.db.repositories import AppRepository, AppVersionRepository, CustomizationRepository
from pluginhub.registry import SystemPluginRegistry
from pluginhub.application.child_app_resolver import ChildAppResolver
from pluginhub.application.child_app_service import ChildAppService

# Loaded once per process; the registry never changes while serving
_system_plugin_registry: SystemPluginRegistry | None = None


def get_system_plugin_registry() -> SystemPluginRegistry:
    global _system_plugin_registry
    if _system_plugin_registry is None:
        _system_plugin_registry = SystemPluginRegistry.from_file(Path(settings.SYSTEM_PLUGIN_FILE))
    return _system_plugin_registry


def reset_system_plugin_registry() -> None:
    global _system_plugin_registry
    _system_plugin_registry = None


def get_child_app_resolver(
    db: AsyncSession = Depends(get_db),
    registry: SystemPluginRegistry = Depends(get_system_plugin_registry),
) -> ChildAppResolver:
    return ChildAppResolver(
        apps=AppRepository(db),
        versions=AppVersionRepository(db),
        registry=registry,
        customizations=CustomizationRepository(db),
    )


def get_child_app_service(
    resolver: ChildAppResolver = Depends(get_child_app_resolver),
) -> ChildAppService:
    return ChildAppService(resolver=resolver)
