"""Resolve a combined plugin id into a normalized ChildApp."""
from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any, Dict, Optional

from pluginhub.domain.constants import FlowNodeTemplateType, PluginSource
from pluginhub.domain.entities import AppDocument, AppVersion, ChildApp, RegistryEntry, WorkflowGraph
from pluginhub.domain.errors import NotFoundError, UnauthorizedError, VersionNotFoundError
from pluginhub.domain.identifiers import split_combined_plugin_id
from pluginhub.domain.ports import (
    AppDocumentPort,
    CustomizationPort,
    SystemPluginRegistryPort,
    VersionPort,
)

logger = logging.getLogger(__name__)


class ResolutionMode(str, Enum):
    LATEST_ONLY = "latest-only"
    SPECIFIC_OR_LATEST = "specific-or-latest"


class ChildAppResolver:
    """Routes a plugin id to the owned-app store or the system plugin registry.

    Community and commercial ids live in the registry. A registry entry may be
    a facade over a real team app (``associated_plugin_id``); in that case the
    graph and ownership come from the app and display fields from the entry.
    """

    def __init__(
        self,
        apps: AppDocumentPort,
        versions: VersionPort,
        registry: SystemPluginRegistryPort,
        customizations: CustomizationPort,
    ) -> None:
        self._apps = apps
        self._versions = versions
        self._registry = registry
        self._customizations = customizations

    async def resolve_preview(self, plugin_id: str) -> ChildApp:
        return await self.resolve(plugin_id, mode=ResolutionMode.LATEST_ONLY)

    async def resolve_runtime(self, plugin_id: str, version_id: Optional[str] = None) -> ChildApp:
        return await self.resolve(plugin_id, version_id, mode=ResolutionMode.SPECIFIC_OR_LATEST)

    async def resolve(
        self,
        plugin_id: str,
        version_id: Optional[str] = None,
        mode: ResolutionMode = ResolutionMode.SPECIFIC_OR_LATEST,
    ) -> ChildApp:
        if mode is ResolutionMode.LATEST_ONLY:
            version_id = None

        source, bare_id = split_combined_plugin_id(plugin_id)
        logger.debug(f"Resolving child app {plugin_id} ({source.value}, mode={mode.value})")

        if source is PluginSource.PERSONAL:
            return await self._resolve_personal(bare_id, version_id)
        elif source in (PluginSource.COMMUNITY, PluginSource.COMMERCIAL):
            return await self._resolve_system_plugin(bare_id, version_id)
        raise AssertionError(f"Unhandled plugin source: {source}")

    async def _resolve_personal(self, app_id: str, version_id: Optional[str]) -> ChildApp:
        app = await self._apps.find_app_by_id(app_id)
        if not app:
            logger.warning(f"Child app not found: {app_id}")
            raise NotFoundError(f"Plugin not found: {app_id}")

        version = await self._resolve_version(app_id, app, version_id)

        return ChildApp(
            id=str(app["id"]),
            team_id=_optional_str(app.get("team_id")),
            tmb_id=_optional_str(app.get("tmb_id")),
            name=app.get("name", ""),
            avatar=app.get("avatar", ""),
            intro=app.get("intro", ""),
            show_status=True,
            workflow=_graph_from_version(version),
            template_type=FlowNodeTemplateType.TEAM_APP.value,
            version=str(version["version_id"]),
            origin_cost=0,
            current_cost=0,
            has_token_fee=False,
            plugin_order=0,
        )

    async def _resolve_system_plugin(self, plugin_id: str, version_id: Optional[str]) -> ChildApp:
        entry = self._find_registry_entry(plugin_id)
        if entry is None:
            # Registry membership is access gated, so a miss is reported as unauthorized
            logger.warning(f"System plugin not in registry: {plugin_id}")
            raise UnauthorizedError(f"Unauthorized plugin: {plugin_id}")

        associated_id = entry.get("associated_plugin_id")
        if not associated_id:
            return _child_app_from_entry(entry)

        customization = await self._customizations.find_customization(plugin_id, associated_id)
        if not customization:
            logger.warning(f"No customization links {plugin_id} to app {associated_id}")
            raise UnauthorizedError(f"Unauthorized plugin: {plugin_id}")

        app = await self._apps.find_app_by_id(associated_id)
        if not app:
            logger.warning(f"Associated app {associated_id} of {plugin_id} is missing")
            raise UnauthorizedError(f"Unauthorized plugin: {plugin_id}")

        version = await self._resolve_version(associated_id, app, version_id)

        return _child_app_from_entry(
            entry,
            workflow=_graph_from_version(version),
            version=version_id or str(version["version_id"]),
            team_id=_optional_str(app.get("team_id")),
            tmb_id=_optional_str(app.get("tmb_id")),
        )

    async def _resolve_version(
        self, app_id: str, app: AppDocument, version_id: Optional[str]
    ) -> AppVersion:
        if version_id:
            version = await self._versions.get_version_by_id(app_id, version_id, app)
        else:
            version = await self._versions.get_latest_version(app_id, app)

        if not version.get("version_id"):
            logger.warning(f"No version resolved for app {app_id} (requested {version_id})")
            raise VersionNotFoundError(f"App version not found: {app_id}")
        return version

    def _find_registry_entry(self, plugin_id: str) -> Optional[RegistryEntry]:
        for entry in self._registry.list_plugins():
            if entry.get("id") == plugin_id:
                return copy.deepcopy(entry)
        return None


def _graph_from_version(version: AppVersion) -> WorkflowGraph:
    return WorkflowGraph(
        nodes=list(version.get("nodes") or []),
        edges=list(version.get("edges") or []),
        chat_config=dict(version.get("chat_config") or {}),
    )


def _child_app_from_entry(entry: RegistryEntry, **overrides: Any) -> ChildApp:
    workflow: Dict[str, Any] = entry.get("workflow") or {}
    fields: Dict[str, Any] = dict(
        id=entry["id"],
        name=entry.get("name", ""),
        avatar=entry.get("avatar", ""),
        intro=entry.get("intro", ""),
        course_url=entry.get("course_url"),
        user_guide=entry.get("user_guide"),
        template_type=entry.get("template_type", FlowNodeTemplateType.OTHER.value),
        version=entry.get("version"),
        origin_cost=entry.get("origin_cost", 0),
        current_cost=entry.get("current_cost", 0),
        has_token_fee=entry.get("has_token_fee", False),
        plugin_order=entry.get("plugin_order", 0),
        show_status=entry.get("show_status", True),
        workflow=WorkflowGraph(
            nodes=list(workflow.get("nodes") or []),
            edges=list(workflow.get("edges") or []),
            chat_config=dict(workflow.get("chat_config") or {}),
        ),
    )
    fields.update(overrides)
    return ChildApp(**fields)


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
