"""Build editor preview nodes and runtime descriptors for child apps."""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from pluginhub.application.child_app_resolver import ChildAppResolver
from pluginhub.domain.classification import classify_graph
from pluginhub.domain.entities import ChildApp
from pluginhub.domain.sockets import derive_sockets
from pluginhub.schemas.api_schemas import PreviewNode, RuntimeDescriptor

logger = logging.getLogger(__name__)


def build_preview_node(app: ChildApp) -> PreviewNode:
    """Format a child app as a node template for the workflow editor."""
    kind = classify_graph(app.workflow)
    sockets = derive_sockets(kind, app.workflow)

    return PreviewNode(
        id=uuid.uuid4().hex,
        plugin_id=app.id,
        template_type=app.template_type,
        flow_node_type=kind.flow_node_type.value,
        avatar=app.avatar,
        name=app.name,
        intro=app.intro,
        course_url=app.course_url,
        user_guide=app.user_guide,
        show_status=app.show_status,
        is_tool=True,
        version=app.version,
        origin_cost=app.origin_cost,
        current_cost=app.current_cost,
        has_token_fee=app.has_token_fee,
        source_handle=sockets.source_handle,
        target_handle=sockets.target_handle,
        **sockets.node_io,
    )


def build_runtime_descriptor(app: ChildApp) -> RuntimeDescriptor:
    return RuntimeDescriptor(
        id=app.id,
        team_id=app.team_id,
        tmb_id=app.tmb_id,
        name=app.name,
        avatar=app.avatar,
        show_status=app.show_status,
        current_cost=app.current_cost,
        has_token_fee=app.has_token_fee,
        nodes=app.workflow.nodes,
        edges=app.workflow.edges,
    )


class ChildAppService:
    """Entry points for embedding child apps in a parent workflow."""

    def __init__(self, resolver: ChildAppResolver) -> None:
        self._resolver = resolver

    async def get_child_app_preview_node(self, plugin_id: str) -> PreviewNode:
        app = await self._resolver.resolve_preview(plugin_id)
        node = build_preview_node(app)
        logger.info(f"Built preview node {node.id} ({node.flow_node_type}) for {plugin_id}")
        return node

    async def get_child_app_runtime_by_id(
        self, plugin_id: str, version_id: Optional[str] = None
    ) -> RuntimeDescriptor:
        """Runtime data: system plugins by plugin id, personal plugins by version id."""
        app = await self._resolver.resolve_runtime(plugin_id, version_id)
        return build_runtime_descriptor(app)
