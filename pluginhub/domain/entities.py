"""Internal domain entities.

Store-facing records are TypedDicts for type safety at boundaries; the
resolved ``ChildApp`` is a frozen dataclass built fresh on every resolution.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict

from pluginhub.domain.constants import FlowNodeTemplateType


# A workflow node or edge is kept as the raw mapping read from storage.
# Nodes carry at least ``node_id`` and ``flow_node_type``.
FlowNode = Dict[str, Any]
FlowEdge = Dict[str, Any]


@dataclass(frozen=True)
class WorkflowGraph:
    nodes: List[FlowNode] = field(default_factory=list)
    edges: List[FlowEdge] = field(default_factory=list)
    chat_config: Dict[str, Any] = field(default_factory=dict)


class AppDocument(TypedDict, total=False):
    id: str
    team_id: str
    tmb_id: str
    name: str
    avatar: str
    intro: str
    nodes: List[FlowNode]
    edges: List[FlowEdge]
    chat_config: Dict[str, Any]
    plugin_node_version: Optional[str]


class AppVersion(TypedDict):
    version_id: Optional[str]
    version_name: Optional[str]
    nodes: List[FlowNode]
    edges: List[FlowEdge]
    chat_config: Dict[str, Any]


class RegistryEntry(TypedDict, total=False):
    id: str
    name: str
    avatar: str
    intro: str
    course_url: str
    user_guide: str
    template_type: str
    version: str
    origin_cost: float
    current_cost: float
    has_token_fee: bool
    plugin_order: int
    show_status: bool
    associated_plugin_id: str
    workflow: Dict[str, Any]


class CustomizationRecord(TypedDict):
    plugin_id: str
    associated_plugin_id: str


@dataclass(frozen=True)
class ChildApp:
    """A child app normalized from either an owned document or the registry."""
    id: str
    name: str
    avatar: str
    workflow: WorkflowGraph
    template_type: str = FlowNodeTemplateType.TEAM_APP.value
    team_id: Optional[str] = None
    tmb_id: Optional[str] = None
    intro: str = ""
    course_url: Optional[str] = None
    user_guide: Optional[str] = None
    version: Optional[str] = None
    origin_cost: float = 0
    current_cost: float = 0
    has_token_fee: bool = False
    plugin_order: int = 0
    show_status: bool = True
