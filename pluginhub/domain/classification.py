"""Classify a child app's workflow graph by its node shape."""
from __future__ import annotations

from enum import Enum

from pluginhub.domain.constants import FlowNodeType
from pluginhub.domain.entities import WorkflowGraph
from pluginhub.domain.specifications import GraphContainsNodeType, SingleNodeOfType


class ChildAppKind(str, Enum):
    PLAIN = "plain"
    PLUGIN = "plugin"
    TOOL = "tool"
    TOOL_SET = "toolSet"

    @property
    def flow_node_type(self) -> FlowNodeType:
        """Node type the child app takes when dropped into a parent graph."""
        return _KIND_TO_NODE_TYPE[self]


_KIND_TO_NODE_TYPE = {
    ChildAppKind.PLAIN: FlowNodeType.APP_MODULE,
    ChildAppKind.PLUGIN: FlowNodeType.PLUGIN_MODULE,
    ChildAppKind.TOOL: FlowNodeType.TOOL,
    ChildAppKind.TOOL_SET: FlowNodeType.TOOL_SET,
}

IS_TOOL_SET = SingleNodeOfType(FlowNodeType.TOOL_SET)
IS_TOOL = SingleNodeOfType(FlowNodeType.TOOL)
IS_PLUGIN = GraphContainsNodeType(FlowNodeType.PLUGIN_INPUT)


def classify_graph(graph: WorkflowGraph) -> ChildAppKind:
    """Return the behavioral kind of a graph; first matching rule wins.

    Only node type tags and node count are inspected, never edges.

    Tool-set and tool both require a single node of that exact type, so a
    graph can satisfy at most one of them. Plugin detection ignores node
    count, which is why it is checked after them: a lone pluginInput node
    fails both single-node rules on type and lands on plugin.
    """
    if IS_TOOL_SET.is_satisfied_by(graph):
        return ChildAppKind.TOOL_SET
    if IS_TOOL.is_satisfied_by(graph):
        return ChildAppKind.TOOL
    if IS_PLUGIN.is_satisfied_by(graph):
        return ChildAppKind.PLUGIN
    return ChildAppKind.PLAIN
