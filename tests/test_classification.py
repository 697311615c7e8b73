"""Tests for graph classification."""
from __future__ import annotations

import itertools

import pytest

from pluginhub.domain.classification import ChildAppKind, classify_graph
from pluginhub.domain.constants import FlowNodeType
from pluginhub.domain.entities import WorkflowGraph


def graph_of(*node_types: str) -> WorkflowGraph:
    return WorkflowGraph(nodes=[{"node_id": f"n{i}", "flow_node_type": t} for i, t in enumerate(node_types)])


class TestClassifyGraph:
    """Test the ordered classification rules."""

    def test_single_tool_set(self):
        assert classify_graph(graph_of("toolSet")) is ChildAppKind.TOOL_SET

    def test_single_tool(self):
        assert classify_graph(graph_of("tool")) is ChildAppKind.TOOL

    def test_plugin_with_many_nodes(self):
        assert classify_graph(graph_of("pluginInput", "chatNode", "pluginOutput")) is ChildAppKind.PLUGIN

    def test_lone_plugin_input_is_plugin(self):
        assert classify_graph(graph_of("pluginInput")) is ChildAppKind.PLUGIN

    def test_plain_default(self):
        assert classify_graph(graph_of("workflowStart", "chatNode")) is ChildAppKind.PLAIN

    def test_empty_graph_is_plain(self):
        assert classify_graph(graph_of()) is ChildAppKind.PLAIN

    def test_two_tools_are_not_a_tool(self):
        assert classify_graph(graph_of("tool", "tool")) is ChildAppKind.PLAIN

    def test_tool_with_plugin_input_is_plugin(self):
        assert classify_graph(graph_of("tool", "pluginInput")) is ChildAppKind.PLUGIN

    def test_edges_do_not_affect_classification(self):
        graph = WorkflowGraph(
            nodes=[{"node_id": "n0", "flow_node_type": "toolSet"}],
            edges=[{"source": "n0", "target": "n0"}],
        )
        assert classify_graph(graph) is ChildAppKind.TOOL_SET

    def test_total_over_small_graphs(self):
        """Every graph maps to exactly one kind and single tool sets never classify as tool."""
        tags = [t.value for t in FlowNodeType] + ["unknownType"]
        for size in range(0, 3):
            for combo in itertools.product(tags, repeat=size):
                kind = classify_graph(graph_of(*combo))
                assert kind in set(ChildAppKind)
                if combo == ("toolSet",):
                    assert kind is ChildAppKind.TOOL_SET
                if "pluginInput" in combo and combo not in (("tool",), ("toolSet",)):
                    assert kind is ChildAppKind.PLUGIN


class TestFlowNodeType:
    """Test the kind to node type mapping."""

    @pytest.mark.parametrize(
        "kind, node_type",
        [
            (ChildAppKind.TOOL_SET, FlowNodeType.TOOL_SET),
            (ChildAppKind.TOOL, FlowNodeType.TOOL),
            (ChildAppKind.PLUGIN, FlowNodeType.PLUGIN_MODULE),
            (ChildAppKind.PLAIN, FlowNodeType.APP_MODULE),
        ],
    )
    def test_mapping(self, kind, node_type):
        assert kind.flow_node_type is node_type
