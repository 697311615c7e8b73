"""Specification pattern for structural graph predicates."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from pluginhub.domain.constants import FlowNodeType
from pluginhub.domain.entities import WorkflowGraph


class Specification(ABC):
    """Abstract base for specifications (graph filters)."""

    @abstractmethod
    def is_satisfied_by(self, candidate: WorkflowGraph) -> bool:
        """Check if candidate satisfies this specification."""
        pass

    def and_(self, other: Specification) -> Specification:
        """Combine with AND logic."""
        return AndSpecification(self, other)

    def or_(self, other: Specification) -> Specification:
        """Combine with OR logic."""
        return OrSpecification(self, other)

    def not_(self) -> Specification:
        """Negate this specification."""
        return NotSpecification(self)


class AndSpecification(Specification):
    """AND composite specification."""

    def __init__(self, left: Specification, right: Specification):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: WorkflowGraph) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(Specification):
    """OR composite specification."""

    def __init__(self, left: Specification, right: Specification):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: WorkflowGraph) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(Specification):
    """NOT specification."""

    def __init__(self, spec: Specification):
        self.spec = spec

    def is_satisfied_by(self, candidate: WorkflowGraph) -> bool:
        return not self.spec.is_satisfied_by(candidate)


# Graph Specifications

class GraphHasNodeCount(Specification):
    """Graphs with exactly ``count`` nodes."""

    def __init__(self, count: int):
        self.count = count

    def is_satisfied_by(self, graph: WorkflowGraph) -> bool:
        return len(graph.nodes) == self.count


class GraphContainsNodeType(Specification):
    """Graphs with at least one node of the given behavioral type."""

    def __init__(self, node_type: FlowNodeType):
        self.node_type = node_type

    def is_satisfied_by(self, graph: WorkflowGraph) -> bool:
        return any(node_has_type(node, self.node_type) for node in graph.nodes)


class SingleNodeOfType(Specification):
    """Graphs made of one node of the given behavioral type."""

    def __init__(self, node_type: FlowNodeType):
        self.node_type = node_type
        self._spec = GraphHasNodeCount(1).and_(GraphContainsNodeType(node_type))

    def is_satisfied_by(self, graph: WorkflowGraph) -> bool:
        return self._spec.is_satisfied_by(graph)


# Helpers

def node_has_type(node: Dict[str, Any], node_type: FlowNodeType) -> bool:
    """Compare a raw node's type tag; unknown tags never match."""
    return node.get("flow_node_type") == node_type.value


def find_node_of_type(nodes: List[Dict[str, Any]], node_type: FlowNodeType) -> Dict[str, Any] | None:
    """First node of the given type, in graph order."""
    return next((node for node in nodes if node_has_type(node, node_type)), None)
