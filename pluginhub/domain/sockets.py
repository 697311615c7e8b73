"""Derive a child app's editor sockets (handles and node IO) from its graph."""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List

from pluginhub.domain.classification import ChildAppKind
from pluginhub.domain.constants import (
    FlowNodeInputType,
    FlowNodeOutputType,
    FlowNodeType,
    IOValueType,
    NodeInputKey,
    NodeOutputKey,
    VariableInputType,
)
from pluginhub.domain.entities import FlowNode, WorkflowGraph
from pluginhub.domain.specifications import find_node_of_type


def get_handle_config(top: bool, right: bool, bottom: bool, left: bool) -> Dict[str, bool]:
    return {"top": top, "right": right, "bottom": bottom, "left": left}


OPEN_HANDLES = (True, True, True, True)
CLOSED_HANDLES = (False, False, False, False)


@dataclass(frozen=True)
class SocketConfig:
    node_io: Dict[str, Any]
    source_handle: Dict[str, bool]
    target_handle: Dict[str, bool]


# Node IO aggregators

def tool_set_data_to_io(nodes: List[FlowNode]) -> Dict[str, Any]:
    tool_set = find_node_of_type(nodes, FlowNodeType.TOOL_SET) or {}
    return {
        "inputs": copy.deepcopy(tool_set.get("inputs", [])),
        "outputs": copy.deepcopy(tool_set.get("outputs", [])),
        "tool_config": copy.deepcopy(tool_set.get("tool_config")),
        "show_source_handle": False,
        "show_target_handle": False,
    }


def tool_data_to_io(nodes: List[FlowNode]) -> Dict[str, Any]:
    tool = find_node_of_type(nodes, FlowNodeType.TOOL) or {}
    return {
        "inputs": copy.deepcopy(tool.get("inputs", [])),
        "outputs": copy.deepcopy(tool.get("outputs", [])),
        "tool_config": copy.deepcopy(tool.get("tool_config")),
    }


def plugin_data_to_io(nodes: List[FlowNode]) -> Dict[str, Any]:
    """Expose the plugin input node's inputs and the plugin output node's inputs as outputs."""
    plugin_input = find_node_of_type(nodes, FlowNodeType.PLUGIN_INPUT)
    plugin_output = find_node_of_type(nodes, FlowNodeType.PLUGIN_OUTPUT)

    inputs = []
    for item in (plugin_input or {}).get("inputs", []):
        render_types = list(item.get("render_type_list") or [])
        # A reference-only input still needs a manual entry box in the parent graph
        if render_types and render_types[0] == FlowNodeInputType.REFERENCE.value:
            render_types = [FlowNodeInputType.REFERENCE.value, FlowNodeInputType.INPUT.value]
        inputs.append({
            **copy.deepcopy(item),
            "render_type_list": render_types,
            "value": copy.deepcopy(item.get("value", item.get("default_value"))),
            "can_edit": False,
        })

    outputs = [
        {
            "id": item["key"],
            "type": FlowNodeOutputType.STATIC.value,
            "key": item["key"],
            "value_type": item.get("value_type", IOValueType.ANY.value),
            "label": item.get("label") or item["key"],
            "description": item.get("description", ""),
        }
        for item in (plugin_output or {}).get("inputs", [])
    ]
    return {"inputs": inputs, "outputs": outputs}


_VARIABLE_RENDER_TYPES = {
    VariableInputType.INPUT.value: [FlowNodeInputType.INPUT.value, FlowNodeInputType.REFERENCE.value],
    VariableInputType.TEXTAREA.value: [FlowNodeInputType.TEXTAREA.value, FlowNodeInputType.REFERENCE.value],
    VariableInputType.SELECT.value: [FlowNodeInputType.SELECT.value, FlowNodeInputType.REFERENCE.value],
    VariableInputType.NUMBER_INPUT.value: [FlowNodeInputType.NUMBER_INPUT.value, FlowNodeInputType.REFERENCE.value],
    VariableInputType.CUSTOM.value: [FlowNodeInputType.INPUT.value, FlowNodeInputType.REFERENCE.value],
}

HISTORY_INPUT = {
    "key": NodeInputKey.HISTORY.value,
    "render_type_list": [FlowNodeInputType.NUMBER_INPUT.value, FlowNodeInputType.REFERENCE.value],
    "value_type": IOValueType.CHAT_HISTORY.value,
    "label": "Chat history",
    "required": True,
    "value": 6,
}

USER_CHAT_INPUT = {
    "key": NodeInputKey.USER_CHAT_INPUT.value,
    "render_type_list": [FlowNodeInputType.REFERENCE.value, FlowNodeInputType.TEXTAREA.value],
    "value_type": IOValueType.STRING.value,
    "label": "User question",
    "required": True,
    "tool_description": "User question",
}


def app_data_to_io(chat_config: Dict[str, Any] | None) -> Dict[str, Any]:
    """Sockets of a plain app come from its chat settings, not its nodes."""
    variables = (chat_config or {}).get("variables") or []
    variable_inputs = [
        {
            "key": variable["key"],
            "render_type_list": _VARIABLE_RENDER_TYPES.get(
                variable.get("type"), [FlowNodeInputType.REFERENCE.value]
            ),
            "label": variable.get("label", variable["key"]),
            "debug_label": variable.get("label", variable["key"]),
            "description": "",
            "value_type": IOValueType.ANY.value,
            "required": bool(variable.get("required", False)),
            "list": [
                {"label": option["value"], "value": option["value"]}
                for option in variable.get("enums") or []
            ],
        }
        for variable in variables
    ]

    return {
        "inputs": [copy.deepcopy(HISTORY_INPUT), copy.deepcopy(USER_CHAT_INPUT), *variable_inputs],
        "outputs": [
            {
                "id": NodeOutputKey.HISTORY.value,
                "key": NodeOutputKey.HISTORY.value,
                "required": True,
                "label": "New context",
                "description": "Chat history with this round's reply appended",
                "value_type": IOValueType.CHAT_HISTORY.value,
                "type": FlowNodeOutputType.STATIC.value,
            },
            {
                "id": NodeOutputKey.ANSWER_TEXT.value,
                "key": NodeOutputKey.ANSWER_TEXT.value,
                "required": False,
                "label": "AI response",
                "description": "",
                "value_type": IOValueType.STRING.value,
                "type": FlowNodeOutputType.STATIC.value,
            },
        ],
    }


def derive_sockets(kind: ChildAppKind, graph: WorkflowGraph) -> SocketConfig:
    """Node IO and handle visibility for a classified graph."""
    if kind is ChildAppKind.TOOL_SET:
        node_io = tool_set_data_to_io(graph.nodes)
        handles = CLOSED_HANDLES
    elif kind is ChildAppKind.TOOL:
        node_io = tool_data_to_io(graph.nodes)
        handles = OPEN_HANDLES
    elif kind is ChildAppKind.PLUGIN:
        node_io = plugin_data_to_io(graph.nodes)
        handles = OPEN_HANDLES
    elif kind is ChildAppKind.PLAIN:
        node_io = app_data_to_io(graph.chat_config)
        handles = OPEN_HANDLES
    else:
        raise AssertionError(f"Unhandled child app kind: {kind}")

    return SocketConfig(
        node_io=node_io,
        source_handle=get_handle_config(*handles),
        target_handle=get_handle_config(*handles),
    )
