"""Closed vocabularies shared by the resolver, classifier and builders."""
from __future__ import annotations

from enum import Enum


class PluginSource(str, Enum):
    """Provenance of a child app id."""
    PERSONAL = "personal"
    COMMUNITY = "community"
    COMMERCIAL = "commercial"


class FlowNodeType(str, Enum):
    """Behavioral type tag carried by every workflow node.

    Only the plugin input/output, tool and tool-set tags matter to
    classification; the rest are carried through untouched.
    """
    WORKFLOW_START = "workflowStart"
    CHAT_NODE = "chatNode"
    ANSWER_NODE = "answerNode"
    PLUGIN_INPUT = "pluginInput"
    PLUGIN_OUTPUT = "pluginOutput"
    PLUGIN_MODULE = "pluginModule"
    APP_MODULE = "appModule"
    TOOL = "tool"
    TOOL_SET = "toolSet"
    HTTP_REQUEST = "httpRequest468"
    CODE = "code"


class FlowNodeTemplateType(str, Enum):
    TEAM_APP = "teamApp"
    SYSTEM_INPUT = "systemInput"
    AI = "ai"
    FUNCTION = "function"
    TOOLS = "tools"
    SEARCH = "search"
    MULTIMODAL = "multimodal"
    COMMUNICATION = "communication"
    OTHER = "other"


class FlowNodeInputType(str, Enum):
    """Editor render types for node inputs."""
    REFERENCE = "reference"
    INPUT = "input"
    TEXTAREA = "textarea"
    NUMBER_INPUT = "numberInput"
    SELECT = "select"
    HIDDEN = "hidden"


class FlowNodeOutputType(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    HIDDEN = "hidden"


class IOValueType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ANY = "any"
    CHAT_HISTORY = "chatHistory"


class VariableInputType(str, Enum):
    """Kinds of chat variables an app can declare."""
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    NUMBER_INPUT = "numberInput"
    CUSTOM = "custom"
    EXTERNAL = "external"


class NodeInputKey(str, Enum):
    HISTORY = "history"
    USER_CHAT_INPUT = "userChatInput"


class NodeOutputKey(str, Enum):
    HISTORY = "history"
    ANSWER_TEXT = "answerText"
