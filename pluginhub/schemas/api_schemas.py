"""
API Request/Response Schemas using Pydantic.

Output shapes for the workflow editor (preview nodes) and the workflow
execution engine (runtime descriptors).
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any

class HandleConfig(BaseModel):
    top: bool = Field(..., description="Top port visible")
    right: bool = Field(..., description="Right port visible")
    bottom: bool = Field(..., description="Bottom port visible")
    left: bool = Field(..., description="Left port visible")

class PreviewNode(BaseModel):
    id: str = Field(..., description="Fresh node id for the editor graph")
    plugin_id: str = Field(..., description="Id of the resolved child app")
    template_type: str = Field(..., description="Template classification of the child app")
    flow_node_type: str = Field(..., description="Node type the child app takes in the parent graph")
    name: str = Field(..., description="Display name")
    avatar: str = Field("", description="Avatar url or icon name")
    intro: str = Field("", description="Short description")
    course_url: Optional[str] = Field(None, description="Tutorial link")
    user_guide: Optional[str] = Field(None, description="Usage guide")
    show_status: bool = Field(True, description="Show runtime status for this node")
    is_tool: bool = Field(True, description="Node may be called as a tool")
    version: Optional[str] = Field(None, description="Resolved version id")
    origin_cost: float = Field(0, description="Base cost per call")
    current_cost: float = Field(0, description="Current cost per call")
    has_token_fee: bool = Field(False, description="Whether token usage is metered")
    source_handle: HandleConfig = Field(..., description="Outgoing port visibility")
    target_handle: HandleConfig = Field(..., description="Incoming port visibility")
    inputs: List[Dict[str, Any]] = Field(default_factory=list, description="Node inputs")
    outputs: List[Dict[str, Any]] = Field(default_factory=list, description="Node outputs")
    tool_config: Optional[Dict[str, Any]] = Field(None, description="Tool or tool-set configuration")
    show_source_handle: Optional[bool] = Field(None, description="Editor hint for tool-set nodes")
    show_target_handle: Optional[bool] = Field(None, description="Editor hint for tool-set nodes")

class RuntimeDescriptor(BaseModel):
    id: str = Field(..., description="Id of the resolved child app")
    team_id: Optional[str] = Field(None, description="Owning team")
    tmb_id: Optional[str] = Field(None, description="Owning team member")
    name: str = Field(..., description="Display name")
    avatar: str = Field("", description="Avatar url or icon name")
    show_status: bool = Field(True, description="Show runtime status for this node")
    current_cost: float = Field(0, description="Current cost per call")
    has_token_fee: bool = Field(False, description="Whether token usage is metered")
    nodes: List[Dict[str, Any]] = Field(default_factory=list, description="Workflow nodes")
    edges: List[Dict[str, Any]] = Field(default_factory=list, description="Workflow edges")

class PreviewNodeRequest(BaseModel):
    id: str = Field(..., description="Combined plugin id", min_length=1)
