from fastapi import APIRouter, Depends, Query
from pluginhub.schemas.api_schemas import PreviewNode, PreviewNodeRequest, RuntimeDescriptor
from pluginhub.dependencies import get_child_app_service
from pluginhub.application.child_app_service import ChildAppService
from typing import Optional

router = APIRouter()

@router.post("/child-apps/preview", response_model=PreviewNode)
async def get_child_app_preview_node(
    request: PreviewNodeRequest,
    service: ChildAppService = Depends(get_child_app_service),
):
    """
    Format a child app as a workflow node template for the editor.
    """
    return await service.get_child_app_preview_node(request.id)

@router.get("/child-apps/{plugin_id}/preview", response_model=PreviewNode)
async def get_child_app_preview_node_by_id(
    plugin_id: str,
    service: ChildAppService = Depends(get_child_app_service),
):
    """
    Same as the POST form, with the combined plugin id in the path.
    """
    return await service.get_child_app_preview_node(plugin_id)

@router.get("/child-apps/{plugin_id}/runtime", response_model=RuntimeDescriptor)
async def get_child_app_runtime(
    plugin_id: str,
    version_id: Optional[str] = Query(None, description="Version to run, latest when omitted"),
    service: ChildAppService = Depends(get_child_app_service),
):
    """
    Get the data an execution engine needs to run a child app.
    """
    return await service.get_child_app_runtime_by_id(plugin_id, version_id)
