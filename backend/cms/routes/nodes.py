"""
Node API Routes
Lookup and creation of content nodes through the entity storage.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from sqlmodel import Session

from cms.database import get_session
from cms.entity import EntityStorageError, EntityTypeManager, SchemaViolationError, UnknownBundleError, UnknownFieldError
from cms.identity import ANONYMOUS_UID

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class NodeCreateRequest(BaseModel):
    type: str
    title: str
    uid: int = ANONYMOUS_UID
    status: bool = True
    promote: bool = False
    sticky: bool = False
    body: Optional[Dict[str, Any]] = None


class NodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    vid: int
    type: str
    title: str
    uid: int
    status: bool
    promote: bool
    sticky: bool
    body: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


def get_entity_type_manager(session: Session = Depends(get_session)) -> EntityTypeManager:
    return EntityTypeManager(session)


# ============================================================================
# Node Endpoints
# ============================================================================


@router.get("/nodes", response_model=List[NodeResponse])
def list_nodes(
    title: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    manager: EntityTypeManager = Depends(get_entity_type_manager),
):
    """
    Get nodes, optionally filtered by exact title and/or content type.

    Results are sorted by id for display.
    """
    storage = manager.get_storage("node")
    properties = {}
    if title is not None:
        properties["title"] = title
    if type is not None:
        properties["type"] = type

    if properties:
        nodes = storage.load_by_properties(properties)
    else:
        nodes = list(storage.load_multiple().values())
    return sorted(nodes, key=lambda node: node.id)


@router.get("/nodes/{node_id}", response_model=NodeResponse)
def get_node(node_id: int, manager: EntityTypeManager = Depends(get_entity_type_manager)):
    node = manager.get_storage("node").load(node_id)
    if not node:
        raise HTTPException(status_code=404, detail="Node not found")
    return node


@router.post("/nodes", response_model=NodeResponse, status_code=201)
def create_node(request: NodeCreateRequest, manager: EntityTypeManager = Depends(get_entity_type_manager)):
    """
    Create a node.

    Errors:
    - 422 if the content type or a field does not exist, or title is empty
    - 400 if the database rejects the node
    """
    values = request.model_dump(exclude_none=True)
    try:
        return manager.get_storage("node").create(values).save()
    except (UnknownBundleError, UnknownFieldError, SchemaViolationError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except EntityStorageError as e:
        raise HTTPException(status_code=400, detail=str(e))
