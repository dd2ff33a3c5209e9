"""
Content Type API Routes
Lists and creates node types.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from cms.database import get_session
from cms.models.node_type import NodeType

router = APIRouter()


class NodeTypeCreateRequest(BaseModel):
    type: str
    name: str
    description: Optional[str] = None
    has_body: bool = True
    body_label: str = "Body"

    @field_validator("type")
    @classmethod
    def validate_machine_name(cls, v: str) -> str:
        if not v or not v.replace("_", "").isalnum() or not v.islower():
            raise ValueError("type must be a lowercase machine name")
        return v


class NodeTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    name: str
    description: Optional[str] = None
    has_body: bool
    body_label: str
    created_at: datetime


@router.get("/node-types", response_model=List[NodeTypeResponse])
def list_node_types(session: Session = Depends(get_session)):
    """Get all content types ordered by machine name"""
    return session.exec(select(NodeType).order_by(NodeType.type)).all()


@router.post("/node-types", response_model=NodeTypeResponse, status_code=201)
def create_node_type(request: NodeTypeCreateRequest, session: Session = Depends(get_session)):
    node_type = NodeType(**request.model_dump())
    try:
        session.add(node_type)
        session.commit()
        session.refresh(node_type)
        return node_type
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail=f"Content type '{request.type}' already exists")
