from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from cms.models.node_type import NodeType
    from cms.models.user import User


class Node(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    uuid: str = Field(index=True, unique=True)
    vid: int = Field(default=1)  # revision number, bumped on every re-save
    type: str = Field(foreign_key="node_type.type", index=True)
    title: str = Field(index=True)
    uid: int = Field(default=0, foreign_key="user.id", index=True)
    status: bool = Field(default=True)  # published
    promote: bool = Field(default=False)
    sticky: bool = Field(default=False)
    # {"value": str, "format": str | None}; only set when the type has a body field
    body: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    node_type: "NodeType" = Relationship(back_populates="nodes")
    owner: "User" = Relationship(back_populates="nodes")
