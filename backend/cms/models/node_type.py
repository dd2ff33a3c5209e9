from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from cms.models.node import Node


class NodeType(SQLModel, table=True):
    """Content type (bundle) of a node; decides which optional fields exist."""

    __tablename__ = "node_type"

    type: str = Field(primary_key=True)  # machine name, e.g. "page"
    name: str
    description: Optional[str] = None
    has_body: bool = Field(default=True)
    body_label: str = Field(default="Body")
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    nodes: List["Node"] = Relationship(back_populates="node_type")
