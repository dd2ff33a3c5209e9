from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from cms.models.node import Node


class User(SQLModel, table=True):
    # id 0 is the anonymous account, id 1 the administrator
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    mail: Optional[str] = None
    status: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    nodes: List["Node"] = Relationship(back_populates="owner")
