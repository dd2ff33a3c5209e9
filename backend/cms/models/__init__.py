from cms.models.filter_format import FilterFormat
from cms.models.node import Node
from cms.models.node_type import NodeType
from cms.models.user import User

__all__ = [
    "FilterFormat",
    "Node",
    "NodeType",
    "User",
]
