# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from cms.models.filter_format import FilterFormat  # noqa: F401
from cms.models.node import Node  # noqa: F401
from cms.models.node_type import NodeType  # noqa: F401
from cms.models.user import User  # noqa: F401
