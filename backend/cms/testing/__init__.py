"""Fixture helpers for tests that need users, content types and nodes."""

from cms.testing.capabilities import ProvisionsTestUser
from cms.testing.content_type_creation import ContentTypeCreation
from cms.testing.node_creation import NodeCreation
from cms.testing.user_creation import UserCreation

__all__ = [
    "ContentTypeCreation",
    "NodeCreation",
    "ProvisionsTestUser",
    "UserCreation",
]
