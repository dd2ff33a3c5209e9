from cms.entity.draft import EntityDraft
from cms.entity.exceptions import (
    EntityError,
    EntityStorageError,
    SchemaViolationError,
    UnknownBundleError,
    UnknownEntityKindError,
    UnknownFieldError,
)
from cms.entity.schema import BundleSchema, FieldDefinition
from cms.entity.storage import EntityTypeManager, NodeStorage, SqlEntityStorage, UserStorage

__all__ = [
    "BundleSchema",
    "EntityDraft",
    "EntityError",
    "EntityStorageError",
    "EntityTypeManager",
    "FieldDefinition",
    "NodeStorage",
    "SchemaViolationError",
    "SqlEntityStorage",
    "UnknownBundleError",
    "UnknownEntityKindError",
    "UnknownFieldError",
    "UserStorage",
]
