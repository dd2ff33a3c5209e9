"""
Entity layer errors.

Storage and schema failures are raised from here and propagate to callers
unchanged; HTTP routes translate them into status codes.
"""


class EntityError(Exception):
    """Base class for entity storage and schema errors"""

    pass


class UnknownEntityKindError(EntityError):
    """Raised when no storage is registered for an entity kind"""

    pass


class UnknownBundleError(EntityError):
    """Raised when a content type (bundle) does not exist"""

    pass


class UnknownFieldError(EntityError):
    """Raised when a value targets a field the schema does not define"""

    pass


class SchemaViolationError(EntityError):
    """Raised when a required field is missing or empty on save"""

    pass


class EntityStorageError(EntityError):
    """Raised when the database rejects a write; wraps the original error"""

    pass
