from typing import TYPE_CHECKING, Any, Dict

from cms.entity.exceptions import UnknownFieldError
from cms.entity.schema import BundleSchema

if TYPE_CHECKING:
    from cms.entity.storage import SqlEntityStorage


class EntityDraft:
    """
    An entity under construction that has not been persisted yet.

    Values are checked against the bundle schema as they are set; required
    fields are checked by the storage on save.
    """

    def __init__(self, storage: "SqlEntityStorage", schema: BundleSchema, values: Dict[str, Any]):
        self._storage = storage
        self.schema = schema
        self._values: Dict[str, Any] = {}
        for name, value in values.items():
            self.set(name, value)

    @property
    def entity_kind(self) -> str:
        return self.schema.entity_kind

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    def has_field(self, name: str) -> bool:
        return self.schema.has_field(name)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> "EntityDraft":
        if not self.schema.has_field(name):
            bundle = f" of type '{self.schema.bundle}'" if self.schema.bundle else ""
            raise UnknownFieldError(f"Field '{name}' is not defined on {self.schema.entity_kind}{bundle}")
        self._values[name] = value
        return self

    def save(self):
        """Persist the draft and return the stored entity"""
        return self._storage.save(self)

    def __repr__(self) -> str:
        return f"<EntityDraft {self.schema.entity_kind}:{self.schema.bundle} {self._values!r}>"
