"""
SQL-backed entity storage.

Each storage is bound to one SQLModel session and one table model and keeps
a static cache of the entities it has loaded, keyed by id. Repeated loads
are served from that cache until reset_cache() drops the entries and
expires them in the session, so the next load reads the database again.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from cms.entity.draft import EntityDraft
from cms.entity.exceptions import (
    EntityStorageError,
    SchemaViolationError,
    UnknownEntityKindError,
    UnknownFieldError,
)
from cms.entity.schema import BundleSchema, node_bundle_schema, node_property_names, user_schema
from cms.models.node import Node
from cms.models.user import User
from cms.utils.markup import FormattableMarkup

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    """Render markup wrappers to plain text; other values pass through"""
    if isinstance(value, FormattableMarkup):
        return str(value)
    return value


class SqlEntityStorage(ABC):
    entity_kind: str = ""
    model: Type[SQLModel]

    def __init__(self, session: Session):
        self.session = session
        self._cache: Dict[Any, SQLModel] = {}

    # ========================================================================
    # Schema hooks
    # ========================================================================

    @abstractmethod
    def schema_for(self, values: Dict[str, Any]) -> BundleSchema:
        """Field schema for an entity built from these values"""

    @abstractmethod
    def property_names(self) -> List[str]:
        """Fields load_by_properties() may filter on"""

    def _prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _prepare_update(self, entity: SQLModel) -> None:
        pass

    # ========================================================================
    # Cache
    # ========================================================================

    def reset_cache(self, ids: Optional[Iterable[Any]] = None) -> None:
        """
        Drop cached entities (all of them, or only the given ids).

        Dropped entities are expired so the next load re-reads them, except
        those with unsaved changes, which keep their pending values.
        """
        if ids is None:
            self._cache.clear()
            stale = [obj for obj in self.session.identity_map.values() if isinstance(obj, self.model)]
        else:
            stale = [self._cache.pop(entity_id) for entity_id in list(ids) if entity_id in self._cache]

        stale = [entity for entity in stale if entity in self.session and entity not in self.session.dirty]
        for entity in stale:
            self.session.expire(entity)
        logger.debug("Reset %s cache (%d entities expired)", self.entity_kind, len(stale))

    # ========================================================================
    # Read operations
    # ========================================================================

    def load(self, entity_id: Any) -> Optional[SQLModel]:
        return self.load_multiple([entity_id]).get(entity_id)

    def load_multiple(self, ids: Optional[Iterable[Any]] = None) -> Dict[Any, SQLModel]:
        """
        Load entities by id.

        Returns a dict keyed by id in the order the ids were given; ids that
        do not exist are left out. With ids=None every entity is loaded.
        """
        if ids is None:
            ids = self.session.exec(select(self.model.id)).all()
        ids = list(ids)

        missing = [entity_id for entity_id in ids if entity_id not in self._cache]
        if missing:
            rows = self.session.exec(select(self.model).where(self.model.id.in_(missing))).all()
            for row in rows:
                self._cache[row.id] = row
            logger.debug("Loaded %d of %d uncached %s entities", len(rows), len(missing), self.entity_kind)

        return {entity_id: self._cache[entity_id] for entity_id in ids if entity_id in self._cache}

    def load_by_properties(self, values: Dict[str, Any]) -> List[SQLModel]:
        """
        Load entities whose properties exactly match the given values.

        A list/tuple/set value matches any of its members. The order of the
        result is whatever the database returns and is not guaranteed.
        """
        allowed = self.property_names()
        query = select(self.model.id)
        for name, value in values.items():
            if name not in allowed:
                raise UnknownFieldError(f"Cannot query {self.entity_kind} by unknown property '{name}'")
            column = getattr(self.model, name)
            if isinstance(value, (list, tuple, set)):
                query = query.where(column.in_([_plain(item) for item in value]))
            else:
                query = query.where(column == _plain(value))

        ids = self.session.exec(query).all()
        return list(self.load_multiple(ids).values())

    # ========================================================================
    # Write operations
    # ========================================================================

    def create(self, values: Optional[Dict[str, Any]] = None) -> EntityDraft:
        """Build an unsaved draft, rejecting fields the schema does not define"""
        values = dict(values or {})
        return EntityDraft(self, self.schema_for(values), values)

    def save(self, entity):
        """
        Insert a draft or update an already stored entity.

        Raises:
            SchemaViolationError if a required field is missing or empty
            EntityStorageError if the database rejects the write
        """
        if isinstance(entity, EntityDraft):
            values = {name: _plain(value) for name, value in entity.values.items()}
            for name in entity.schema.required_fields:
                value = values.get(name)
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise SchemaViolationError(f"Field '{name}' is required on {self.entity_kind}")
            entity = self.model(**self._prepare_insert(values))
        else:
            self._prepare_update(entity)

        try:
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save {self.entity_kind}: {e}")
            raise EntityStorageError(f"Failed to save {self.entity_kind}: {e}") from e

        self._cache[entity.id] = entity
        logger.debug("Saved %s %s", self.entity_kind, entity.id)
        return entity

    def delete(self, entities: Iterable[SQLModel]) -> None:
        entities = list(entities)
        # Deleted instances are detached after commit; read ids first
        ids = [entity.id for entity in entities]
        try:
            for entity in entities:
                self.session.delete(entity)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise EntityStorageError(f"Failed to delete {self.entity_kind}: {e}") from e

        for entity_id in ids:
            self._cache.pop(entity_id, None)
        logger.debug("Deleted %d %s entities", len(ids), self.entity_kind)


def _normalize_body(value: Any) -> Optional[Dict[str, Any]]:
    # Accepts a plain string, a {"value", "format"} dict or a list of such items (first item wins)
    if isinstance(value, (list, tuple)):
        return _normalize_body(value[0]) if value else None
    if value is None or isinstance(value, dict):
        return value
    return {"value": str(value), "format": None}


class NodeStorage(SqlEntityStorage):
    entity_kind = "node"
    model = Node

    def schema_for(self, values: Dict[str, Any]) -> BundleSchema:
        bundle = values.get("type")
        if not bundle:
            raise SchemaViolationError("Missing content type for node")
        return node_bundle_schema(self.session, str(bundle))

    def property_names(self) -> List[str]:
        return [name for name in node_property_names() if name != "body"]

    def _prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(values)
        values.setdefault("uuid", str(uuid.uuid4()))
        values.setdefault("vid", 1)
        if "body" in values:
            values["body"] = _normalize_body(values["body"])
        return values

    def _prepare_update(self, entity: Node) -> None:
        entity.vid = (entity.vid or 0) + 1
        entity.updated_at = datetime.utcnow()


class UserStorage(SqlEntityStorage):
    entity_kind = "user"
    model = User

    def schema_for(self, values: Dict[str, Any]) -> BundleSchema:
        return user_schema()

    def property_names(self) -> List[str]:
        return user_schema().field_names


class EntityTypeManager:
    """Hands out one storage per entity kind, all bound to the same session"""

    storage_classes: Dict[str, Type[SqlEntityStorage]] = {
        "node": NodeStorage,
        "user": UserStorage,
    }

    def __init__(self, session: Session):
        self.session = session
        self._storages: Dict[str, SqlEntityStorage] = {}

    def get_storage(self, entity_kind: str) -> SqlEntityStorage:
        if entity_kind not in self._storages:
            storage_class = self.storage_classes.get(entity_kind)
            if storage_class is None:
                raise UnknownEntityKindError(f"No storage for entity kind '{entity_kind}'")
            self._storages[entity_kind] = storage_class(self.session)
        return self._storages[entity_kind]
