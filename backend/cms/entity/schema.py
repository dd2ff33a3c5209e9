"""
Field schemas for entity kinds.

A BundleSchema is the typed descriptor of the fields available on one
entity kind + bundle (for nodes: one content type). Drafts consult it to
reject unknown fields and to answer has_field() without touching the
database again.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sqlmodel import Session

from cms.entity.exceptions import UnknownBundleError
from cms.models.node_type import NodeType


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    required: bool = False
    base: bool = True  # False for fields that depend on the bundle configuration
    label: Optional[str] = None


@dataclass(frozen=True)
class BundleSchema:
    entity_kind: str
    bundle: Optional[str]
    fields: Dict[str, FieldDefinition] = field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    @property
    def field_names(self) -> List[str]:
        return list(self.fields)

    @property
    def required_fields(self) -> List[str]:
        return [name for name, definition in self.fields.items() if definition.required]


def _definitions(definitions: Iterable[FieldDefinition]) -> Dict[str, FieldDefinition]:
    return {definition.name: definition for definition in definitions}


NODE_BASE_FIELDS = (
    FieldDefinition("id"),
    FieldDefinition("uuid"),
    FieldDefinition("vid"),
    FieldDefinition("type", required=True),
    FieldDefinition("title", required=True, label="Title"),
    FieldDefinition("uid", label="Authored by"),
    FieldDefinition("status", label="Published"),
    FieldDefinition("promote", label="Promoted to front page"),
    FieldDefinition("sticky", label="Sticky at top of lists"),
    FieldDefinition("created_at", label="Authored on"),
    FieldDefinition("updated_at", label="Changed"),
)

USER_BASE_FIELDS = (
    FieldDefinition("id"),
    FieldDefinition("name", required=True, label="Name"),
    FieldDefinition("mail", label="Email"),
    FieldDefinition("status", label="User status"),
    FieldDefinition("created_at", label="Created"),
)


def node_bundle_schema(session: Session, bundle: str) -> BundleSchema:
    """
    Build the field schema for a content type.

    Raises:
        UnknownBundleError if the content type does not exist
    """
    node_type = session.get(NodeType, bundle)
    if node_type is None:
        raise UnknownBundleError(f"Content type '{bundle}' does not exist")

    definitions = list(NODE_BASE_FIELDS)
    if node_type.has_body:
        definitions.append(FieldDefinition("body", base=False, label=node_type.body_label))
    return BundleSchema(entity_kind="node", bundle=bundle, fields=_definitions(definitions))


def node_property_names() -> List[str]:
    """Fields that can be queried on any node, whatever its content type"""
    return [definition.name for definition in NODE_BASE_FIELDS] + ["body"]


def user_schema() -> BundleSchema:
    return BundleSchema(entity_kind="user", bundle=None, fields=_definitions(USER_BASE_FIELDS))
