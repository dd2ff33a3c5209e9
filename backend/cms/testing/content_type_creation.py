import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from cms.entity.exceptions import EntityStorageError, UnknownFieldError
from cms.models.node_type import NodeType
from cms.utils.random import Random

logger = logging.getLogger(__name__)


class ContentTypeCreation:
    def __init__(self, session: Session, random: Random):
        self.session = session
        self.random = random

    def create_content_type(self, values: Optional[Dict[str, Any]] = None) -> NodeType:
        """
        Create a content type.

        Defaults: a unique random machine name as `type`, `name` equal to the
        type, and a body field (has_body=True).
        """
        values = dict(values or {})
        unknown = set(values) - set(NodeType.model_fields)
        if unknown:
            raise UnknownFieldError(f"Unknown content type fields: {', '.join(sorted(unknown))}")

        values.setdefault("type", self.random.name(8, unique=True))
        values.setdefault("name", values["type"])
        node_type = NodeType(**values)

        try:
            self.session.add(node_type)
            self.session.commit()
            self.session.refresh(node_type)
        except IntegrityError as e:
            self.session.rollback()
            raise EntityStorageError(f"Content type '{values['type']}' already exists") from e

        logger.info("Created content type %s", node_type.type)
        return node_type
