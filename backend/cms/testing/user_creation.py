import logging
from typing import Any, Dict, Optional

from cms.entity.storage import EntityTypeManager
from cms.identity import ADMIN_UID, IdentityService
from cms.models.user import User
from cms.testing.capabilities import ProvisionsTestUser
from cms.utils.random import Random

logger = logging.getLogger(__name__)


class UserCreation(ProvisionsTestUser):
    def __init__(self, entity_type_manager: EntityTypeManager, identity: IdentityService, random: Random):
        self.entity_type_manager = entity_type_manager
        self.identity = identity
        self.random = random

    def create_user(self, values: Optional[Dict[str, Any]] = None) -> User:
        """
        Create a user account.

        Defaults: a unique random name, mail "<name>@example.com", active status.
        """
        values = dict(values or {})
        values.setdefault("name", self.random.name(8, unique=True))
        values.setdefault("mail", f"{values['name']}@example.com")
        values.setdefault("status", True)

        user = self.entity_type_manager.get_storage("user").create(values).save()
        logger.info(f"Created test user {user.name} (uid {user.id})")
        return user

    def set_up_current_user(self, values: Optional[Dict[str, Any]] = None) -> User:
        """
        Create a user and make it the current user.

        The administrator account (uid 1) is created first unless it already
        exists or uid 1 itself was requested, so the returned user is a
        regular account.
        """
        values = dict(values or {})
        if values.get("id") != ADMIN_UID and self.identity.load_user(ADMIN_UID) is None:
            self.create_user({"id": ADMIN_UID, "name": "admin"})

        user = self.create_user(values)
        self.identity.set_current_user(user)
        return user
