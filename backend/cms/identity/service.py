"""
Current-user tracking.

The identity service is scoped to one session/test context instead of
being process-wide: whoever builds it decides who is logged in.
"""

import logging
from typing import Optional, Union

from sqlmodel import Session

from cms.entity.storage import EntityTypeManager
from cms.models.user import User

logger = logging.getLogger(__name__)

ANONYMOUS_UID = 0
ADMIN_UID = 1


class IdentityService:
    def __init__(self, entity_type_manager: EntityTypeManager, current_user_id: Optional[int] = None):
        self.entity_type_manager = entity_type_manager
        # The anonymous account never counts as logged in
        self._current_user_id = None if current_user_id == ANONYMOUS_UID else current_user_id

    def current_user_id(self) -> Optional[int]:
        """Id of the authenticated user, or None when nobody is logged in"""
        return self._current_user_id

    def is_authenticated(self) -> bool:
        return self._current_user_id is not None and self._current_user_id != ANONYMOUS_UID

    def load_user(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        return self.entity_type_manager.get_storage("user").load(user_id)

    def set_current_user(self, user: Union[User, int]) -> None:
        user_id = user.id if isinstance(user, User) else user
        self._current_user_id = None if user_id == ANONYMOUS_UID else user_id
        logger.debug("Current user set to %s", self._current_user_id)

    def clear_current_user(self) -> None:
        self._current_user_id = None


def ensure_anonymous_user(session: Session) -> User:
    """Install the anonymous account (uid 0) if it is missing"""
    anonymous = session.get(User, ANONYMOUS_UID)
    if anonymous is None:
        anonymous = User(id=ANONYMOUS_UID, name="", status=False)
        session.add(anonymous)
        session.commit()
        session.refresh(anonymous)
        logger.info("Installed anonymous user account")
    return anonymous
