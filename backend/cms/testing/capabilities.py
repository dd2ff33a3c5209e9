from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from cms.models.user import User


class ProvisionsTestUser(ABC):
    """Test contexts that can create a user and log it in on demand"""

    @abstractmethod
    def set_up_current_user(self, values: Optional[Dict[str, Any]] = None) -> User:
        """Create a user, make it the current user and return it"""
