from cms.identity.service import ADMIN_UID, ANONYMOUS_UID, IdentityService, ensure_anonymous_user

__all__ = [
    "ADMIN_UID",
    "ANONYMOUS_UID",
    "IdentityService",
    "ensure_anonymous_user",
]
