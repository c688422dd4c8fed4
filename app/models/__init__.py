"""Model exports used by metadata discovery."""

from app.models.admin_user import AdminUser
from app.models.auth_token import AuthToken
from app.models.lead import Lead
from app.models.setting import Setting

__all__ = ["AdminUser", "AuthToken", "Lead", "Setting"]
