"""Cliente async de perfiles y notificaciones de usuario (sharing API)."""

from portal_users.adapters.http_client import HttpTransport
from portal_users.adapters.session import UserSession
from portal_users.core.config import AppSettings
from portal_users.core.domain.context import NotificationIdContext, RequestContext
from portal_users.core.domain.models import (
    DeleteOutcome,
    Notification,
    NotificationCollection,
    UserProfile,
)
from portal_users.core.errors import (
    ConfigurationError,
    MissingIdentityError,
    PortalUsersError,
    TransportError,
)
from portal_users.core.services.resolvers import resolve_portal_base, resolve_username
from portal_users.core.services.users import (
    get_user,
    get_user_notifications,
    lookup_user,
    remove_notification,
)

__all__ = [
    "AppSettings",
    "ConfigurationError",
    "DeleteOutcome",
    "HttpTransport",
    "MissingIdentityError",
    "Notification",
    "NotificationCollection",
    "NotificationIdContext",
    "PortalUsersError",
    "RequestContext",
    "TransportError",
    "UserProfile",
    "UserSession",
    "get_user",
    "get_user_notifications",
    "lookup_user",
    "remove_notification",
    "resolve_portal_base",
    "resolve_username",
]
