"""Resolución de portal e identidad.

Reglas:
- Portal: `context.portal` > `authentication.portal` > raíz pública (solo sin sesión).
- Identidad: `context.username` > `authentication.username`.
- Todo falla de forma síncrona, antes de cualquier I/O.
"""

from __future__ import annotations

from urllib.parse import quote

from portal_users.core.config import AppSettings
from portal_users.core.domain.context import RequestContext
from portal_users.core.errors import ConfigurationError, MissingIdentityError

# encodeURIComponent deja sin escapar A-Z a-z 0-9 - _ . ! ~ * ' ( )
_PATH_SEGMENT_SAFE = "!*'()"


def resolve_portal_base(context: RequestContext | None = None, *, settings: AppSettings | None = None) -> str:
    """Devuelve la URL base de la sharing API para `context`, sin barra final."""

    if context is not None and context.portal:
        return context.portal.rstrip("/")

    if context is None or context.authentication is None:
        settings = settings or AppSettings()
        return settings.default_portal

    portal = context.authentication.portal
    if not portal:
        raise ConfigurationError(
            f"Session for {context.authentication.username!r} has no portal and no explicit portal was given."
        )
    return portal.rstrip("/")


def resolve_username(context: RequestContext) -> str:
    if context.username:
        return context.username
    if context.authentication is not None and context.authentication.username:
        return context.authentication.username
    raise MissingIdentityError()


def resolve_session_username(context: RequestContext) -> str:
    """Usuario de la sesión; ignora `context.username`.

    Las notificaciones solo son accesibles para su propio dueño.
    """

    if context.authentication is None or not context.authentication.username:
        raise MissingIdentityError("An authenticated session is required for notification operations.")
    return context.authentication.username


def encode_path_segment(value: str) -> str:
    """Percent-encode de un segmento de path (`c@sey` -> `c%40sey`)."""

    return quote(value, safe=_PATH_SEGMENT_SAFE)
