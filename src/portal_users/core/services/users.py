"""Operaciones sobre usuarios y notificaciones de la sharing API.

Cada operación pública:
1. Resuelve identidad y portal de forma síncrona (los errores locales se
   lanzan en el momento de la llamada).
2. Compone URL + opciones (`compose_*`, sin I/O).
3. Devuelve una corrutina que hace exactamente una llamada al transporte y
   valida el cuerpo contra el modelo de resultado.

Shapes del wire:
    GET  {root}/community/users/{name}                        (anónimo, sin encode)
    GET  {portal}/community/users/{encodedName}
    GET  {portal}/community/users/{encodedName}/notifications
    POST {portal}/community/users/{encodedName}/notifications/{id}/delete
"""

from __future__ import annotations

import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

from pydantic import BaseModel

from portal_users.adapters.http_client import HttpTransport
from portal_users.core.config import AppSettings
from portal_users.core.domain.context import (
    ComposedRequest,
    HttpMethod,
    NotificationIdContext,
    RequestContext,
    RequestOptions,
)
from portal_users.core.domain.models import DeleteOutcome, NotificationCollection, UserProfile
from portal_users.core.interfaces.transport import Transport
from portal_users.core.services.resolvers import (
    encode_path_segment,
    resolve_portal_base,
    resolve_session_username,
    resolve_username,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


def build_request_options(context: RequestContext, *, http_method: HttpMethod, portal: str) -> RequestOptions:
    """Construye las opciones finales a partir del contexto del caller.

    Precedencia (los campos de la operación se fijan al final y siempre ganan):

    =================  ==========================  ==========================
    campo              origen                      ¿lo puede fijar el caller?
    =================  ==========================  ==========================
    http_method        operación                   no (`context.http_method`
                                                   se ignora)
    portal             `resolve_portal_base`       no
    authentication     `context.authentication`    n/a
    params             `context.params`            sí; `f`/`token` los añade
                                                   el transporte y ganan
    headers            `context.headers`           sí
    timeout            `context.timeout`           sí, se pasa sin tocar
    =================  ==========================  ==========================
    """

    if context.http_method is not None and context.http_method != http_method:
        logger.debug("Ignoring caller http_method=%s; operation uses %s", context.http_method, http_method)

    return RequestOptions(
        params=dict(context.params),
        headers=dict(context.headers),
        timeout=context.timeout,
        authentication=context.authentication,
        portal=portal,
        http_method=http_method,
    )


def compose_lookup_user(name: str, *, settings: AppSettings | None = None) -> ComposedRequest:
    """Lookup anónimo contra la raíz pública.

    El nombre va tal cual en la URL (sin percent-encoding), igual que el
    endpoint público histórico.
    """

    settings = settings or AppSettings()
    portal = settings.default_portal
    # TODO: confirmar contra el servicio real si `name` debería ir codificado como en get_user.
    url = f"{portal}/community/users/{name}"
    return ComposedRequest(url=url, options=RequestOptions(http_method="GET", portal=portal))


def compose_get_user(context: RequestContext, *, settings: AppSettings | None = None) -> ComposedRequest:
    username = resolve_username(context)
    portal = resolve_portal_base(context, settings=settings)
    url = f"{portal}/community/users/{encode_path_segment(username)}"
    return ComposedRequest(url=url, options=build_request_options(context, http_method="GET", portal=portal))


def compose_get_user_notifications(
    context: RequestContext, *, settings: AppSettings | None = None
) -> ComposedRequest:
    username = resolve_session_username(context)
    portal = resolve_portal_base(context, settings=settings)
    url = f"{portal}/community/users/{encode_path_segment(username)}/notifications"
    return ComposedRequest(url=url, options=build_request_options(context, http_method="GET", portal=portal))


def compose_remove_notification(
    context: NotificationIdContext, *, settings: AppSettings | None = None
) -> ComposedRequest:
    username = resolve_session_username(context)
    portal = resolve_portal_base(context, settings=settings)
    url = f"{portal}/community/users/{encode_path_segment(username)}/notifications/{context.id}/delete"
    return ComposedRequest(url=url, options=build_request_options(context, http_method="POST", portal=portal))


def lookup_user(
    name: str,
    *,
    transport: Transport | None = None,
    settings: AppSettings | None = None,
) -> Coroutine[Any, Any, UserProfile]:
    """Información pública de un usuario de la plataforma multi-tenant.

    ```python
    profile = await lookup_user("jsmith")
    profile.tags  # ["GIS Analyst", "City of Redlands"]
    ```
    """

    composed = compose_lookup_user(name, settings=settings)
    return _dispatch(composed, UserProfile, transport=transport, settings=settings)


def get_user(
    context: RequestContext,
    *,
    transport: Transport | None = None,
    settings: AppSettings | None = None,
) -> Coroutine[Any, Any, UserProfile]:
    """Información de un usuario, usando la sesión del contexto.

    Sin `context.username` se consulta el usuario de la propia sesión.

    Raises:
        MissingIdentityError: sin username ni sesión (síncrono).
        ConfigurationError: la sesión no tiene portal (síncrono).
        TransportError: al hacer `await`, si falla la petición.
    """

    composed = compose_get_user(context, settings=settings)
    return _dispatch(composed, UserProfile, transport=transport, settings=settings)


def get_user_notifications(
    context: RequestContext,
    *,
    transport: Transport | None = None,
    settings: AppSettings | None = None,
) -> Coroutine[Any, Any, NotificationCollection]:
    """Notificaciones del usuario autenticado (`context.username` se ignora)."""

    composed = compose_get_user_notifications(context, settings=settings)
    return _dispatch(composed, NotificationCollection, transport=transport, settings=settings)


def remove_notification(
    context: NotificationIdContext,
    *,
    transport: Transport | None = None,
    settings: AppSettings | None = None,
) -> Coroutine[Any, Any, DeleteOutcome]:
    """Borra la notificación `context.id` del usuario autenticado."""

    composed = compose_remove_notification(context, settings=settings)
    return _dispatch(composed, DeleteOutcome, transport=transport, settings=settings)


async def _dispatch(
    composed: ComposedRequest,
    result_model: type[ResultT],
    *,
    transport: Transport | None,
    settings: AppSettings | None,
) -> ResultT:
    transport = transport or HttpTransport(settings)
    logger.debug("%s %s", composed.http_method, composed.url)
    body = await transport.request(composed.url, composed.options)
    return result_model.model_validate(body)
