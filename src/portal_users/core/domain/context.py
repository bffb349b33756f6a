"""Entrada de las operaciones y request compuesto.

- `RequestContext`: lo que aporta el caller (sesión, overrides, opciones HTTP).
- `RequestOptions`: opciones finales que recibe el transporte.
- `ComposedRequest`: URL + opciones, sin I/O; útil para inspección y tests.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from portal_users.core.interfaces.auth import AuthenticationProvider

HttpMethod = Literal["GET", "POST"]


class RequestContext(BaseModel):
    """Contexto de una llamada.

    Invariante: sin `authentication` ni `username` no hay identidad que
    resolver y la operación falla antes de tocar la red.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    authentication: AuthenticationProvider | None = Field(
        default=None,
        description="Sesión del usuario; solo se lee, nunca se modifica.",
    )
    username: str | None = Field(
        default=None,
        min_length=1,
        description="Usuario objetivo si es distinto del de la sesión.",
    )
    portal: str | None = Field(
        default=None,
        description="URL base explícita del portal; gana sobre la de la sesión.",
    )
    http_method: HttpMethod | None = Field(
        default=None,
        description="Ignorado: cada operación fija su propio método.",
    )
    params: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = Field(default=None, gt=0)


class NotificationIdContext(RequestContext):
    id: str = Field(..., description="Notificación a borrar; la valida el servidor.")


class RequestOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    http_method: HttpMethod
    authentication: AuthenticationProvider | None = None
    portal: str
    params: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = None


class ComposedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    options: RequestOptions

    @property
    def http_method(self) -> HttpMethod:
        return self.options.http_method
