"""Errores del cliente.

Dos familias:
- Locales (`MissingIdentityError`, `ConfigurationError`): se lanzan de forma
  síncrona, antes de crear la corrutina que hace I/O.
- Remotas (`TransportError`): cualquier fallo de red, status HTTP o error
  reportado por el servidor. Se propagan tal cual al caller.
"""

from __future__ import annotations

from typing import Any


class PortalUsersError(Exception):
    """Base de todos los errores del paquete."""


class MissingIdentityError(PortalUsersError):
    """No hay username explícito ni sesión de la que derivarlo."""

    def __init__(self, message: str = "A username or an authenticated session is required.") -> None:
        super().__init__(message)


class ConfigurationError(PortalUsersError):
    """No se puede resolver la URL base del portal para una llamada autenticada."""


class TransportError(PortalUsersError):
    """Fallo de red, HTTP o error devuelto por la sharing API."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int | None = None,
        code: int | None = None,
        details: list[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.code = code
        self.details = details or []

    def __str__(self) -> str:
        prefix = f"{self.code}: " if self.code is not None else ""
        return f"{prefix}{self.message} ({self.url})"
