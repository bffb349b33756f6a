"""Contrato del handle de autenticación.

Por qué Protocol:
- El Core solo lee `username` y `portal`; el token lo pide el transporte.
- Cualquier objeto de sesión (OAuth, token fijo, etc.) sirve sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthenticationProvider(Protocol):
    """Sesión de un usuario autenticado contra un portal."""

    username: str
    portal: str | None

    async def get_token(self, url: str) -> str:
        """Devuelve un token válido para `url`."""

        ...
