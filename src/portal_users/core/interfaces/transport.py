"""Contrato del transporte HTTP.

Reglas de diseño:
- `request` es asíncrono: una única llamada de red por operación.
- Devuelve el cuerpo ya deserializado; los errores se lanzan como
  `core.errors.TransportError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from portal_users.core.domain.context import RequestOptions


@runtime_checkable
class Transport(Protocol):
    async def request(self, url: str, options: RequestOptions) -> dict[str, Any]:
        """Ejecuta la petición y devuelve el JSON de respuesta."""

        ...
