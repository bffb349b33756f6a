"""Transporte httpx para la sharing API.

Por qué un wrapper:
- Estandariza timeouts, headers y el parámetro `f` en todas las llamadas.
- Traduce cualquier fallo (red, status, error en el JSON) a `TransportError`.
- Facilita testeo: acepta un `httpx.MockTransport` en lugar de la red.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from portal_users.core.config import AppSettings
from portal_users.core.domain.context import RequestOptions
from portal_users.core.errors import TransportError
from portal_users.core.interfaces.transport import Transport

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout or settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def encode_params(params: dict[str, Any]) -> dict[str, str]:
    """Aplana parámetros al formato que espera la API (todo string)."""

    out: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            out[key] = ",".join(str(v) for v in value)
        elif isinstance(value, dict):
            out[key] = json.dumps(value)
        else:
            out[key] = str(value)
    return out


class HttpTransport(Transport):
    """Implementación de `Transport` sobre httpx.

    - Añade `f=<response_format>` y, con sesión, `token=...`.
    - GET manda los parámetros en la query; POST como form-urlencoded.
    - Sin reintentos ni refresco de token.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._http_transport = http_transport

    async def request(self, url: str, options: RequestOptions) -> dict[str, Any]:
        params = dict(options.params)
        params["f"] = self._settings.response_format
        if options.authentication is not None:
            params["token"] = await options.authentication.get_token(url)
        encoded = encode_params(params)

        try:
            async with build_async_client(
                self._settings,
                extra_headers=options.headers,
                timeout=options.timeout,
                transport=self._http_transport,
            ) as client:
                if options.http_method == "GET":
                    response = await client.get(url, params=encoded)
                else:
                    response = await client.post(url, data=encoded)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", options.http_method, url, exc)
            raise TransportError(str(exc) or exc.__class__.__name__, url=url) from exc

        if response.status_code >= 400:
            logger.warning("%s %s returned HTTP %s", options.http_method, url, response.status_code)
            raise TransportError(
                f"HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError("Response is not valid JSON", url=url, status_code=response.status_code) from exc

        if not isinstance(payload, dict):
            raise TransportError("Unexpected response body", url=url, status_code=response.status_code)

        # La API responde 200 con {"error": {...}} para fallos de negocio.
        error = payload.get("error")
        if isinstance(error, dict):
            logger.warning("%s %s returned error %s", options.http_method, url, error.get("code"))
            raise TransportError(
                str(error.get("message") or "Request failed"),
                url=url,
                status_code=response.status_code,
                code=error.get("code"),
                details=error.get("details"),
            )
        return payload
