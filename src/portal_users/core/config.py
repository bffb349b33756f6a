"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los servicios.
- Permite que el transporte HTTP y los resolvers lean config de forma consistente.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PUBLIC_PORTAL = "https://www.arcgis.com/sharing/rest"


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para servicios y adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_USERS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_portal: str = Field(
        default=PUBLIC_PORTAL,
        min_length=8,
        description="Raíz pública multi-tenant de la sharing API (sin barra final).",
    )
    response_format: str = Field(
        default="json",
        min_length=1,
        description="Valor del parámetro `f` que añade el transporte.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos) cuando el caller no indica otro.",
    )
    user_agent: str = Field(
        default="portal-users/0.1",
        min_length=1,
        description="User-Agent para las peticiones.",
    )

    @field_validator("default_portal")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
