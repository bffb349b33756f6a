"""Sesión con token ya emitido.

Implementa `AuthenticationProvider`. La generación y el refresco del token
quedan fuera de este paquete: quien crea la sesión aporta el token.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from portal_users.core.config import PUBLIC_PORTAL


class UserSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1, description="Usuario autenticado.")
    portal: str | None = Field(
        default=PUBLIC_PORTAL,
        description="URL base de la sharing API del portal de la sesión.",
    )
    token: str = Field(..., min_length=1, repr=False)
    expires: datetime | None = Field(default=None)

    @field_validator("portal")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        return value.rstrip("/") if value else value

    async def get_token(self, url: str) -> str:
        return self.token
