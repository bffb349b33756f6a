"""Modelos de respuesta de la sharing API (Pydantic v2).

Nota:
- Estos modelos describen *qué* devuelve el servidor, no *cómo* se obtiene.
- Los nombres del wire son camelCase; aquí se exponen en snake_case con alias.
"""

from __future__ import annotations

from datetime import datetime, timezone
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class UserProfile(BaseModel):
    """Cuenta de usuario tal como la devuelve `community/users/{name}`.

    El servidor añade campos según el rol del caller (anónimo, miembro, admin),
    así que se conservan todos (`extra="allow"`) y solo se tipan los comunes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    username: str | None = Field(default=None, description="Login del usuario.")
    full_name: str | None = Field(default=None, alias="fullName")
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    description: str | None = Field(default=None)
    email: str | None = Field(default=None)
    org_id: str | None = Field(default=None, alias="orgId")
    role: str | None = Field(default=None)
    tags: list[str] = Field(default_factory=list)
    created: int | None = Field(default=None, description="Epoch en milisegundos.")
    modified: int | None = Field(default=None, description="Epoch en milisegundos.")


class Notification(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1, description="Identificador asignado por el servidor.")
    type: str = Field(..., description="Tipo de notificación (p.ej. 'group_join').")
    target: str = Field(..., description="Destinatario de la notificación.")
    target_type: str = Field(..., alias="targetType")
    received: int = Field(..., description="Epoch en milisegundos.")
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def received_at(self) -> datetime:
        return datetime.fromtimestamp(self.received / 1000, tz=timezone.utc)


class NotificationCollection(BaseModel):
    """Notificaciones de un usuario, en el orden en que las entrega el servidor."""

    model_config = ConfigDict(extra="ignore")

    notifications: list[Notification] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.notifications)

    def __iter__(self) -> Iterator[Notification]:  # type: ignore[override]
        return iter(self.notifications)

    def __getitem__(self, index: int) -> Notification:
        return self.notifications[index]


class DeleteOutcome(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool
    notification_id: str = Field(..., alias="notificationId")
