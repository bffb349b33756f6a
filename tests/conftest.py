"""Fixtures compartidas: sesión, settings aislados y un transporte httpx falso."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest

from portal_users.adapters.http_client import HttpTransport
from portal_users.adapters.session import UserSession
from portal_users.core.config import AppSettings

MYORG_PORTAL = "https://myorg.maps.arcgis.com/sharing/rest"

ANON_USER_RESPONSE: dict[str, Any] = {
    "username": "jsmith",
    "fullName": "John Smith",
    "firstName": "John",
    "lastName": "Smith",
    "description": "Senior GIS Analyst for the city of Redlands.",
    "tags": ["GIS Analyst", "City of Redlands"],
    "culture": "en",
    "region": "US",
    "units": "english",
    "thumbnail": "john.jpg",
    "created": 1258501046000,
    "modified": 1290625562000,
    "provider": "arcgis",
}

GROUP_MEMBER_USER_RESPONSE: dict[str, Any] = {
    **ANON_USER_RESPONSE,
    "username": "c@sey",
    "fullName": "Casey Jones",
    "email": "casey@esri.com",
    "orgId": "qWAReEOCnD7eTxOe",
    "role": "org_user",
    "groups": [],
}

USER_NOTIFICATIONS_RESPONSE: dict[str, Any] = {
    "notifications": [
        {
            "id": "3ef",
            "type": "group_join",
            "target": "casey",
            "targetType": "user",
            "received": 1517946937000,
            "data": {"groupId": "5b8", "groupTitle": "Street Trees"},
        },
        {
            "id": "bc2",
            "type": "group_join",
            "target": "casey",
            "targetType": "user",
            "received": 1517947153000,
            "data": {"groupId": "a1d", "groupTitle": "Parks"},
        },
    ]
}

DELETE_SUCCESS_RESPONSE: dict[str, Any] = {"success": True, "notificationId": "3ef"}


@dataclass
class RecordingTransport:
    """`httpx.MockTransport` que guarda cada request y responde con un JSON fijo."""

    payload: Any = field(default_factory=dict)
    status_code: int = 200
    requests: list[httpx.Request] = field(default_factory=list)
    handler: Callable[[httpx.Request], httpx.Response] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(self.status_code, content=json.dumps(self.payload).encode("utf-8"))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self) -> dict[str, str]:
        return dict(httpx.QueryParams(self.last.content.decode("utf-8")))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def session() -> UserSession:
    return UserSession(username="c@sey", portal=MYORG_PORTAL, token="token")


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def transport(recorder: RecordingTransport, settings: AppSettings) -> HttpTransport:
    return HttpTransport(settings, http_transport=httpx.MockTransport(recorder))
