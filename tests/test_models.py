from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from portal_users.adapters.session import UserSession
from portal_users.core.domain.context import NotificationIdContext, RequestContext
from portal_users.core.domain.models import DeleteOutcome, Notification

from conftest import USER_NOTIFICATIONS_RESPONSE


def test_notification_received_at_is_utc():
    notification = Notification.model_validate(USER_NOTIFICATIONS_RESPONSE["notifications"][0])

    assert notification.received_at == datetime(2018, 2, 6, 19, 55, 37, tzinfo=timezone.utc)


def test_delete_outcome_accepts_wire_and_python_names():
    assert DeleteOutcome.model_validate({"success": True, "notificationId": "3ef"}).notification_id == "3ef"
    assert DeleteOutcome(success=True, notification_id="3ef").model_dump(by_alias=True) == {
        "success": True,
        "notificationId": "3ef",
    }


def test_request_context_rejects_non_session_authentication():
    with pytest.raises(ValidationError):
        RequestContext(authentication="not-a-session")


def test_request_context_is_immutable(session):
    ctx = RequestContext(authentication=session)

    with pytest.raises(ValidationError):
        ctx.username = "jsmith"


def test_notification_id_context_requires_id(session):
    with pytest.raises(ValidationError):
        NotificationIdContext(authentication=session)


def test_session_portal_defaults_to_public_root_and_hides_token():
    session = UserSession(username="casey", token="secret/")

    assert session.portal == "https://www.arcgis.com/sharing/rest"
    assert "secret" not in repr(session)
