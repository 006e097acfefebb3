import pytest
from rest_framework.test import APIClient

from rooms.services import create_room, join_room
from users.models import User
from users.services import create_user


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def session_client():
    """APIClient bound to one session token via the X-Session-Id header."""

    def _make(session_id: str) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_X_SESSION_ID=session_id)
        return client

    return _make


@pytest.fixture
def make_user(db):
    def _make(session_id: str) -> User:
        return create_user(session_id)

    return _make


@pytest.fixture
def room_with_members(make_user):
    """A room created by 'host' and joined by each extra session, in order."""

    def _make(*extra_sessions: str):
        host = make_user("host")
        code = create_room("host")
        members = [host]
        for session_id in extra_sessions:
            members.append(make_user(session_id))
            join_room(session_id, code)
        for member in members:
            member.refresh_from_db()
        return code, members

    return _make
