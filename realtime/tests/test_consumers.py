import pytest
from asgiref.sync import async_to_sync
from channels.db import database_sync_to_async
from channels.testing import WebsocketCommunicator

from realtime.consumers import SessionConsumer
from rooms.services import join_room, leave_room
from voting.services import vote


def _communicator(session_id: str) -> WebsocketCommunicator:
    return WebsocketCommunicator(SessionConsumer.as_asgi(), f"/ws/session/?session_id={session_id}")


def _member_ids(snapshot: dict) -> list[str]:
    return [member["id"] for member in snapshot["room"]["users"]]


def test_missing_session_id_is_rejected():
    async def scenario():
        communicator = _communicator("")
        connected, code = await communicator.connect()
        return connected, code

    assert async_to_sync(scenario)() == (False, 4400)


@pytest.mark.django_db(transaction=True)
class TestSessionConsumer:
    def test_connect_sends_snapshot(self, room_with_members):
        code, (host, guest) = room_with_members("guest")

        async def scenario():
            communicator = _communicator("host")
            connected, _ = await communicator.connect()
            assert connected
            snapshot = await communicator.receive_json_from()
            await communicator.disconnect()
            return snapshot

        snapshot = async_to_sync(scenario)()

        assert snapshot["type"] == "snapshot"
        assert snapshot["user"]["id"] == str(host.id)
        assert snapshot["room"]["code"] == code
        assert _member_ids(snapshot) == [str(host.id), str(guest.id)]

    def test_unknown_session_gets_empty_snapshot(self):
        async def scenario():
            communicator = _communicator("nobody")
            await communicator.connect()
            snapshot = await communicator.receive_json_from()
            await communicator.disconnect()
            return snapshot

        assert async_to_sync(scenario)() == {"type": "snapshot", "user": None, "room": None}

    def test_refresh_resends_snapshot(self, make_user):
        user = make_user("s1")

        async def scenario():
            communicator = _communicator("s1")
            await communicator.connect()
            await communicator.receive_json_from()
            await communicator.send_json_to({"type": "refresh"})
            snapshot = await communicator.receive_json_from()
            await communicator.send_to(text_data="not json")
            silent = await communicator.receive_nothing()
            await communicator.disconnect()
            return snapshot, silent

        snapshot, silent = async_to_sync(scenario)()

        assert snapshot["user"]["id"] == str(user.id)
        assert silent

    def test_join_pushes_new_snapshot_to_room(self, room_with_members, make_user):
        code, (host, _) = room_with_members("guest")
        late = make_user("late")

        async def scenario():
            communicator = _communicator("host")
            await communicator.connect()
            await communicator.receive_json_from()
            await database_sync_to_async(join_room)("late", code)
            snapshot = await communicator.receive_json_from()
            await communicator.disconnect()
            return snapshot

        snapshot = async_to_sync(scenario)()

        assert _member_ids(snapshot)[-1] == str(late.id)
        assert snapshot["room"]["host_id"] == str(host.id)

    def test_leaving_stops_room_updates(self, room_with_members):
        room_with_members("guest")

        async def scenario():
            communicator = _communicator("guest")
            await communicator.connect()
            first = await communicator.receive_json_from()

            await database_sync_to_async(leave_room)("guest")
            # One push for the old room group and one for the user group.
            after_leave = [await communicator.receive_json_from() for _ in range(2)]

            await database_sync_to_async(vote)("host", True)
            silent = await communicator.receive_nothing()
            await communicator.disconnect()
            return first, after_leave, silent

        first, after_leave, silent = async_to_sync(scenario)()

        assert first["room"] is not None
        assert all(snapshot["room"] is None for snapshot in after_leave)
        assert silent
