import json
from urllib.parse import parse_qs

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.core.serializers.json import DjangoJSONEncoder

from users.services import get_user_and_room
from .events import room_group, user_group


class SessionConsumer(AsyncWebsocketConsumer):
    """
    Pushes the caller's user-and-room snapshot on connect and again
    whenever a committed mutation touches their user or their room.
    """

    async def connect(self):
        query = parse_qs(self.scope.get("query_string", b"").decode())
        self.session_id = (query.get("session_id") or [""])[0].strip()
        if not self.session_id:
            await self.close(code=4400)
            return

        self.groups_joined = set()
        await self.accept()
        await self._push_snapshot()

    async def disconnect(self, close_code):
        for group in getattr(self, "groups_joined", set()):
            await self.channel_layer.group_discard(group, self.channel_name)
        self.groups_joined = set()

    async def receive(self, text_data=None, bytes_data=None):
        # Clients may ask for a fresh snapshot at any time.
        if text_data:
            try:
                msg = json.loads(text_data)
            except json.JSONDecodeError:
                return
            if isinstance(msg, dict) and msg.get("type") == "refresh":
                await self._push_snapshot()

    async def state_changed(self, event):
        await self._push_snapshot()

    async def _push_snapshot(self):
        snapshot = await database_sync_to_async(get_user_and_room)(self.session_id)
        await self._sync_groups(snapshot)
        await self.send(text_data=json.dumps({"type": "snapshot", **snapshot}, cls=DjangoJSONEncoder))

    async def _sync_groups(self, snapshot: dict):
        wanted = set()
        if snapshot["user"]:
            wanted.add(user_group(snapshot["user"]["id"]))
        if snapshot["room"]:
            wanted.add(room_group(snapshot["room"]["id"]))

        for group in self.groups_joined - wanted:
            await self.channel_layer.group_discard(group, self.channel_name)
        for group in wanted - self.groups_joined:
            await self.channel_layer.group_add(group, self.channel_name)
        self.groups_joined = wanted
