import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction

logger = logging.getLogger(__name__)

STATE_CHANGED = "state.changed"


def room_group(room_id) -> str:
    return f"room_{room_id}"


def user_group(user_id) -> str:
    return f"user_{user_id}"


def _send(group: str) -> None:
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    try:
        async_to_sync(channel_layer.group_send)(group, {"type": STATE_CHANGED})
    except Exception:
        logger.exception("Failed to publish %s to %s", STATE_CHANGED, group)


def notify_state_changed(*, room_ids=(), user_ids=()) -> None:
    """
    Tell subscribed sessions to re-read their snapshot once the current
    transaction commits.
    """
    groups = {room_group(r) for r in room_ids if r} | {user_group(u) for u in user_ids if u}
    if not groups:
        return

    def publish():
        for group in sorted(groups):
            _send(group)

    transaction.on_commit(publish)
