import logging

from django.db import transaction

from realtime.events import notify_state_changed
from users.sessions import require_user

logger = logging.getLogger(__name__)


@transaction.atomic
def vote(session_id: str, voted_yes: bool) -> None:
    """Set the caller's vote. A plain set, so repeating a call is harmless."""
    user = require_user(session_id)
    user.voted_yes = voted_yes
    user.touch()
    user.save(update_fields=["voted_yes", "last_updated"])

    logger.debug("User %s voted_yes=%s in room %s", user.id, voted_yes, user.room_id)
    notify_state_changed(room_ids=[user.room_id], user_ids=[user.id])
