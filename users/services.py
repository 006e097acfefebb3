import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from realtime.events import notify_state_changed
from rooms.services import delete_room_if_empty, room_info

from .exceptions import SessionRequired, UserAlreadyExists
from .models import User
from .names import generate_display_name
from .serializers import UserSerializer
from .sessions import require_user, resolve_user

logger = logging.getLogger(__name__)


@transaction.atomic
def create_user(session_id: str) -> User:
    if not session_id or not session_id.strip():
        raise SessionRequired()

    if resolve_user(session_id) is not None:
        raise UserAlreadyExists()

    try:
        with transaction.atomic():
            user = User.objects.create(
                session_id=session_id,
                name=generate_display_name(),
                voted_yes=False,
                last_updated=timezone.now(),
            )
    except IntegrityError as exc:
        raise UserAlreadyExists() from exc

    logger.info("Created user %s (%s)", user.id, user.name)
    return user


@transaction.atomic
def change_name(session_id: str, name: str) -> None:
    user = require_user(session_id)
    user.name = name
    user.touch()
    user.save(update_fields=["name", "last_updated"])

    logger.info("User %s renamed to %s", user.id, name)
    notify_state_changed(room_ids=[user.room_id], user_ids=[user.id])


@transaction.atomic
def delete_user(session_id: str) -> None:
    user = require_user(session_id)
    user_id, room_id = user.id, user.room_id
    user.delete()

    if room_id:
        delete_room_if_empty(room_id)

    logger.info("Deleted user %s", user_id)
    notify_state_changed(room_ids=[room_id], user_ids=[user_id])


def get_user_and_room(session_id: str) -> dict:
    user = resolve_user(session_id)
    if user is None:
        return {"user": None, "room": None}

    data = dict(UserSerializer(user).data)
    if not user.room_id:
        return {"user": data, "room": None}

    # room_info raises CorruptedState when the reference is dangling.
    return {"user": data, "room": room_info(user.room_id)}
