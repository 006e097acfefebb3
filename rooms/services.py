import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from realtime.events import notify_state_changed
from users.exceptions import UserNotFound
from users.models import User
from users.serializers import MemberSerializer
from users.sessions import require_user
from voting.majority import has_majority, votes_required

from .codes import unique_room_code
from .exceptions import (
    CannotTargetSelf,
    CorruptedState,
    NotHost,
    NotInRoom,
    RoomNotFound,
    TargetNotInRoom,
)
from .models import Room
from .serializers import RoomSerializer

logger = logging.getLogger(__name__)


def members_of(room_id) -> list[User]:
    """Members in join order. The first one is the host."""
    return list(User.objects.filter(room_id=room_id).order_by("joined_at", "created_at", "id"))


def host_of(room_id) -> User | None:
    return User.objects.filter(room_id=room_id).order_by("joined_at", "created_at", "id").first()


def _lock_room(room_id) -> Room | None:
    return Room.objects.select_for_update().filter(id=room_id).first()


def _lock_rooms(*room_ids) -> dict:
    """Lock rooms in id order so concurrent movers take locks in the same order."""
    ids = {room_id for room_id in room_ids if room_id}
    if not ids:
        return {}
    rooms = Room.objects.select_for_update().filter(id__in=ids).order_by("id")
    return {room.id: room for room in rooms}


def delete_room_if_empty(room_id) -> bool:
    """
    Delete the room when nobody references it any more. The room row is
    locked first so a concurrent join either lands before the check or
    finds the room gone.
    """
    room = _lock_room(room_id)
    if room is None:
        return False
    if User.objects.filter(room_id=room_id).exists():
        return False
    room.delete()
    logger.info("Room %s (%s) deleted, no members left", room_id, room.code)
    return True


def _create_room_with_unique_code(now) -> Room:
    while True:
        code = unique_room_code()
        try:
            with transaction.atomic():
                return Room.objects.create(code=code, last_updated=now)
        except IntegrityError:
            logger.info("Room code %s was taken concurrently, drawing another", code)


def _assign_unique_code(room: Room, now) -> str:
    while True:
        code = unique_room_code()
        room.code = code
        room.last_updated = now
        try:
            with transaction.atomic():
                room.save(update_fields=["code", "last_updated"])
            return code
        except IntegrityError:
            logger.info("Room code %s was taken concurrently, drawing another", code)


def _move_user(user: User, room: Room | None, now) -> None:
    """
    Point the user at a new room (or none) and clean up the room they left.
    The vote flag travels with the user. The caller holds the locks on both
    rooms.
    """
    previous_room_id = user.room_id
    if room is not None and previous_room_id == room.id:
        user.touch(now)
        user.save(update_fields=["last_updated"])
        return

    user.room = room
    user.joined_at = now if room is not None else None
    user.touch(now)
    user.save(update_fields=["room", "joined_at", "last_updated"])

    if previous_room_id:
        delete_room_if_empty(previous_room_id)


@transaction.atomic
def create_room(session_id: str) -> str:
    user = require_user(session_id)
    now = timezone.now()
    previous_room_id = user.room_id
    _lock_rooms(previous_room_id)

    room = _create_room_with_unique_code(now)
    _move_user(user, room, now)

    logger.info("User %s created room %s (%s)", user.id, room.id, room.code)
    notify_state_changed(room_ids=[previous_room_id, room.id], user_ids=[user.id])
    return room.code


@transaction.atomic
def join_room(session_id: str, code: str) -> str:
    user = require_user(session_id)
    found = Room.objects.filter(code=code).first()
    if found is None:
        raise RoomNotFound()

    previous_room_id = user.room_id
    room = _lock_rooms(found.id, previous_room_id).get(found.id)
    # The code may have been regenerated or the room emptied while we waited.
    if room is None or room.code != code:
        raise RoomNotFound()

    _move_user(user, room, timezone.now())

    logger.info("User %s joined room %s (%s)", user.id, room.id, room.code)
    notify_state_changed(room_ids=[previous_room_id, room.id], user_ids=[user.id])
    return room.code


@transaction.atomic
def leave_room(session_id: str) -> None:
    user = require_user(session_id)
    previous_room_id = user.room_id
    _lock_rooms(previous_room_id)
    _move_user(user, None, timezone.now())

    if previous_room_id:
        logger.info("User %s left room %s", user.id, previous_room_id)
    notify_state_changed(room_ids=[previous_room_id], user_ids=[user.id])


def _require_host(user: User) -> Room:
    if not user.room_id:
        raise NotInRoom()
    room = _lock_room(user.room_id)
    if room is None:
        raise CorruptedState(f"User {user.id} references missing room {user.room_id}")
    host = host_of(room.id)
    if host is None or host.id != user.id:
        raise NotHost()
    return room


@transaction.atomic
def regenerate_room_code(session_id: str) -> str:
    user = require_user(session_id)
    room = _require_host(user)

    old_code = room.code
    code = _assign_unique_code(room, timezone.now())

    logger.info("Host %s regenerated code for room %s: %s -> %s", user.id, room.id, old_code, code)
    notify_state_changed(room_ids=[room.id])
    return code


def _lock_users(session_id: str, *user_ids) -> tuple[User, dict]:
    """
    Lock the caller and the other given users in id order, before any room
    row, the same order every other mutation takes.
    """
    caller_id = None
    if session_id:
        caller_id = User.objects.filter(session_id=session_id).values_list("id", flat=True).first()
    if caller_id is None:
        raise UserNotFound()
    locked = User.objects.select_for_update().filter(id__in=[caller_id, *user_ids]).order_by("id")
    users = {str(u.id): u for u in locked}
    caller = users.get(str(caller_id))
    if caller is None:
        raise UserNotFound()
    return caller, users


@transaction.atomic
def delete_user_from_room(session_id: str, target_user_id) -> None:
    user, locked = _lock_users(session_id, target_user_id)
    room = _require_host(user)

    if str(target_user_id) == str(user.id):
        raise CannotTargetSelf()

    target = locked.get(str(target_user_id))
    if target is None or target.room_id != room.id:
        raise TargetNotInRoom()

    now = timezone.now()
    target.room = None
    target.joined_at = None
    target.touch(now)
    target.save(update_fields=["room", "joined_at", "last_updated"])

    logger.info("Host %s removed user %s from room %s", user.id, target.id, room.id)
    notify_state_changed(room_ids=[room.id], user_ids=[target.id])


def room_info(room_id) -> dict:
    """
    The room as every member sees it: its own fields, the member list
    without individual votes, and the aggregate yes count.
    """
    room = Room.objects.filter(id=room_id).first()
    if room is None:
        raise CorruptedState(f"Room {room_id} is referenced but does not exist")

    members = members_of(room.id)
    votes = sum(1 for member in members if member.voted_yes)

    data = dict(RoomSerializer(room).data)
    data.update({
        "users": MemberSerializer(members, many=True).data,
        "votes": votes,
        "votes_required": votes_required(len(members)),
        "has_majority": has_majority(votes, len(members)),
        "host_id": str(members[0].id) if members else None,
    })
    return data
