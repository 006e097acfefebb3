import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import Exists, OuterRef
from django.utils import timezone

from rooms.models import Room
from realtime.events import notify_state_changed
from rooms.services import delete_room_if_empty
from users.models import User

logger = logging.getLogger(__name__)


def stale_threshold() -> timedelta:
    return timedelta(hours=settings.STALE_USER_THRESHOLD_HOURS)


@transaction.atomic
def cleanup_stale_users(now=None, threshold: timedelta | None = None) -> dict:
    """
    Remove users untouched for longer than the threshold, then any room
    those removals (or earlier ones) left without members.

    Staleness is judged only by last_updated. Every delete re-applies its
    condition at delete time, so a user refreshed or a room repopulated
    since the scan survives.
    """
    now = now or timezone.now()
    if threshold is None:
        threshold = stale_threshold()
    cutoff = now - threshold

    stale = User.objects.filter(last_updated__lt=cutoff)
    stale_rows = list(stale.values_list("id", "room_id"))
    logger.info("Found %s stale users to clean up", len(stale_rows))

    users_removed = 0
    if stale_rows:
        users_removed, _ = User.objects.filter(
            id__in=[user_id for user_id, _ in stale_rows],
            last_updated__lt=cutoff,
        ).delete()

    rooms_to_check = {room_id for _, room_id in stale_rows if room_id}
    orphaned = Room.objects.filter(
        ~Exists(User.objects.filter(room_id=OuterRef("pk"))),
        last_updated__lt=cutoff,
    )
    rooms_to_check.update(orphaned.values_list("id", flat=True))

    rooms_removed = 0
    for room_id in sorted(rooms_to_check):
        if delete_room_if_empty(room_id):
            rooms_removed += 1

    notify_state_changed(
        room_ids=rooms_to_check,
        user_ids=[user_id for user_id, _ in stale_rows],
    )
    logger.info("Removed %s stale users and %s empty rooms", users_removed, rooms_removed)
    return {"stale_users_removed": users_removed, "rooms_removed": rooms_removed}
