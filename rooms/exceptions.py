from rest_framework.exceptions import NotFound, PermissionDenied


class RoomNotFound(NotFound):
    default_detail = "Room not found"
    default_code = "room_not_found"


class NotInRoom(PermissionDenied):
    default_detail = "You are not in a room"
    default_code = "not_in_room"


class NotHost(PermissionDenied):
    default_detail = "You are not the host"
    default_code = "not_host"


class CannotTargetSelf(PermissionDenied):
    default_detail = "You cannot remove yourself, leave the room instead"
    default_code = "cannot_target_self"


class TargetNotInRoom(NotFound):
    default_detail = "User not found in room"
    default_code = "target_not_in_room"


class CorruptedState(RuntimeError):
    """A stored reference points at a row that must exist but does not."""
