from django.conf import settings

from .exceptions import UserNotFound
from .models import User


def session_id_from_request(request) -> str:
    return (request.headers.get(settings.SESSION_ID_HEADER) or "").strip()


def resolve_user(session_id: str, *, for_update: bool = False) -> User | None:
    """Map a session token to its user, or None when the token is unknown."""
    if not session_id:
        return None
    qs = User.objects.filter(session_id=session_id)
    if for_update:
        qs = qs.select_for_update()
    return qs.first()


def require_user(session_id: str) -> User:
    """Resolve and lock the caller's row. Must run inside a transaction."""
    user = resolve_user(session_id, for_update=True)
    if user is None:
        raise UserNotFound()
    return user
