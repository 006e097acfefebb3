from celery import shared_task

from .services import cleanup_stale_users


@shared_task(name="cleanup.stale_users")
def cleanup_stale_users_task() -> dict:
    """Hourly sweep of stale users and the rooms they leave empty."""
    return cleanup_stale_users()
