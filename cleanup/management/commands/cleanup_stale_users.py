from datetime import timedelta

from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

from cleanup.services import cleanup_stale_users


class Command(BaseCommand):
    help = "Remove users inactive for longer than the staleness threshold, and their empty rooms"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--hours",
            dest="hours",
            type=int,
            default=None,
            help="Override STALE_USER_THRESHOLD_HOURS for this run.",
        )

    def handle(self, *args, **options) -> None:
        hours: int | None = options.get("hours")
        threshold = timedelta(hours=hours) if hours is not None else None

        result = cleanup_stale_users(threshold=threshold)
        self.stdout.write(
            self.style.SUCCESS(
                f"Removed {result['stale_users_removed']} stale users "
                f"and {result['rooms_removed']} empty rooms."
            )
        )
