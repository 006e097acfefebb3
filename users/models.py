import uuid

from django.db import models
from django.utils import timezone


class User(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session_id = models.CharField(max_length=128, unique=True)
    name = models.CharField(max_length=100)
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="members",
    )
    voted_yes = models.BooleanField(default=False)
    # Set when the user enters their current room; the earliest joiner hosts.
    joined_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_updated = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["joined_at", "created_at", "id"]

    def __str__(self):
        return f"{self.id} {self.name}"

    def touch(self, now=None):
        self.last_updated = now or timezone.now()
