from django.core.validators import RegexValidator
from rest_framework import serializers

from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = ["id", "code", "created_at", "last_updated"]
        read_only_fields = fields


class RoomJoinSerializer(serializers.Serializer):
    code = serializers.CharField(
        min_length=6,
        max_length=6,
        validators=[
            RegexValidator(
                r"^[A-Z0-9]{6}$",
                message="Room code must contain only uppercase letters and numbers.",
            )
        ],
    )
