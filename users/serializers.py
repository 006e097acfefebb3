from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """The caller's own record, including their vote."""

    room_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "room_id", "voted_yes", "joined_at", "created_at", "last_updated"]
        read_only_fields = fields


class MemberSerializer(serializers.ModelSerializer):
    """Another room member as seen by everyone in the room. Never carries a vote."""

    class Meta:
        model = User
        fields = ["id", "name", "joined_at", "last_updated"]
        read_only_fields = fields


class ChangeNameSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, trim_whitespace=True)
