from rest_framework import serializers


class VoteSerializer(serializers.Serializer):
    voted_yes = serializers.BooleanField(required=True)
