"""Serializers for event settings input and output."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    date = serializers.DateField()
    time = serializers.CharField()
    location = serializers.CharField()
    description = serializers.CharField()
    logo_url = serializers.CharField(allow_null=True)
    updated_at = serializers.DateTimeField()

    def get_id(self, event) -> str:
        return str(event.id.value)


class EventInputSerializer(serializers.Serializer):
    """Input format for PUT /api/event."""

    name = serializers.CharField(max_length=255)
    date = serializers.DateField()
    time = serializers.CharField(max_length=50, allow_blank=True, required=False, default="")
    location = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, required=False, default="")
    logo_url = serializers.URLField(max_length=500, allow_null=True, required=False, default=None)
