"""Serializers for transforming ticket domain models to API responses."""

from rest_framework import serializers


class EventSnapshotSerializer(serializers.Serializer):
    """Serializer for EventSnapshot domain model."""

    name = serializers.CharField()
    date = serializers.DateField()
    time = serializers.CharField()
    location = serializers.CharField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField(source="identity.name")
    email = serializers.CharField(source="identity.contact.value")
    phone = serializers.CharField(source="identity.phone")
    age = serializers.IntegerField(source="identity.age.value")
    event = EventSnapshotSerializer()
    created_at = serializers.DateTimeField()
    check_state = serializers.CharField(source="check_state.value")
    checked_in_at = serializers.DateTimeField(allow_null=True)


class RegistrationSerializer(serializers.Serializer):
    """Input format for POST /api/tickets. Value rules live in the service."""

    name = serializers.CharField(max_length=255, allow_blank=True)
    email = serializers.CharField(max_length=254)
    phone = serializers.CharField(max_length=50, allow_blank=True, required=False, default="")
    age = serializers.IntegerField()


class CheckInSerializer(serializers.Serializer):
    """Input format for POST /api/check-ins: the raw text read from the code."""

    code = serializers.CharField(max_length=512, allow_blank=True, trim_whitespace=False)


class CheckInResultSerializer(serializers.Serializer):
    outcome = serializers.CharField(source="outcome.value")
    checked_in_at = serializers.DateTimeField(allow_null=True)
    ticket = TicketSerializer(allow_null=True)
