"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admission.permissions import IsEventAdmin
from events.cache import CURRENT_EVENT_KEY
from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


RETRY_AFTER_SECONDS = 2

_STATUS_BY_CODE = {
    ErrorCode.INVALID_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def event_service() -> EventService:
    return EventService(DjangoEventStore(), defaults=settings.DEFAULT_EVENT)


def _error_response(error: DomainError) -> Response:
    response = Response(
        {"code": error.code.value, "message": error.message},
        status=_STATUS_BY_CODE[error.code],
    )
    if error.retryable:
        response["Retry-After"] = str(RETRY_AFTER_SECONDS)
    return response


class EventView(APIView):
    """Handler for GET and PUT /api/event"""

    def get_permissions(self):
        if self.request.method == "PUT":
            return [IsEventAdmin()]
        return super().get_permissions()

    def get(self, request: Request) -> Response:
        data = cache.get(CURRENT_EVENT_KEY)
        if data is None:
            try:
                event = event_service().get_current_event()
            except DomainError as error:
                return _error_response(error)
            data = dict(EventSerializer(event).data)
            cache.set(CURRENT_EVENT_KEY, data)
        return Response(data)

    def put(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = event_service().update_event(**serializer.validated_data)
        except DomainError as error:
            return _error_response(error)
        return Response(EventSerializer(event).data)
