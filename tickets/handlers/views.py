"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admission.permissions import IsScannerStation
from events.domain.errors import DomainError as EventDomainError
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore
from tickets import codec
from tickets.domain import EventSnapshot
from tickets.domain.errors import DomainError, ErrorCode, TicketNotFoundError
from tickets.handlers.serializers import (
    CheckInResultSerializer,
    CheckInSerializer,
    RegistrationSerializer,
    TicketSerializer,
)
from tickets.services import CheckInService, IssuanceService
from tickets.stores.django_store import DjangoTicketStore

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 2

_STATUS_BY_CODE = {
    ErrorCode.INVALID_IDENTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

_CONTENT_TYPES = {
    "png": "image/png",
    "svg": "image/svg+xml",
}


def issuance_service() -> IssuanceService:
    return IssuanceService(DjangoTicketStore())


def checkin_service() -> CheckInService:
    return CheckInService(DjangoTicketStore())


def _current_snapshot() -> EventSnapshot:
    event = EventService(DjangoEventStore(), defaults=settings.DEFAULT_EVENT).get_current_event()
    return EventSnapshot(
        name=event.name,
        date=event.date,
        time=event.time,
        location=event.location,
    )


def _error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    field = getattr(error, "field", None)
    if field:
        body["field"] = field
    response = Response(body, status=_STATUS_BY_CODE[error.code])
    if error.retryable:
        response["Retry-After"] = str(RETRY_AFTER_SECONDS)
    return response


class TicketListView(APIView):
    """Handler for POST /api/tickets"""

    def post(self, request: Request) -> Response:
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            issuance = issuance_service().issue(event=_current_snapshot, **serializer.validated_data)
        except DomainError as error:
            return _error_response(error)
        except EventDomainError as error:
            logger.error("event settings unusable for issuance", extra={"code": error.code.value})
            response = Response(
                {"code": error.code.value, "message": "Registration is not open"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
            if error.retryable:
                response["Retry-After"] = str(RETRY_AFTER_SECONDS)
            return response
        return Response(
            {"id": issuance.ticket_id.value, "created": issuance.created},
            status=status.HTTP_201_CREATED if issuance.created else status.HTTP_200_OK,
        )


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        try:
            ticket = checkin_service().lookup(ticket_id)
            if ticket is None:
                raise TicketNotFoundError(ticket_id)
        except DomainError as error:
            return _error_response(error)
        return Response(TicketSerializer(ticket).data)


class TicketCodeView(APIView):
    """Handler for GET /api/tickets/{ticket_id}/code?kind=png|svg"""

    def get(self, request: Request, ticket_id: str) -> Response | HttpResponse:
        kind = request.query_params.get("kind", "png").lower()
        if kind not in _CONTENT_TYPES:
            return Response(
                {"code": "INVALID_KIND", "message": "kind must be png or svg"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            ticket = checkin_service().lookup(ticket_id)
            if ticket is None:
                raise TicketNotFoundError(ticket_id)
        except DomainError as error:
            return _error_response(error)

        code = codec.encode_for_display(ticket.id, **settings.TICKET_QR)
        content = code.to_svg() if kind == "svg" else code.to_png()
        response = HttpResponse(content, content_type=_CONTENT_TYPES[kind])
        response["Content-Disposition"] = f'inline; filename="{ticket.id.value}.{kind}"'
        return response


class CheckInView(APIView):
    """Handler for POST /api/check-ins"""

    permission_classes = [IsScannerStation]

    def post(self, request: Request) -> Response:
        serializer = CheckInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            ticket_id = codec.decode(serializer.validated_data["code"])
        except ValueError:
            ticket_id = None
        try:
            result = checkin_service().check_in(str(ticket_id) if ticket_id else "")
        except DomainError as error:
            logger.error("check-in failed", extra={"code": error.code.value})
            return _error_response(error)
        return Response(CheckInResultSerializer(result).data)
