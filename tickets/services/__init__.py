from tickets.services.checkin_service import CheckInService
from tickets.services.issuance_service import IssuanceService

__all__ = ["IssuanceService", "CheckInService"]
