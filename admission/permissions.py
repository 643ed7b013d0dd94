"""Shared-key permissions for scanner stations and event administrators.

Clients send ``X-API-Key: <key>`` or ``Authorization: Bearer <key>``.
An empty key setting disables the check.
"""

import secrets

from django.conf import settings
from rest_framework.permissions import BasePermission
from rest_framework.request import Request


def _presented_key(request: Request) -> str | None:
    header = request.headers.get("X-API-Key")
    if header:
        return header.strip()
    authorization = request.headers.get("Authorization", "")
    if authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip()
    return None


class ApiKeyPermission(BasePermission):
    """Grants access when the request carries the key named by ``setting_name``."""

    setting_name: str = ""
    message = "Missing or invalid API key"

    def has_permission(self, request: Request, view) -> bool:
        expected = getattr(settings, self.setting_name, "")
        if not expected:
            return True
        presented = _presented_key(request)
        if not presented:
            return False
        return secrets.compare_digest(presented.encode(), expected.encode())


class IsScannerStation(ApiKeyPermission):
    setting_name = "SCANNER_API_KEY"


class IsEventAdmin(ApiKeyPermission):
    setting_name = "ADMIN_API_KEY"
