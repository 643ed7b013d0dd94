"""WSGI entry point for the admission service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "admission.settings")

application = get_wsgi_application()
