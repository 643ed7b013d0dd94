"""Django settings for the admission service.

Every deployment knob is read from the environment. A local ``.env`` file is
loaded once at import time.
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(find_dotenv(usecwd=True) or (BASE_DIR / ".env"))


def _clean(value: str | None, default: str | None = None) -> str | None:
    if value is None:
        return default
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1].strip()
    return value


def _env(name: str, default: str = "") -> str:
    return _clean(os.getenv(name), default) or default


def _env_bool(name: str, default: bool = False) -> bool:
    value = _clean(os.getenv(name))
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = _clean(os.getenv(name))
    try:
        return int(value) if value else default
    except ValueError:
        return default


SECRET_KEY = _env("DJANGO_SECRET_KEY", "django-insecure-local-development-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in _env("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "events.apps.EventsConfig",
    "tickets.apps.TicketsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "admission.urls"
WSGI_APPLICATION = "admission.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# ----- Database -----
# PostgreSQL when DB_HOST is configured, SQLite for local development.
DB_HOST = _env("DB_HOST")
if DB_HOST:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": DB_HOST,
            "PORT": _env_int("DB_PORT", 5432),
            "NAME": _env("DB_NAME", "admission"),
            "USER": _env("DB_USER", "admission"),
            "PASSWORD": _env("DB_PASSWORD"),
            "CONN_MAX_AGE": _env_int("DB_CONN_MAX_AGE", 60),
            "CONN_HEALTH_CHECKS": True,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "TIMEOUT": _env_int("CACHE_TIMEOUT", 300),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# ----- Station / admin keys -----
# Empty disables the check (local development only).
SCANNER_API_KEY = _env("SCANNER_API_KEY")
ADMIN_API_KEY = _env("ADMIN_API_KEY")

# ----- Event defaults -----
# Persisted the first time the current event is requested and none exists.
DEFAULT_EVENT = {
    "name": _env("EVENT_NAME", "Tech Conference 2025"),
    "date": _env("EVENT_DATE", "2025-03-15"),
    "time": _env("EVENT_TIME", "9:00 AM"),
    "location": _env("EVENT_LOCATION", "City Convention Center"),
    "description": _env("EVENT_DESCRIPTION", "A conference about the latest trends in technology"),
}

# ----- QR rendering -----
TICKET_QR = {
    "error_correction": _env("TICKET_QR_ERROR_CORRECTION", "M"),
    "box_size": _env_int("TICKET_QR_BOX_SIZE", 10),
    "border": _env_int("TICKET_QR_BORDER", 4),
}

# ----- Logging -----
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(levelname)s %(name)s %(message)s %(asctime)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "events": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "tickets": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
