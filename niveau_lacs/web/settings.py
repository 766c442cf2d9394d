# niveau_lacs/web/settings.py
from __future__ import annotations

import os

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "niveau-lacs-insecure-dev-key")

DEBUG = os.getenv("DJANGO_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}

ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if h.strip()]

# The trigger needs no apps, sessions or database
INSTALLED_APPS: list[str] = []
MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]
DATABASES: dict = {}

ROOT_URLCONF = "niveau_lacs.web.urls"
WSGI_APPLICATION = "niveau_lacs.web.wsgi.application"

USE_TZ = True
TIME_ZONE = "Europe/Zurich"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    },
    "loggers": {
        "niveau_lacs": {"handlers": ["console"], "level": "INFO"},
    },
}
