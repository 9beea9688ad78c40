"""
This configuration file overrides some necessary configs
to easily develop the app.
"""

from .base import *  # noqa

ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = ["127.0.0.1"]

STATIC_ROOT = "staticfiles"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "hrms-local",
    },
}
