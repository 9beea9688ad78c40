"""
WSGI entry point of the HRMS backend.

Run under a WSGI server, e.g. ``gunicorn wsgi:application``. The settings
overlay is picked by the ``ENVIRONMENT`` variable (see ``settings/__init__.py``).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "settings")

application = get_wsgi_application()
