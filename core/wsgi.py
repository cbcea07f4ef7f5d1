"""
WSGI config for the fund back-office service.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")
os.environ.setdefault("DJANGO_CONFIGURATION", "Production")

from configurations.wsgi import get_wsgi_application  # noqa: E402

from core.observability import init_sentry  # noqa: E402

application = get_wsgi_application()

init_sentry()
