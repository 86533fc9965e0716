"""
WSGI config for INMOBILIARIA project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "INMOBILIARIA.settings")

application = get_wsgi_application()
