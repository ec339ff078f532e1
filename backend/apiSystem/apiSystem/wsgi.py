"""
WSGI config for apiSystem project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apiSystem.settings")

application = get_wsgi_application()
