"""
WSGI config for Inkpost.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "inkpost.settings")

application = get_wsgi_application()
