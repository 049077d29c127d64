"""
Celery Configuration for Inkpost
"""

import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "inkpost.settings")

app = Celery("inkpost")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
