"""
AWS Lambda entry point for webhook events.

Configure the function handler as ``apps.webhooks.lambda_function.lambda_handler``
with the queue as its event source.
"""
import os

import django
from django.apps import apps

os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'checkout_service.settings.production')

# Logging is configured by Django setup, do it once per container
if not apps.ready:
    django.setup()

from .handler import handle  # noqa: E402


def lambda_handler(event, context):
    handle(event, context)
