# checkout_service/celery.py
import os
from celery import Celery

# Set default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'checkout_service.settings.development')

# Create Celery application
app = Celery('checkout_service')

# Load configuration from Django settings with CELERY namespace
app.config_from_object('django.conf:settings', namespace='CELERY')

# ============================================================================
# BROKER CONNECTION SETTINGS
# ============================================================================
app.conf.broker_connection_retry = True
app.conf.broker_connection_retry_on_startup = True

# ============================================================================
# TASK CONFIGURATION
# ============================================================================
app.conf.task_serializer = 'json'
app.conf.accept_content = ['json']
app.conf.timezone = 'UTC'
app.conf.enable_utc = True

# Webhook events are logged and dropped, results are never read
app.conf.task_ignore_result = True

# Task execution settings
app.conf.task_time_limit = 5 * 60  # 5 minutes hard limit
app.conf.task_soft_time_limit = 4 * 60  # 4 minutes soft limit

# ============================================================================
# AUTODISCOVER TASKS
# ============================================================================
app.autodiscover_tasks()
