"""
Test settings - no external services, Stripe and DynamoDB are mocked.
"""
import os

# base refuses to load without a secret key
os.environ.setdefault(
    'SECRET_KEY', 'test-secret-key-only-for-testing-do-not-use-in-production')

from .base import *  # noqa: E402

SECRET_KEY = 'test-secret-key-only-for-testing-do-not-use-in-production'

DEBUG = True
DEBUG_PROPAGATE_EXCEPTIONS = False

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

STRIPE_SECRET_KEY = 'sk_test_checkout_service'
STRIPE_PUBLISHABLE_KEY = 'pk_test_checkout_service'
PAYMENT_CURRENCY = 'gbp'

AWS_REGION = 'eu-west-2'
DYNAMODB_ENDPOINT_URL = None
DYNAMODB_TABLE_PREFIX = 'test-'

# Celery (synchronous for tests)
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_CLASSES': [],
}

# Logging (propagate to root so caplog sees every record)
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',  # Only warnings and errors
        },
        'checkout_service.webhooks': {
            'level': 'DEBUG',
            'propagate': True,
        },
    },
}
