"""
Production settings - used for deployment.
"""
import logging
from .base import *

logger = logging.getLogger(__name__)

# Security - DEBUG defaults to False, can be enabled via environment variable if needed
DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'

# Parse ALLOWED_HOSTS from environment variable
# Format: comma-separated list of allowed hosts (e.g., "pay.example.com,api.example.com")
_allowed_hosts = os.environ.get('ALLOWED_HOSTS', '')
ALLOWED_HOSTS = [host.strip()
                 for host in _allowed_hosts.split(',') if host.strip()]
if not ALLOWED_HOSTS:
    logger.warning(
        "ALLOWED_HOSTS environment variable not set! "
        "Every request will be rejected with 400."
    )

SECURE_SSL_REDIRECT = False
APPEND_SLASH = False
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# Parse CORS_ALLOWED_ORIGINS from environment variable
_cors_origins = os.environ.get('CORS_ALLOWED_ORIGINS', '')
CORS_ALLOWED_ORIGINS = [origin.strip()
                        for origin in _cors_origins.split(',') if origin.strip()]
if not CORS_ALLOWED_ORIGINS:
    logger.warning(
        "CORS_ALLOWED_ORIGINS environment variable not set! "
        "All cross-origin requests will be blocked."
    )

if not STRIPE_SECRET_KEY:
    logger.warning(
        "STRIPE_SECRET_KEY not set. Payment intent creation will fail.")

# WhiteNoise for serving static files
MIDDLEWARE.insert(1, 'whitenoise.middleware.WhiteNoiseMiddleware')
STORAGES = {
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Sentry for error tracking
if os.environ.get('SENTRY_DSN'):
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    from sentry_sdk.integrations.celery import CeleryIntegration

    sentry_sdk.init(
        dsn=os.environ.get('SENTRY_DSN'),
        integrations=[DjangoIntegration(), CeleryIntegration()],
        environment=APP_ENV,
        traces_sample_rate=0.1,
        send_default_pii=False
    )
