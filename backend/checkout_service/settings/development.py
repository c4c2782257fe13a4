"""
Development settings - used for local development.
"""
from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True
DEBUG_PROPAGATE_EXCEPTIONS = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '.localhost']

# Local DynamoDB (docker run amazon/dynamodb-local) unless overridden
DYNAMODB_ENDPOINT_URL = os.getenv(
    'DYNAMODB_ENDPOINT_URL', 'http://localhost:8001')

# CORS settings for local development
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",  # Vite default
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'content-type',
    'origin',
    'user-agent',
    'x-requested-with',
]
