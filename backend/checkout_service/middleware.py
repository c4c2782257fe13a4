"""
Request logging middleware.
"""
import logging
import time

from django.conf import settings

logger = logging.getLogger('checkout_service.requests')


class RequestLoggingMiddleware:
    """
    Logs method, path, status and duration of every request
    when REQUEST_LOGGING_ENABLED is set.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not getattr(settings, 'REQUEST_LOGGING_ENABLED', False):
            return self.get_response(request)

        start_time = time.monotonic()
        try:
            response = self.get_response(request)
        except Exception:
            logger.exception(
                f"Unhandled error: {request.method} {request.path}",
                extra={'method': request.method, 'path': request.path}
            )
            raise

        duration_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"{request.method} {request.path} {response.status_code}",
            extra={
                'method': request.method,
                'path': request.path,
                'status_code': response.status_code,
                'duration_ms': duration_ms,
            }
        )
        return response
