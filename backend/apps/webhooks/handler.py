"""
Webhook event handler.

Payment events reach the service through a queue. The handler records each
event as one structured log line and does nothing else: no acknowledgement,
no retries, no state changes. Anything that goes wrong propagates to the
invoking runtime (Lambda or the Celery worker).
"""
import logging
import os
import time
from typing import Any, Dict, Mapping

logger = logging.getLogger('checkout_service.webhooks')

# Attributes copied from a Celery task request
TASK_CONTEXT_FIELDS = ('id', 'task', 'retries', 'hostname', 'delivery_info')


def serialize_context(context: Any) -> Dict[str, Any]:
    """
    JSON-friendly view of the invocation context.

    Handles AWS Lambda context objects, Celery task requests and plain
    mappings.
    """
    if context is None:
        return {}
    if isinstance(context, Mapping):
        return dict(context)

    if hasattr(context, 'get_remaining_time_in_millis'):
        remaining_ms = context.get_remaining_time_in_millis()
        return {
            'awsRequestId': getattr(context, 'aws_request_id', None),
            'functionName': getattr(context, 'function_name', None),
            'invokedFunctionArn': getattr(context, 'invoked_function_arn', None),
            'memoryLimitInMB': getattr(context, 'memory_limit_in_mb', None),
            'logStreamName': getattr(context, 'log_stream_name', None),
            'deadlineMs': int(time.time() * 1000) + remaining_ms,
            # The Python runtime exposes the X-Ray trace id only through the environment
            'traceId': os.environ.get('_X_AMZN_TRACE_ID'),
        }

    return {
        name: getattr(context, name)
        for name in TASK_CONTEXT_FIELDS
        if getattr(context, name, None) is not None
    }


def handle(event: Any, context: Any = None) -> None:
    """Log one webhook event with its invocation context."""
    logger.debug('Received webhook from queue', extra={
        '_webhook': event,
        '_lambda': serialize_context(context),
    })
