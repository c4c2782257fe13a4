"""
Request handling for payment endpoints.

``handle_action`` owns the plumbing every endpoint shares: decoding the JSON
body, turning service exceptions into error responses and rendering the
success payload. Each endpoint supplies one callable with its business logic.
"""
import json
import logging
from typing import Any, Callable, Dict

from rest_framework import status
from rest_framework.response import Response

from apps.core.services.base import ServiceException, ValidationError

from .serializers import CreatePaymentSerializer, PaymentErrorSerializer
from .services import build_payment_service

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Please submit a JSON-encoded request body"

Action = Callable[..., Dict[str, Any]]


def parse_json_body(request) -> Dict[str, Any]:
    """
    Decode the request body as a non-empty JSON object.

    Raises:
        ValidationError: body is empty, not JSON, or not an object with fields
    """
    raw = request.body
    if not raw or not raw.strip():
        raise ValidationError(INVALID_BODY_MESSAGE, code='INVALID_BODY')
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        raise ValidationError(INVALID_BODY_MESSAGE, code='INVALID_BODY')
    if not isinstance(data, dict) or not data:
        raise ValidationError(INVALID_BODY_MESSAGE, code='INVALID_BODY')
    return data


def error_response(exc: ServiceException) -> Response:
    return Response(
        PaymentErrorSerializer(exc).data,
        status=exc.status_code
    )


def handle_action(request, action: Action, *, requires_body: bool = True,
                  success_status: int = status.HTTP_200_OK, **kwargs) -> Response:
    """
    Run one payment action and produce exactly one response.

    Args:
        request: The DRF request
        action: Business logic; receives the decoded body (when
            ``requires_body``) followed by ``kwargs`` and returns the
            response payload
        requires_body: Decode and require a JSON object body
        success_status: Status code for a successful response

    Returns:
        Response with the action's payload, or an error body
        ``{"error", "error_code", "details"}`` with the exception's status
    """
    try:
        if requires_body:
            payload = action(parse_json_body(request), **kwargs)
        else:
            payload = action(**kwargs)
    except ServiceException as e:
        log = logger.warning if e.status_code < 500 else logger.error
        log(
            f"{request.method} {request.path} failed: {e.message}",
            extra={'error_code': e.code, 'status_code': e.status_code}
        )
        return error_response(e)

    return Response(payload, status=success_status)


def setup_payment(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the body, create the intent, store the payment."""
    serializer = CreatePaymentSerializer(data=data)
    if not serializer.is_valid():
        raise ValidationError(
            _first_error(serializer.errors),
            details=serializer.errors
        )

    result = build_payment_service().setup_payment(
        serializer.validated_data['amount'],
        serializer.validated_data['description']
    )
    return {
        **result.payment.output(),
        'clientSecret': result.client_secret,
    }


def find_payment(payment_id: str) -> Dict[str, Any]:
    return build_payment_service().find_payment(payment_id).output()


def _first_error(errors: Dict[str, Any]) -> str:
    """Flatten serializer errors into one readable message."""
    for field, messages in errors.items():
        message = messages[0] if isinstance(messages, list) and messages else messages
        return f"{field}: {message}"
    return "Invalid request"
