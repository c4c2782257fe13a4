"""
Views for payment operations.
Handles payment setup, payment lookup and the checkout page.
"""
from django.conf import settings
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_GET
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiParameter
from drf_spectacular.types import OpenApiTypes as Types
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from . import actions
from .serializers import (
    CreatePaymentSerializer,
    PaymentErrorSerializer,
    PaymentSerializer,
    PaymentSetupSerializer
)


@extend_schema(
    summary="Set up a payment",
    description="""
    Create a Stripe payment intent and store the payment record.

    **Flow:**
    1. Validates amount (major units, > 0) and description
    2. Converts the amount to minor units (5.54 GBP -> 554)
    3. Creates the Stripe payment intent
    4. Stores the payment in DynamoDB
    5. Returns the record with the client secret for the checkout form

    Each call creates a new intent, identical requests are not deduplicated.
    """,
    request=CreatePaymentSerializer,
    responses={
        200: PaymentSetupSerializer,
        400: PaymentErrorSerializer,
        502: PaymentErrorSerializer,
        503: PaymentErrorSerializer,
    },
    examples=[
        OpenApiExample(
            'Order payment',
            value={'amount': 5.54, 'description': 'Order #1'},
            request_only=True
        ),
    ],
    tags=['Payments']
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_payment(request):
    """Set up a payment for the checkout form."""
    return actions.handle_action(request, actions.setup_payment)


@extend_schema(
    summary="Get a payment",
    parameters=[
        OpenApiParameter(
            name='payment_id',
            type=Types.STR,
            location=OpenApiParameter.PATH,
            description='Payment ID returned when the payment was set up'
        ),
    ],
    responses={
        200: PaymentSerializer,
        404: PaymentErrorSerializer,
        503: PaymentErrorSerializer,
    },
    tags=['Payments']
)
@api_view(['GET'])
@permission_classes([AllowAny])
def payment_detail(request, payment_id):
    """Return a stored payment record."""
    return actions.handle_action(
        request,
        actions.find_payment,
        requires_body=False,
        payment_id=payment_id
    )


@require_GET
def checkout_page(request):
    """Card checkout form confirmed client-side with Stripe.js."""
    return render(request, 'payments/checkout.html', {
        'stripe_publishable_key': settings.STRIPE_PUBLISHABLE_KEY,
        'currency': settings.PAYMENT_CURRENCY.upper(),
        'create_payment_url': reverse('payments:create-payment'),
    })
