"""
Stripe payment gateway.
Creates payment intents whose client secret the checkout form confirms.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

import stripe

from apps.core.services.base import BaseService, GatewayError


@dataclass(frozen=True)
class PaymentIntent:
    """The parts of a Stripe PaymentIntent this service uses."""
    id: str
    client_secret: str
    amount: int
    currency: str
    description: str
    status: str


class PaymentGateway(ABC):

    @abstractmethod
    def create_payment_intent(self, amount: int, currency: str, description: str,
                              metadata: Optional[Dict[str, str]] = None) -> PaymentIntent:
        ...


class StripePaymentGateway(BaseService, PaymentGateway):
    """
    Thin wrapper around ``stripe.PaymentIntent.create``.

    The secret key is held by the instance and sent with each request, the
    module-level ``stripe.api_key`` is never touched. Every call creates a new
    intent: no idempotency key, no retries.

    Stripe PaymentIntents: https://stripe.com/docs/api/payment_intents
    """

    # The checkout form collects cards through Stripe's card element
    PAYMENT_METHOD_TYPES = ['card']

    def __init__(self, api_key: str):
        super().__init__()
        self.api_key = api_key

    def create_payment_intent(self, amount: int, currency: str, description: str,
                              metadata: Optional[Dict[str, str]] = None) -> PaymentIntent:
        """
        Create a payment intent.

        Args:
            amount: Amount in the currency's minor units (pence for GBP)
            currency: ISO currency code
            description: Shown on the Stripe dashboard and receipts
            metadata: Optional key/value pairs stored on the intent

        Returns:
            PaymentIntent carrying the client secret

        Raises:
            GatewayError: Stripe rejected the request or could not be reached
        """
        if not self.api_key:
            raise GatewayError(
                "Stripe secret key is not configured",
                code='GATEWAY_NOT_CONFIGURED',
                status_code=500
            )

        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=amount,
                currency=currency.lower(),
                description=description,
                payment_method_types=self.PAYMENT_METHOD_TYPES,
                metadata=metadata or {},
            )
        except (stripe.CardError, stripe.InvalidRequestError) as e:
            self.log_warning(
                "Stripe rejected payment intent",
                amount=amount,
                currency=currency,
                stripe_code=getattr(e, 'code', None),
                error=str(e)
            )
            raise GatewayError(
                e.user_message or str(e),
                code='GATEWAY_REJECTED',
                details={'type': type(e).__name__,
                         'stripe_code': getattr(e, 'code', None)},
                status_code=400
            ) from e
        except stripe.StripeError as e:
            self.log_error(
                "Stripe error creating payment intent",
                exception=e,
                amount=amount,
                currency=currency
            )
            raise GatewayError(
                "Payment provider is unavailable",
                code='GATEWAY_ERROR',
                details={'type': type(e).__name__}
            ) from e

        self.log_info(
            "Created payment intent",
            payment_intent_id=intent.id,
            amount=intent.amount,
            currency=intent.currency
        )

        return PaymentIntent(
            id=intent.id,
            client_secret=intent.client_secret,
            amount=intent.amount,
            currency=intent.currency,
            description=intent.description,
            status=intent.status,
        )
