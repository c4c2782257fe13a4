"""
Payment setup service.
Validates the amount, creates the Stripe intent and stores the payment record.
"""
from dataclasses import dataclass
from typing import Any

from django.conf import settings

from apps.core.services.base import BaseService, StorageError
from apps.integrations.services.stripe_service import PaymentGateway, StripePaymentGateway

from ..entities import Payment, to_minor_units
from ..repositories import DynamoPaymentRepository, PaymentRepository


@dataclass(frozen=True)
class PaymentSetup:
    payment: Payment
    client_secret: str


class PaymentService(BaseService):
    """
    Runs the payment setup flow: validate, call the gateway, persist.

    The gateway call and the write are sequential with no transaction spanning
    them. If the write fails the intent already exists at Stripe; it is logged
    and left alone.
    """

    def __init__(self, gateway: PaymentGateway, repository: PaymentRepository,
                 currency: str):
        super().__init__()
        self.gateway = gateway
        self.repository = repository
        self.currency = currency.lower()

    def setup_payment(self, amount: Any, description: str) -> PaymentSetup:
        """
        Create a payment intent and record it.

        Args:
            amount: Amount in major units (e.g. Decimal('5.54') for 5.54 GBP)
            description: Free-text description of the purchase

        Returns:
            PaymentSetup with the stored payment and the intent's client secret

        Raises:
            ValidationError: amount or description is invalid
            GatewayError: Stripe failed or rejected the intent
            StorageError: the payment record could not be written
        """
        payment = Payment.create(
            to_minor_units(amount, self.currency), description, self.currency)

        intent = self.gateway.create_payment_intent(
            payment.amount,
            payment.currency,
            payment.description,
            metadata={'payment_id': payment.id}
        )
        payment = payment.with_intent(intent.id, intent.status)

        try:
            self.repository.put_payment(payment)
        except StorageError as e:
            self.log_error(
                "Payment intent created but payment record not stored",
                exception=e,
                payment_id=payment.id,
                payment_intent_id=intent.id
            )
            raise

        self.log_info(
            "Payment set up",
            payment_id=payment.id,
            payment_intent_id=intent.id,
            amount=payment.amount,
            currency=payment.currency
        )
        return PaymentSetup(payment=payment, client_secret=intent.client_secret)

    def find_payment(self, payment_id: str) -> Payment:
        return self.repository.find_payment(payment_id)


def build_payment_service() -> PaymentService:
    """Wire the service from Django settings."""
    return PaymentService(
        gateway=StripePaymentGateway(api_key=settings.STRIPE_SECRET_KEY),
        repository=DynamoPaymentRepository(),
        currency=settings.PAYMENT_CURRENCY,
    )
