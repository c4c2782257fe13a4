"""
Payment persistence.
"""
from abc import ABC, abstractmethod

from apps.core.persistence.dynamo import DynamoRepository
from apps.core.services.base import NotFoundError

from .entities import Payment


class PaymentNotFound(NotFoundError):
    """Raised when no payment record exists for an id."""
    default_code = 'PAYMENT_NOT_FOUND'


class PaymentRepository(ABC):
    """Storage for payment records. Records are written once and never updated."""

    @abstractmethod
    def put_payment(self, payment: Payment) -> None:
        """
        Persist a payment.

        Raises:
            StorageError: the store could not be written
        """

    @abstractmethod
    def find_payment(self, payment_id: str) -> Payment:
        """
        Look up a payment by id.

        Raises:
            PaymentNotFound: no record exists for payment_id
            StorageError: the store could not be read
        """


class DynamoPaymentRepository(DynamoRepository, PaymentRepository):
    """Payments stored one item per payment, keyed by payment id."""

    def put_payment(self, payment: Payment) -> None:
        self.put(payment)
        self.log_debug(
            "Stored payment",
            payment_id=payment.id,
            payment_intent_id=payment.external_reference
        )

    def find_payment(self, payment_id: str) -> Payment:
        payment = self.get(Payment, payment_id)
        if payment is None:
            raise PaymentNotFound(
                f"Payment {payment_id} not found",
                details={'payment_id': payment_id}
            )
        return payment
