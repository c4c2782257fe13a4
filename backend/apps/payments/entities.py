"""
Payment entity and amount normalization.

Amounts arrive from the checkout form in major units (e.g. 5.54 GBP) and are
stored and sent to Stripe in minor units (554).
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from apps.core.persistence.dynamo import DynamoItem
from apps.core.services.base import ValidationError

# Currencies Stripe charges in whole units
# https://stripe.com/docs/currencies#zero-decimal
ZERO_DECIMAL_CURRENCIES = frozenset({
    'bif', 'clp', 'djf', 'gnf', 'jpy', 'kmf', 'krw', 'mga',
    'pyg', 'rwf', 'ugx', 'vnd', 'vuv', 'xaf', 'xof', 'xpf',
})

MAX_DESCRIPTION_LENGTH = 1000


class PaymentStatus:
    CREATED = 'created'


def currency_exponent(currency: str) -> int:
    return 0 if currency.lower() in ZERO_DECIMAL_CURRENCIES else 2


def to_minor_units(amount: Any, currency: str) -> int:
    """
    Convert a major-unit amount to the currency's minor units.

    Raises:
        ValidationError: amount is not a number or is more precise than
            the currency allows
    """
    if amount is None or isinstance(amount, bool):
        raise ValidationError(
            "A numeric amount is required", details={'amount': amount})
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError(
            "A numeric amount is required", details={'amount': str(amount)})
    if not value.is_finite():
        raise ValidationError(
            "A numeric amount is required", details={'amount': str(amount)})

    minor = value.scaleb(currency_exponent(currency))
    if minor != minor.to_integral_value():
        raise ValidationError(
            f"Amount has more decimal places than {currency.upper()} allows",
            details={'amount': str(amount), 'currency': currency}
        )
    return int(minor)


@dataclass(frozen=True)
class Payment(DynamoItem):
    """A single payment record. Written once, never updated."""

    id: str
    amount: int
    currency: str
    description: str
    status: str = PaymentStatus.CREATED
    external_reference: Optional[str] = None
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def create(cls, amount: Any, description: Any, currency: str) -> 'Payment':
        """
        Build a new payment with a freshly generated id.

        Args:
            amount: Amount in minor units, must be a positive integer
            description: Free-text description shown on the Stripe dashboard
            currency: The deployment's currency code

        Raises:
            ValidationError: amount or description is missing or invalid
        """
        if amount is None:
            raise ValidationError("Amount is required")
        if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
            raise ValidationError(
                "Amount must be a number", details={'amount': repr(amount)})
        value = Decimal(str(amount))
        if not value.is_finite() or value != value.to_integral_value():
            raise ValidationError(
                "Amount must be a whole number of minor units",
                details={'amount': str(amount)}
            )
        if value <= 0:
            raise ValidationError(
                "Amount must be greater than zero",
                details={'amount': str(amount)}
            )

        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Description is required")
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters")

        if not currency:
            raise ValidationError("Currency is not configured")

        return cls(
            id=str(uuid.uuid4()),
            amount=int(value),
            currency=currency.lower(),
            description=description,
        )

    def with_intent(self, intent_id: str, status: str) -> 'Payment':
        """Copy of this payment linked to a gateway payment intent."""
        return replace(self, external_reference=intent_id, status=status)

    # DynamoItem

    @classmethod
    def table_name(cls) -> str:
        return 'payments'

    @classmethod
    def hash_name(cls) -> str:
        return 'id'

    @classmethod
    def hydrate(cls, item: Dict[str, Any]) -> 'Payment':
        return cls(
            id=item['id'],
            amount=int(item['amount']),
            currency=item['currency'],
            description=item['description'],
            status=item.get('status', PaymentStatus.CREATED),
            external_reference=item.get('externalReference'),
            created_at=item['createdAt'],
        )

    def output(self) -> Dict[str, Any]:
        item = {
            'id': self.id,
            'amount': self.amount,
            'currency': self.currency,
            'description': self.description,
            'status': self.status,
            'createdAt': self.created_at,
        }
        if self.external_reference is not None:
            item['externalReference'] = self.external_reference
        return item
