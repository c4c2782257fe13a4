"""
Serializers for payment operations.
Handles validation and formatting for payment requests and responses.
"""
from decimal import Decimal

from rest_framework import serializers

from .entities import MAX_DESCRIPTION_LENGTH


class CreatePaymentSerializer(serializers.Serializer):
    """
    Request body for setting up a payment.

    Amount is in major units as typed into the checkout form (5.54 = £5.54).
    """
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        help_text="Amount in major currency units, e.g. 5.54"
    )
    description = serializers.CharField(
        max_length=MAX_DESCRIPTION_LENGTH,
        trim_whitespace=True,
        help_text="What the customer is paying for"
    )

    def validate_description(self, value):
        """CharField would turn a number into text, only JSON strings are accepted."""
        if not isinstance(self.initial_data.get('description'), str):
            raise serializers.ValidationError("Description must be a string.")
        return value


class PaymentSerializer(serializers.Serializer):
    """
    Stored payment record as returned by the API.
    Mirrors ``Payment.output()``.
    """
    id = serializers.UUIDField()
    amount = serializers.IntegerField(help_text="Amount in minor units (pence for GBP)")
    currency = serializers.CharField()
    description = serializers.CharField()
    status = serializers.CharField()
    externalReference = serializers.CharField(
        required=False, help_text="Stripe payment intent ID")
    createdAt = serializers.DateTimeField()


class PaymentSetupSerializer(PaymentSerializer):
    """Payment record plus the client secret the checkout form confirms."""
    clientSecret = serializers.CharField()


class PaymentErrorSerializer(serializers.Serializer):
    """
    Serializer for payment error responses.
    Provides consistent error format across payment endpoints.
    """
    error = serializers.CharField(help_text="Error message")
    error_code = serializers.CharField(
        required=False,
        help_text="Machine-readable error code"
    )
    details = serializers.DictField(
        required=False,
        help_text="Additional error details"
    )

    def to_representation(self, instance):
        """
        Format error response.

        Args:
            instance: ServiceException
        """
        return {
            'error': instance.message,
            'error_code': instance.code,
            'details': instance.details
        }
