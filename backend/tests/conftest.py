"""
Pytest configuration and fixtures for Checkout Service tests.
Stripe and DynamoDB are replaced with mocks; nothing leaves the process.
"""
import os
import sys
from itertools import count
from unittest.mock import MagicMock

import django
import factory
import pytest
from faker import Faker

# Add the backend directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure Django settings before any Django imports
os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'checkout_service.settings.test')
django.setup()

from rest_framework.test import APIClient  # noqa: E402

from apps.integrations.services.stripe_service import StripePaymentGateway  # noqa: E402
from apps.payments.entities import Payment  # noqa: E402
from apps.payments.repositories import DynamoPaymentRepository  # noqa: E402
from apps.payments.services import PaymentService  # noqa: E402

fake = Faker('en_GB')

_intent_numbers = count(1)


# ==================== Factory Classes ====================

class PaymentFactory(factory.Factory):
    """Factory for payment entities as they look after setup."""

    class Meta:
        model = Payment

    id = factory.Faker('uuid4')
    amount = factory.Faker('pyint', min_value=50, max_value=100000)
    currency = 'gbp'
    description = factory.LazyAttribute(lambda _: f"Order #{fake.numerify('####')}")
    status = 'requires_payment_method'
    external_reference = factory.Sequence(lambda n: f'pi_test_{n:08d}')
    created_at = factory.LazyFunction(lambda: fake.date_time_this_year().isoformat())


def make_stripe_intent(amount=554, currency='gbp', description='Order #1',
                       status='requires_payment_method'):
    """Stand-in for a stripe.PaymentIntent returned by the API."""
    number = next(_intent_numbers)
    intent = MagicMock()
    intent.id = f'pi_test_{number:06d}'
    intent.client_secret = f'pi_test_{number:06d}_secret_{fake.lexify("??????????")}'
    intent.amount = amount
    intent.currency = currency
    intent.description = description
    intent.status = status
    return intent


# ==================== Fixtures ====================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def dynamo_table():
    """Mocked boto3 Table; get_item finds nothing unless configured."""
    table = MagicMock()
    table.get_item.return_value = {}
    return table


@pytest.fixture
def dynamo_resource(dynamo_table):
    resource = MagicMock()
    resource.Table.return_value = dynamo_table
    return resource


@pytest.fixture
def payment_repository(dynamo_resource):
    return DynamoPaymentRepository(resource=dynamo_resource, table_prefix='test-')


@pytest.fixture
def stripe_gateway():
    return StripePaymentGateway(api_key='sk_test_checkout_service')


@pytest.fixture
def payment_service(stripe_gateway, payment_repository):
    return PaymentService(
        gateway=stripe_gateway,
        repository=payment_repository,
        currency='gbp'
    )


@pytest.fixture
def mock_gateway():
    gateway = MagicMock(spec=StripePaymentGateway)
    return gateway


@pytest.fixture
def mock_repository():
    return MagicMock(spec=DynamoPaymentRepository)


@pytest.fixture
def payment():
    return PaymentFactory()
