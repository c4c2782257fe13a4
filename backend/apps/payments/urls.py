"""
URL configuration for payment endpoints.
"""
from django.urls import path

from .views import create_payment, payment_detail

app_name = 'payments'

urlpatterns = [
    path(
        '',
        create_payment,
        name='create-payment'
    ),
    path(
        '<str:payment_id>/',
        payment_detail,
        name='payment-detail'
    ),
]
