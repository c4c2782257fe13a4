"""
Main API URL configuration for Checkout Service.
"""
from django.urls import path, include

urlpatterns = [
    path('payments/', include('apps.payments.urls')),
]
