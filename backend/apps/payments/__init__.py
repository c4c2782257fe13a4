"""
Payments app for creating Stripe payment intents.
Provides the REST endpoints behind the checkout form and the payment record store.
"""
