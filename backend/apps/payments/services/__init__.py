from .payment_service import PaymentService, PaymentSetup, build_payment_service

__all__ = ['PaymentService', 'PaymentSetup', 'build_payment_service']
