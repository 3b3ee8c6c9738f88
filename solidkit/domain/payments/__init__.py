"""Payments domain - Liskov Substitution lesson."""

from .payment_method import (
    CreditCardMethod,
    CreditCardPayment,
    PaymentMethod,
    PaymentSource,
    RewardsMethod,
    RewardsPayment,
    to_amount,
)
from .payment_processor import PaymentProcessor

__all__ = [
    "PaymentMethod",
    "CreditCardMethod",
    "RewardsMethod",
    "PaymentSource",
    "CreditCardPayment",
    "RewardsPayment",
    "PaymentProcessor",
    "to_amount",
]
