"""
Stripe adapter for the design patterns demo.

This module exposes the Stripe service through the PaymentProcessor interface.
"""

from numbers import Real

from ...services.stripe import Stripe
from ..base import BasePaymentAdapter


class StripeAdapter(BasePaymentAdapter):
    """Adapter exposing ``Stripe.make_payment`` as ``process_payment``."""

    def __init__(self, stripe: Stripe):
        """
        Initialize the Stripe adapter.

        Args:
            stripe: The Stripe service to wrap.
        """
        super().__init__(stripe)

    @property
    def backend_name(self) -> str:
        return "Stripe"

    def _forward(self, amount: Real) -> None:
        self.service.make_payment(amount)
