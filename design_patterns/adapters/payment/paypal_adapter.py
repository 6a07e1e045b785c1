"""
PayPal adapter for the design patterns demo.

This module exposes the PayPal service through the PaymentProcessor interface.
"""

from numbers import Real

from ...services.paypal import PayPal
from ..base import BasePaymentAdapter


class PayPalAdapter(BasePaymentAdapter):
    """Adapter exposing ``PayPal.pay`` as ``process_payment``."""

    def __init__(self, paypal: PayPal):
        """
        Initialize the PayPal adapter.

        Args:
            paypal: The PayPal service to wrap.
        """
        super().__init__(paypal)

    @property
    def backend_name(self) -> str:
        return "PayPal"

    def _forward(self, amount: Real) -> None:
        self.service.pay(amount)
