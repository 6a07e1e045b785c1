"""
Stripe payment service.

This module simulates an external payment service with its own API; it is
integrated into the demo through ``StripeAdapter``.
"""

import logging
from numbers import Real

from .formatting import format_amount


class Stripe:
    """Stripe payment service."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def make_payment(self, amount: Real) -> None:
        """
        Make a payment via Stripe.

        Args:
            amount: The amount to pay.
        """
        self.logger.info(f"Paid ${format_amount(amount)} via Stripe")
