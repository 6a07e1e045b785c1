"""
PayPal payment service.

This module simulates an external payment service with its own API; it is
integrated into the demo through ``PayPalAdapter``.
"""

import logging
from numbers import Real

from .formatting import format_amount


class PayPal:
    """PayPal payment service."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def pay(self, amount: Real) -> None:
        """
        Pay an amount via PayPal.

        Args:
            amount: The amount to pay.
        """
        self.logger.info(f"Paid ${format_amount(amount)} via PayPal")
