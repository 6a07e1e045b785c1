"""
Payment interfaces for the design patterns demo.

This module defines the common payment capability that adapters expose over
incompatible payment services.
"""

from abc import abstractmethod
from numbers import Real

from .base import Component


class PaymentProcessor(Component):
    """Interface for components that can process a payment."""

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """
        Get the name of the backend that settles payments.

        Returns:
            Backend name, e.g. "PayPal".
        """
        pass

    @abstractmethod
    def process_payment(self, amount: Real) -> None:
        """
        Process a payment.

        Args:
            amount: Non-negative amount to pay.

        Raises:
            TypeError: If the amount is not a real number or ``Decimal``.
            ValueError: If the amount is negative, infinite or NaN.
        """
        pass
