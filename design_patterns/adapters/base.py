"""
Base adapter for integrating external payment services into the design patterns demo.

This module provides a base adapter that exposes an external payment service
through the PaymentProcessor interface.
"""

import logging
import math
from abc import abstractmethod
from decimal import Decimal
from numbers import Real
from typing import Any, Dict

from ..interfaces.payment import PaymentProcessor


class BasePaymentAdapter(PaymentProcessor):
    """
    Base adapter for integrating external payment services.

    The adapter owns exactly one service, bound at construction. It validates
    the amount and forwards it unchanged to the service; the service is never
    mutated and produces its own confirmation.
    """

    def __init__(self, service: Any):
        """
        Initialize the base adapter.

        Args:
            service: The external payment service to wrap.
        """
        self.logger = logging.getLogger(__name__)
        self._service = service

    @property
    def service(self) -> Any:
        return self._service

    def process_payment(self, amount: Real) -> None:
        """
        Process a payment through the wrapped service.

        Args:
            amount: Non-negative amount to pay.

        Raises:
            TypeError: If the amount is not a real number or ``Decimal``.
            ValueError: If the amount is negative, infinite or NaN.
        """
        self.validate_amount(amount)
        self.logger.debug(f"Forwarding payment of {amount} to {self.backend_name}")
        self._forward(amount)

    def validate_amount(self, amount: Any) -> None:
        """
        Validate a payment amount.

        Real numbers and ``Decimal`` are accepted; ``bool`` is not.

        Args:
            amount: The amount to validate.

        Raises:
            TypeError: If the amount is not a real number or ``Decimal``.
            ValueError: If the amount is negative, infinite or NaN.
        """
        if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
            self.logger.error(f"Rejected payment via {self.backend_name}: amount {amount!r} is not a number")
            raise TypeError(f"Payment amount must be a real number, got {type(amount).__name__}")
        finite = amount.is_finite() if isinstance(amount, Decimal) else math.isfinite(amount)
        if not finite or amount < 0:
            self.logger.error(f"Rejected payment via {self.backend_name}: invalid amount {amount}")
            raise ValueError(f"Payment amount must be finite and non-negative, got {amount}")

    @abstractmethod
    def _forward(self, amount: Real) -> None:
        """
        Forward a validated amount to the wrapped service.

        Args:
            amount: The amount to pay.
        """
        pass

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the adapter.

        Returns:
            Dictionary containing information about the adapter.
        """
        return {
            'type': self.__class__.__name__,
            'backend': self.backend_name,
            'service': self._service.__class__.__name__
        }
