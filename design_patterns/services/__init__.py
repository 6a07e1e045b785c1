"""
External payment services with incompatible APIs.
"""

from .formatting import format_amount
from .paypal import PayPal
from .stripe import Stripe

__all__ = ['PayPal', 'Stripe', 'format_amount']
