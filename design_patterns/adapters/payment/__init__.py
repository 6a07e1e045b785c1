"""
Adapters for the external payment services.
"""

from .paypal_adapter import PayPalAdapter
from .stripe_adapter import StripeAdapter

__all__ = ['PayPalAdapter', 'StripeAdapter']
