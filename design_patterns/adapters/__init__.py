"""
Adapters exposing external payment services through one payment interface.
"""

from .base import BasePaymentAdapter
from .payment import PayPalAdapter, StripeAdapter
from .purchase import purchase

__all__ = ['BasePaymentAdapter', 'PayPalAdapter', 'StripeAdapter', 'purchase']
