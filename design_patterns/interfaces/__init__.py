"""
Interfaces for the design patterns demo.

This package defines the abstract capabilities each pattern is built around.
"""

from .base import Component
from .iterator import BookCollection, Iterator
from .payment import PaymentProcessor
from .pizza import Pizza, PizzaFactory

__all__ = [
    'Component',
    'Pizza', 'PizzaFactory',
    'PaymentProcessor',
    'Iterator', 'BookCollection',
]
