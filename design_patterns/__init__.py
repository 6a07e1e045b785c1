"""
Design patterns demo package.

This package demonstrates the Factory, Adapter and Iterator patterns with pizza
factories, payment service adapters and a book library cursor.
"""

from .adapters import PayPalAdapter, StripeAdapter, purchase
from .core import MargheritaPizzaFactory, PepperoniPizzaFactory, PizzaFactoryRegistry, order_pizza
from .library import Book, BookIterator, Library, print_books
from .services import PayPal, Stripe

__all__ = [
    'MargheritaPizzaFactory', 'PepperoniPizzaFactory', 'PizzaFactoryRegistry', 'order_pizza',
    'PayPal', 'Stripe', 'PayPalAdapter', 'StripeAdapter', 'purchase',
    'Book', 'BookIterator', 'Library', 'print_books',
]
