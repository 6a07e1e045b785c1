"""
Core of the Factory pattern demo.
"""

from .factory import (
    BasePizzaFactory,
    MargheritaPizzaFactory,
    PepperoniPizzaFactory,
    PizzaFactoryRegistry,
    order_pizza,
)

__all__ = [
    'BasePizzaFactory',
    'MargheritaPizzaFactory',
    'PepperoniPizzaFactory',
    'PizzaFactoryRegistry',
    'order_pizza',
]
