"""
Pepperoni pizza implementation for the design patterns demo.
"""

from .base_pizza import BasePizza


class PepperoniPizza(BasePizza):
    """Pepperoni pizza."""

    name = "Pepperoni Pizza"
