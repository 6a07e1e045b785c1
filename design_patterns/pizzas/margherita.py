"""
Margherita pizza implementation for the design patterns demo.
"""

from .base_pizza import BasePizza


class MargheritaPizza(BasePizza):
    """Margherita pizza."""

    name = "Margherita Pizza"
