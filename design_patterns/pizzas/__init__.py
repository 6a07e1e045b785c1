"""
Concrete pizzas produced by the pizza factories.
"""

from .base_pizza import BasePizza
from .margherita import MargheritaPizza
from .pepperoni import PepperoniPizza

__all__ = ['BasePizza', 'MargheritaPizza', 'PepperoniPizza']
