"""
Base pizza implementation for the design patterns demo.

This module provides a base implementation of a pizza for the Factory pattern.
"""

import logging
from abc import abstractmethod
from typing import Any, Dict

from ..interfaces.pizza import Pizza


class BasePizza(Pizza):
    """
    Base implementation of a pizza for the design patterns demo.

    This class implements every lifecycle stage by logging a status line that
    names the stage and the pizza. Concrete pizzas only set ``name``; the base
    class itself is abstract.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the pizza, e.g. "Margherita Pizza"."""
        pass

    def __init__(self):
        """Initialize the base pizza."""
        self.logger = logging.getLogger(__name__)

    def prepare(self) -> None:
        self.logger.info(f"Preparing {self.name}")

    def bake(self) -> None:
        self.logger.info(f"Baking {self.name}")

    def cut(self) -> None:
        self.logger.info(f"Cutting {self.name}")

    def box(self) -> None:
        self.logger.info(f"Boxing {self.name}")

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the pizza.

        Returns:
            Dictionary containing information about the pizza.
        """
        return {
            'type': self.__class__.__name__,
            'name': self.name
        }
