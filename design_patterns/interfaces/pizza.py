"""
Pizza interfaces for the design patterns demo.

This module defines the product and creator interfaces of the Factory pattern.
"""

from abc import abstractmethod

from .base import Component


class Pizza(Component):
    """Interface for pizzas that go through the prepare, bake, cut, box lifecycle."""

    @abstractmethod
    def prepare(self) -> None:
        """Prepare the pizza."""
        pass

    @abstractmethod
    def bake(self) -> None:
        """Bake the pizza."""
        pass

    @abstractmethod
    def cut(self) -> None:
        """Cut the pizza."""
        pass

    @abstractmethod
    def box(self) -> None:
        """Box the pizza."""
        pass


class PizzaFactory(Component):
    """Interface for creators that produce one fixed kind of pizza."""

    @property
    @abstractmethod
    def pizza_name(self) -> str:
        """
        Get the display name of the pizza this factory produces.

        Returns:
            Display name, e.g. "Margherita Pizza".
        """
        pass

    @abstractmethod
    def create_pizza(self) -> Pizza:
        """
        Create a new pizza.

        Returns:
            A new pizza instance; never shared between calls.
        """
        pass
