"""
Factories for creating pizzas in the design patterns demo.

This module provides the concrete pizza creators, a registry that looks them up
by name, and the ``order_pizza`` driver that runs a pizza through its lifecycle.
"""

import logging
from abc import abstractmethod
from typing import Any, Dict, List, Type

from ..interfaces.pizza import Pizza, PizzaFactory
from ..pizzas.base_pizza import BasePizza
from ..pizzas.margherita import MargheritaPizza
from ..pizzas.pepperoni import PepperoniPizza

logger = logging.getLogger(__name__)


class BasePizzaFactory(PizzaFactory):
    """
    Base implementation of a pizza factory.

    Concrete factories bind ``pizza_class`` to the one pizza they produce;
    the base class itself is abstract.
    """

    @property
    @abstractmethod
    def pizza_class(self) -> Type[BasePizza]:
        """The concrete pizza class this factory produces."""
        pass

    def __init__(self):
        """Initialize the pizza factory."""
        self.logger = logging.getLogger(__name__)

    @property
    def pizza_name(self) -> str:
        return self.pizza_class.name

    def create_pizza(self) -> Pizza:
        """
        Create a new pizza of this factory's kind.

        Returns:
            The created pizza.
        """
        pizza = self.pizza_class()
        self.logger.debug(f"{self.__class__.__name__} created {pizza.__class__.__name__}")
        return pizza

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the factory.

        Returns:
            Dictionary containing information about the factory.
        """
        return {
            'type': self.__class__.__name__,
            'pizza': self.pizza_name
        }


class MargheritaPizzaFactory(BasePizzaFactory):
    """Factory producing Margherita pizzas."""

    pizza_class = MargheritaPizza


class PepperoniPizzaFactory(BasePizzaFactory):
    """Factory producing Pepperoni pizzas."""

    pizza_class = PepperoniPizza


class PizzaFactoryRegistry:
    """
    Registry for looking up pizza factories by name.

    The set of pizza types is fixed; lookups are case-insensitive.
    """

    _factories: Dict[str, Type[BasePizzaFactory]] = {
        'margherita': MargheritaPizzaFactory,
        'pepperoni': PepperoniPizzaFactory,
    }

    @staticmethod
    def available_types() -> List[str]:
        """
        Get the names of all registered pizza types.

        Returns:
            List of pizza type names.
        """
        return list(PizzaFactoryRegistry._factories)

    @staticmethod
    def create_factory(pizza_type: str) -> PizzaFactory:
        """
        Create the factory for a pizza type.

        Args:
            pizza_type: Name of the pizza type, e.g. "margherita".

        Returns:
            A new factory for the pizza type.

        Raises:
            ValueError: If the pizza type is not registered.
        """
        factory_class = PizzaFactoryRegistry._factories.get(str(pizza_type).strip().lower())
        if factory_class is None:
            logger.error(f"Unknown pizza type: {pizza_type}")
            raise ValueError(
                f"Unknown pizza type: {pizza_type} "
                f"(available: {', '.join(PizzaFactoryRegistry.available_types())})"
            )
        return factory_class()


def order_pizza(factory: PizzaFactory) -> Pizza:
    """
    Order a pizza from a factory.

    The pizza is created once and then prepared, baked, cut and boxed, in that order.

    Args:
        factory: The factory to order from.

    Returns:
        The finished pizza.
    """
    pizza = factory.create_pizza()
    pizza.prepare()
    pizza.bake()
    pizza.cut()
    pizza.box()
    return pizza
