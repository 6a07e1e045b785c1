"""
Base interfaces for the design patterns demo.

This module defines the base interface shared by every component in the demo.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Component(ABC):
    """Base interface for all components in the design patterns demo."""

    @abstractmethod
    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the component.

        Returns:
            Dictionary containing information about the component.
        """
        pass
