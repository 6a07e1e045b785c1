"""
Iterator interfaces for the design patterns demo.

This module defines the cursor and collection interfaces of the Iterator pattern.
"""

from abc import ABC, abstractmethod
from typing import Any

from .base import Component


class Iterator(ABC):
    """
    Interface for cursors over an ordered sequence.

    Subclasses implement ``has_next`` and ``next``; the Python iteration
    protocol is derived from them so a cursor can drive a ``for`` loop.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """
        Check whether the cursor has more items.

        Returns:
            True if ``next`` can be called, False once the cursor is exhausted.
        """
        pass

    @abstractmethod
    def next(self) -> Any:
        """
        Return the current item and advance the cursor.

        Returns:
            The item at the current position.

        Raises:
            IndexError: If the cursor is exhausted.
        """
        pass

    def __iter__(self) -> 'Iterator':
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class BookCollection(Component):
    """Interface for collections that hand out cursors over their books."""

    @abstractmethod
    def create_iterator(self) -> Iterator:
        """
        Create a fresh cursor over the collection.

        Returns:
            A new cursor positioned at the first item.
        """
        pass
