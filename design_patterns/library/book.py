"""
Book model for the Iterator pattern demo.
"""

import logging

logger = logging.getLogger(__name__)


class Book:
    """A book identified by its title."""

    def __init__(self, title: str):
        """
        Initialize the book.

        Args:
            title: The book title.

        Raises:
            TypeError: If the title is not a string.
        """
        if not isinstance(title, str):
            logger.error(f"Rejected book title {title!r}: not a string")
            raise TypeError(f"Book title must be a string, got {type(title).__name__}")
        self._title = title

    def get_title(self) -> str:
        return self._title

    def __str__(self) -> str:
        return self._title

    def __repr__(self) -> str:
        return f"Book({self._title!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._title == other._title

    def __hash__(self) -> int:
        return hash(self._title)
