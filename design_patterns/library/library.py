"""
Library implementation for the Iterator pattern demo.

This module provides an ordered, append-only book collection and the
``print_books`` driver that walks any cursor.
"""

import logging
from typing import Any, Dict, List, Union

from ..interfaces.iterator import BookCollection, Iterator
from .book import Book
from .book_iterator import BookIterator

logger = logging.getLogger(__name__)


class Library(BookCollection):
    """
    Library of books kept in insertion order.

    Books can only be appended; traversal goes through a ``BookIterator``.
    """

    def __init__(self):
        """Initialize an empty library."""
        self.logger = logging.getLogger(__name__)
        self._books: List[Book] = []

    def add_book(self, book: Union[Book, str]) -> Book:
        """
        Add a book to the end of the library.

        Args:
            book: The book to add, or a title to wrap in a ``Book``.

        Returns:
            The added book.

        Raises:
            TypeError: If ``book`` is neither a ``Book`` nor a string title.
        """
        if not isinstance(book, Book):
            book = Book(book)
        self._books.append(book)
        self.logger.debug(f"Added book: {book.get_title()}")
        return book

    def create_iterator(self) -> BookIterator:
        return BookIterator(self._books)

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the library.

        Returns:
            Dictionary containing information about the library.
        """
        return {
            'type': self.__class__.__name__,
            'book_count': len(self._books)
        }

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> BookIterator:
        return self.create_iterator()


def print_books(book_iterator: Iterator) -> int:
    """
    Log the title of every remaining book in a cursor.

    Args:
        book_iterator: Any cursor exposing ``has_next`` and ``next``.

    Returns:
        Number of books printed.
    """
    count = 0
    while book_iterator.has_next():
        book = book_iterator.next()
        logger.info(str(book))
        count += 1
    return count
