"""
Book iterator for the Iterator pattern demo.

This module provides a cursor over a list of books that never exposes or
modifies the list it walks.
"""

import logging
from typing import List

from ..interfaces.iterator import Iterator
from .book import Book


class BookIterator(Iterator):
    """
    Cursor over an ordered list of books.

    The cursor keeps a reference to the list and a position in
    ``[0, len(books)]``. Once the position reaches the end the cursor is
    exhausted for good; there is no reset.
    """

    def __init__(self, books: List[Book]):
        """
        Initialize the book iterator.

        Args:
            books: The list of books to walk, held by reference.
        """
        self.logger = logging.getLogger(__name__)
        self._books = books
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def has_next(self) -> bool:
        return self._index < len(self._books)

    def next(self) -> Book:
        """
        Return the current book and advance the cursor.

        Returns:
            The book at the current position.

        Raises:
            IndexError: If the cursor is exhausted.
        """
        if not self.has_next():
            self.logger.error(f"next() called on exhausted iterator at position {self._index}")
            raise IndexError(f"No more books: iterator exhausted after {self._index} item(s)")
        book = self._books[self._index]
        self._index += 1
        return book
