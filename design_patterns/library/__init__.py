"""
Book library walked through the Iterator pattern.
"""

from .book import Book
from .book_iterator import BookIterator
from .library import Library, print_books

__all__ = ['Book', 'BookIterator', 'Library', 'print_books']
