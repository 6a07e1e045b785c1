"""
Shared fixtures for the design patterns demo tests.
"""

import logging

import pytest

from design_patterns.library import Library

BOOK_TITLES = [
    "The Great Gatsby",
    "To Kill a Mockingbird",
    "1984",
    "Pride and Prejudice",
]


@pytest.fixture
def info_logs(caplog):
    """Capture INFO and above from the demo loggers and return a message reader."""
    caplog.set_level(logging.INFO)

    def read():
        return [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("design_patterns") and record.levelno == logging.INFO
        ]

    return read


@pytest.fixture
def library():
    """Library holding the four demo books in order."""
    lib = Library()
    for title in BOOK_TITLES:
        lib.add_book(title)
    return lib
