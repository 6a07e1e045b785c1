#!/usr/bin/env python3
"""
Main script for the design patterns demo.

This script demonstrates the Factory, Adapter and Iterator patterns by ordering
pizzas, paying through two payment services and listing the books of a library.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from design_patterns.adapters import PayPalAdapter, StripeAdapter, purchase
from design_patterns.adapters.base import BasePaymentAdapter
from design_patterns.core.factory import PizzaFactoryRegistry, order_pizza
from design_patterns.library import Library, print_books
from design_patterns.services import PayPal, Stripe
from design_patterns.utils.logging import CONSOLE_FORMAT, VERBOSE_FORMAT, setup_logging

logger = logging.getLogger(__name__)

DEMOS = ('factory', 'adapter', 'iterator')

DEFAULT_CONFIG: Dict[str, Any] = {
    'factory': {
        'pizzas': ['margherita', 'pepperoni']
    },
    'adapter': {
        'payments': [
            {'backend': 'paypal', 'amount': 100},
            {'backend': 'stripe', 'amount': 150}
        ]
    },
    'iterator': {
        'books': [
            'The Great Gatsby',
            'To Kill a Mockingbird',
            '1984',
            'Pride and Prejudice'
        ]
    }
}


def create_payment_processor(backend: str) -> BasePaymentAdapter:
    """
    Create a payment adapter around a fresh backend service.

    Args:
        backend: Name of the backend ("paypal" or "stripe").

    Returns:
        The payment adapter.

    Raises:
        ValueError: If the backend is unknown.
    """
    backend = backend.strip().lower()
    if backend == 'paypal':
        return PayPalAdapter(PayPal())
    if backend == 'stripe':
        return StripeAdapter(Stripe())
    logger.error(f"Unknown payment backend: {backend}")
    raise ValueError(f"Unknown payment backend: {backend}")


def run_factory_demo(config: Optional[Dict[str, Any]] = None):
    """Order every configured pizza."""
    config = config or DEFAULT_CONFIG['factory']

    for pizza_type in config.get('pizzas', []):
        factory = PizzaFactoryRegistry.create_factory(pizza_type)
        logger.debug(f"Factory info: {factory.get_info()}")
        logger.info(f"Ordering {factory.pizza_name}...")
        order_pizza(factory)


def run_adapter_demo(config: Optional[Dict[str, Any]] = None):
    """Make every configured payment."""
    config = config or DEFAULT_CONFIG['adapter']

    for payment in config.get('payments', []):
        processor = create_payment_processor(payment['backend'])
        logger.debug(f"Adapter info: {processor.get_info()}")
        logger.info(f"Processing payment via {processor.backend_name}...")
        purchase(processor, payment['amount'])


def run_iterator_demo(config: Optional[Dict[str, Any]] = None):
    """List the configured books through a library cursor."""
    config = config or DEFAULT_CONFIG['iterator']

    library = Library()
    for title in config.get('books', []):
        library.add_book(title)
    logger.debug(f"Library info: {library.get_info()}")

    iterator = library.create_iterator()
    logger.info("Books in the library:")
    print_books(iterator)


def run_demos(demos: List[str], config: Optional[Dict[str, Any]] = None):
    """
    Run the selected demos in order.

    Args:
        demos: Names of the demos to run.
        config: Optional configuration dictionary keyed by demo name.
    """
    config = config or DEFAULT_CONFIG
    runners = {
        'factory': run_factory_demo,
        'adapter': run_adapter_demo,
        'iterator': run_iterator_demo,
    }
    for demo in demos:
        runners[demo](config.get(demo))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='design-patterns-demo',
        description='Demonstrate the Factory, Adapter and Iterator patterns.'
    )
    parser.add_argument(
        '--demo',
        choices=DEMOS + ('all',),
        default='all',
        help='Demo to run (default: all)'
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: INFO)'
    )
    parser.add_argument('--log-file', help='Also write log output to this file')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Include timestamps, logger names and levels in log output'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = parse_args(argv)

    # Set up logging
    setup_logging(
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
        fmt=VERBOSE_FORMAT if args.verbose else CONSOLE_FORMAT
    )

    demos = list(DEMOS) if args.demo == 'all' else [args.demo]
    run_demos(demos)
    return 0


if __name__ == "__main__":
    sys.exit(main())
