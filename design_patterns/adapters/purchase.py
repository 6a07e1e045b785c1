"""
Purchase driver for the Adapter pattern demo.
"""

from numbers import Real

from ..interfaces.payment import PaymentProcessor


def purchase(payment_processor: PaymentProcessor, amount: Real) -> None:
    """
    Pay for a purchase through any payment processor.

    Args:
        payment_processor: The processor to pay through.
        amount: The amount to pay.
    """
    payment_processor.process_payment(amount)
