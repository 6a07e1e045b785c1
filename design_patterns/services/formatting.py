"""
Formatting helpers shared by the payment services.
"""

from decimal import Decimal
from numbers import Real
from typing import Union


def format_amount(amount: Union[Real, Decimal]) -> str:
    """
    Format a monetary amount for a confirmation line.

    Integral floats drop the fractional part, so ``100`` and ``100.0`` both
    render as ``100``. A ``Decimal`` keeps its own precision in fixed-point
    notation (``Decimal("100.00")`` renders as ``100.00``); anything else
    uses ``str``.

    Args:
        amount: The amount to format.

    Returns:
        The formatted amount.
    """
    if isinstance(amount, Decimal):
        return format(amount, 'f')
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)
