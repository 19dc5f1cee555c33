"""Two-decimal money helpers.

Every amount entering the system goes through :func:`to_money` so that
balances and comparisons are always made at cent precision::

    to_money(10.005)   # Decimal("10.00"), banker's rounding
    to_money("3.1")    # Decimal("3.10")
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

from bank_sim.exceptions import InvalidArgumentError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
# Largest accepted amount or balance; sums of two stay exact at 28 digits
MAX_AMOUNT = Decimal("999999999999999999.99")

Amount = Union[Decimal, int, float, str]


def to_money(value: Amount) -> Decimal:
    """Coerce ``value`` to a Decimal quantized to cents.

    Parameters
    ----------
    value : Decimal | int | float | str
        Raw amount. Floats are converted through ``str()`` to avoid
        binary representation noise.

    Returns
    -------
    Decimal
        Amount rounded to two decimals.

    Raises
    ------
    InvalidArgumentError
        If the value is not a finite number or its magnitude exceeds
        ``MAX_AMOUNT``.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Amount must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, (int, float, str)):
        try:
            dec = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"Amount must be numeric, got {value!r}") from None
    else:
        raise InvalidArgumentError(f"Amount must be numeric, got {type(value).__name__}")

    if not dec.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {value!r}")
    if abs(dec) > MAX_AMOUNT:
        raise InvalidArgumentError(f"Amount {value!r} exceeds the maximum of {MAX_AMOUNT}")
    return dec.quantize(CENT, rounding=ROUND_HALF_EVEN)


def format_currency(amount: Decimal) -> str:
    """Format an amount as ``$1,234.56`` (negative as ``-$1,234.56``)."""
    amount = to_money(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
