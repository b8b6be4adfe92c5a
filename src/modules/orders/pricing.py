"""Order pricing.

Pure arithmetic over cart lines, kept free of ORM and I/O so the rules
can be tested on plain objects.  ``price`` and ``discount`` are summed
verbatim from each line; quantity is already reflected in the line
amounts stored by the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol, Union

Number = Union[Decimal, int, str]

ZERO = Decimal("0.00")


class PricedLine(Protocol):
    price: Number
    discount: Number


@dataclass(frozen=True)
class OrderTotals:
    price: Decimal
    discount: Decimal
    shipping_cost: Decimal
    total: Decimal


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_totals(lines: Iterable[PricedLine], shipping_cost: Number) -> OrderTotals:
    """Return ``price``, ``discount`` and ``total = price - discount + shipping``."""
    lines = list(lines)
    price = sum((_to_decimal(line.price) for line in lines), ZERO)
    discount = sum((_to_decimal(line.discount) for line in lines), ZERO)
    shipping = _to_decimal(shipping_cost)
    return OrderTotals(
        price=price,
        discount=discount,
        shipping_cost=shipping,
        total=price - discount + shipping,
    )
