"""Coercion helpers for the ledger's primitive values.

Prices are plain ``Decimal`` values and product ids are ``uuid.UUID``;
these helpers turn user input into those types and reject anything that
could not be a valid value.
"""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation

from wms.domain.exceptions import InvalidArgumentError

ZERO_PRICE = Decimal("0")


def validate_price(price: Decimal | int) -> Decimal:
    """Return *price* as a non-negative, finite Decimal.

    Plain ints are accepted and converted; floats are refused because
    they cannot carry an exact decimal value.
    """
    if isinstance(price, bool) or not isinstance(price, (Decimal, int)):
        raise InvalidArgumentError(
            f"Price must be a Decimal, got {type(price).__name__}"
        )
    if isinstance(price, int):
        price = Decimal(price)
    if not price.is_finite():
        raise InvalidArgumentError(f"Price must be finite, got {price}")
    if price < ZERO_PRICE:
        raise InvalidArgumentError(f"Price cannot be negative, got {price}")
    if price.is_zero():
        # -0 and 0 are the same price; keep the scale, drop the sign.
        price = price.copy_abs()
    return price


def parse_price(raw: str | int | Decimal) -> Decimal:
    """Convenient factory that coerces to Decimal safely."""
    if isinstance(raw, (Decimal, int)):
        return validate_price(raw)
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Invalid price: {raw!r}") from exc
    return validate_price(value)


def parse_product_id(raw: str | uuid.UUID) -> uuid.UUID:
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw).strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid product id: {raw!r}") from exc
