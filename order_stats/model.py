#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""The order records read from the input files."""

from dataclasses import dataclass
from typing import Any, Optional


class RecordFormatError(ValueError):
    """Raised if a JSON value cannot be deserialized into an order record."""


def _string(obj: dict[str, Any], key: str) -> Optional[str]:
    """Returns the string field _key_ of _obj_; ``None`` if missing or null."""
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise RecordFormatError(
            f'Field "{key}" must be a string, not {type(value).__name__}: '
            f'{value!r}')
    return value


def _number(obj: dict[str, Any], key: str, integer: bool = False):
    """
    Returns the numeric field _key_ of _obj_. These are primitive fields: a
    missing key defaults to 0, but an explicit null is an error.
    """
    if key not in obj:
        return 0 if integer else 0.0
    value = obj[key]
    # bool is a subclass of int, but true is not a number in JSON
    types = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, types):
        raise RecordFormatError(
            f'Field "{key}" must be {"an integer" if integer else "a number"}, '
            f'not {value!r}')
    return value if integer else float(value)


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise RecordFormatError(
            f'{what} must be a JSON object, not {type(value).__name__}: '
            f'{value!r}')
    return value


@dataclass(frozen=True)
class Customer:
    """The customer who placed an order."""
    id: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None

    @classmethod
    def from_dict(cls, obj: Any) -> 'Customer':
        obj = _object(obj, 'Customer')
        return Customer(_string(obj, 'id'), _string(obj, 'fullName'),
                        _string(obj, 'email'), _string(obj, 'phone'),
                        _string(obj, 'city'))


@dataclass(frozen=True)
class Order:
    """
    A single order. The JSON representation uses camelCase keys
    (``paymentMethod``, ``createdAt``, ``customer.fullName``); unknown keys
    are ignored.
    """
    id: Optional[str] = None
    customer: Optional[Customer] = None
    status: Optional[str] = None
    tags: Optional[str] = None
    payment_method: Optional[str] = None
    amount: float = 0.0
    created_at: int = 0

    @classmethod
    def from_dict(cls, obj: Any) -> 'Order':
        """
        Deserializes an order from a decoded JSON object.

        :raises RecordFormatError: if _obj_ is not an object or one of its
                                   known fields has the wrong type.
        """
        obj = _object(obj, 'Order')
        customer = obj.get('customer')
        return Order(
            id=_string(obj, 'id'),
            customer=Customer.from_dict(customer) if customer is not None else None,
            status=_string(obj, 'status'),
            tags=_string(obj, 'tags'),
            payment_method=_string(obj, 'paymentMethod'),
            amount=_number(obj, 'amount'),
            created_at=_number(obj, 'createdAt', integer=True),
        )
