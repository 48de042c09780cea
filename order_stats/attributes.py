#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
The attributes of an order by which statistics can be collected, and the
extraction of attribute values from an :class:`Order`.
"""

from enum import Enum
import re
from typing import Callable, Optional, Union

from order_stats.model import Order
from order_stats.utils import is_empty


# The characters that separate the values of a multi-valued field
DELIMITERS = ',#|;'
delimiter_p = re.compile(f'[{re.escape(DELIMITERS)}]')


class UnknownAttributeError(Exception):
    """
    Raised if statistics are requested for an attribute that does not exist.
    This is a configuration error, not a problem with the data.
    """
    def __init__(self, attribute):
        super().__init__(attribute)
        self.attribute = attribute

    def __str__(self):
        return 'Unknown attribute: {}'.format(self.attribute)


def _customer_field(name: str) -> Callable[[Order], Optional[str]]:
    def getter(order: Order) -> Optional[str]:
        return getattr(order.customer, name) if order.customer else None
    return getter


class Attribute(Enum):
    """The attributes statistics can be collected by."""
    ID = 'id'
    STATUS = 'status'
    TAGS = 'tags'
    PAYMENT_METHOD = 'paymentMethod'
    FULL_NAME = 'fullName'
    EMAIL = 'email'
    PHONE = 'phone'
    CITY = 'city'

    @classmethod
    def parse(cls, attribute: Union['Attribute', str]) -> 'Attribute':
        """
        Returns the :class:`Attribute` called _attribute_.

        :raises UnknownAttributeError: if there is no such attribute.
        """
        if isinstance(attribute, Attribute):
            return attribute
        try:
            return cls(attribute)
        except ValueError:
            raise UnknownAttributeError(attribute) from None

    @classmethod
    def names(cls) -> list[str]:
        return [attribute.value for attribute in cls]

    @property
    def multi_valued(self) -> bool:
        return self is Attribute.TAGS

    def __str__(self):
        return self.value


# Where the value of each attribute comes from. Note that ``id`` is the id of
# the customer, not that of the order.
_getters: dict[Attribute, Callable[[Order], Optional[str]]] = {
    Attribute.ID: _customer_field('id'),
    Attribute.STATUS: lambda order: order.status,
    Attribute.TAGS: lambda order: order.tags,
    Attribute.PAYMENT_METHOD: lambda order: order.payment_method,
    Attribute.FULL_NAME: _customer_field('full_name'),
    Attribute.EMAIL: _customer_field('email'),
    Attribute.PHONE: _customer_field('phone'),
    Attribute.CITY: _customer_field('city'),
}


def split_values(text: Optional[str]) -> set[str]:
    """
    Splits the text of a multi-valued field into its values. Any of the
    characters in :data:`DELIMITERS` separate values; the values are stripped
    and empty ones are dropped.
    """
    if is_empty(text):
        return set()
    return {value for value in map(str.strip, delimiter_p.split(text)) if value}


def extract(order: Order, attribute: Union[Attribute, str]) -> set[str]:
    """
    Returns the values _order_ contributes to the statistics of _attribute_.
    This is a single value for most attributes and possibly more for
    multi-valued ones; a missing field contributes nothing.

    :raises UnknownAttributeError: if _attribute_ is not a valid attribute.
    """
    attribute = Attribute.parse(attribute)
    value = _getters[attribute](order)
    if attribute.multi_valued:
        return split_values(value)
    return set() if value is None else {value}
