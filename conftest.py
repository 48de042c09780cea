"""Shared pytest fixtures: order objects and JSON order files."""

import json
from pathlib import Path
from typing import Any

import pytest


def order_dict(i: int = 1, status: str = 'NEW', tags: str = 'gift, urgent',
               city: str = 'Lviv', **fields: Any) -> dict[str, Any]:
    """The JSON object of an order with sensible defaults."""
    order = {
        'id': f'ord-{i}',
        'customer': {
            'id': f'cust-{i}',
            'fullName': 'Olena Kvitka',
            'email': f'user{i}@example.com',
            'phone': '+380501112233',
            'city': city,
        },
        'status': status,
        'tags': tags,
        'paymentMethod': 'card',
        'amount': 499.99,
        'createdAt': 1731600000,
    }
    order.update(fields)
    return order


@pytest.fixture
def make_order():
    return order_dict


@pytest.fixture
def write_json(tmp_path):
    """
    Returns a function that writes a JSON file to a temporary directory. The
    content is dumped as JSON, unless it is already a string.
    """
    def write(name: str, content: Any, directory: Path = tmp_path) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding='utf-8')
        return path
    return write
