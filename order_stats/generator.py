#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Generates random order files, e.g. for benchmarking."""

import json
import logging
from pathlib import Path
from random import Random
import time
from typing import Any, Union

from order_stats.utils import num_digits, openall


NAMES = ['Bohdan Roh', 'Ivan Petrov', 'Petro Poroh', 'Olena Kvitka',
         'Stepan Mazur', 'Ihor Bobyl', 'Maryna Fox', 'Katya Smile']
CITIES = ['Lviv', 'Kyiv', 'Odesa', 'Kharkiv', 'Kropyvnytskyi', 'Dnipro']
STATUSES = ['NEW', 'DONE', 'CANCELLED', 'PROCESSING']
TAGS = ['gift', 'urgent', 'newCustomer', 'vip', 'wholesale']
PAYMENT_METHODS = ['card', 'cash']


def generate_order(i: int, rng: Random) -> dict[str, Any]:
    """Generates the JSON object of the _i_th order."""
    return {
        'id': f'ord-{i}',
        'customer': {
            'id': f'cust-{i}',
            'fullName': rng.choice(NAMES),
            'email': f'user{i}@example.com',
            'phone': f'+38050{rng.randrange(1000000, 10000000)}',
            'city': rng.choice(CITIES),
        },
        'status': rng.choice(STATUSES),
        'tags': ', '.join(rng.sample(TAGS, rng.randint(1, 3))),
        'amount': round(rng.uniform(100, 1000), 2),
        'paymentMethod': rng.choice(PAYMENT_METHODS),
        'createdAt': int(time.time()),
    }


def write_orders_file(output_file: Union[Path, str], count: int, rng: Random,
                      first_id: int = 1):
    """
    Writes a JSON array of _count_ random orders to _output_file_, one order
    per line. The orders are written one by one, so _count_ can be large.
    """
    with openall(output_file, 'wt') as outf:
        print('[', file=outf)
        for i in range(first_id, first_id + count):
            print(json.dumps(generate_order(i, rng), ensure_ascii=False),
                  end=',\n' if i < first_id + count - 1 else '\n', file=outf)
        print(']', file=outf)


def generate_files(output_dir: Union[Path, str], files: int,
                   orders_per_file: int, seed: int = None,
                   compress: bool = False) -> list[Path]:
    """
    Generates _files_ order files in _output_dir_, each with _orders_per_file_
    orders. Order ids are unique across files.

    :returns: the list of files written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    rng = Random(seed)
    suffix = '.json.gz' if compress else '.json'
    name_format = f'orders_{{:0{num_digits(files)}}}{suffix}'

    written = []
    for file_no in range(1, files + 1):
        output_file = output_dir / name_format.format(file_no)
        write_orders_file(output_file, orders_per_file, rng,
                          (file_no - 1) * orders_per_file + 1)
        logging.debug(f'Generated {output_file}.')
        written.append(output_file)
    logging.info(f'Generated {files * orders_per_file} orders in {files} '
                 f'files in {output_dir}.')
    return written
