#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Utility functions."""

import bz2
from functools import partial
import gzip
import math
from pathlib import Path
import sys
from typing import Union

from tqdm import tqdm


def openall(
    filename: Union[Path, str], mode='rt', encoding=None, errors=None,
    newline=None, buffering=-1, closefd=True, opener=None,  # for open()
    compresslevel=5,  # faster default compression
):
    """
    Opens all file types known to the Python SL. There are some differences
    from the stock functions:
    - the default mode is 'rt'
    - text mode defaults to UTF-8, as JSON files are always UTF-8
    - the default compresslevel is 5, because e.g. gzip does not benefit a lot
      from higher values, only becomes slower.
    """
    filename = str(filename)
    if 't' in mode or 'b' not in mode:
        encoding = encoding or 'utf-8'
    if filename.endswith('.gz'):
        return gzip.open(filename, mode, compresslevel,
                         encoding, errors, newline)
    elif filename.endswith('.bz2'):
        return bz2.open(filename, mode, compresslevel,
                        encoding, errors, newline)
    else:
        return open(filename, mode, buffering, encoding, errors, newline,
                    closefd, opener)


def file_suffix(path: Union[Path, str]) -> str:
    """
    Returns the "real" suffix of *path*, without the leading dot and ignoring
    the compression suffix, if any. E.g. ``orders.json.gz`` -> ``json``.
    """
    suffixes = Path(path).suffixes
    if suffixes and suffixes[-1] in ('.gz', '.bz2'):
        suffixes = suffixes[:-1]
    return suffixes[-1][1:] if suffixes else ''


def is_empty(s: Union[bytes, str]) -> bool:
    """
    Checks if _s_ is empty; i.e. it is either ``None`` or contains only
    whitespaces.
    """
    return s is None or not s.strip()


def num_digits(items: int) -> int:
    """
    Returns the number of digits required to number _items_ different items,
    starting from 1.
    """
    return math.floor(math.log10(max(items, 1))) + 1


# tqdm to print the progress bar to stdout. This helps keeping the log clean.
otqdm = partial(tqdm, file=sys.stdout)
