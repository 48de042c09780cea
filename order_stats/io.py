#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
I/O related functionality: reading orders from JSON files, listing the input
files and writing the statistics report.
"""

import codecs
from collections.abc import Generator, Iterable
import json
import logging
import os
from pathlib import Path
from typing import Any, BinaryIO, Union

import ijson
from lxml import etree

from order_stats.config import report_file_name
from order_stats.model import Order
from order_stats.statistics import ReportEntry
from order_stats.utils import file_suffix, openall


# How many bytes to read from the input at once
CHUNK_SIZE = 64 * 1024
JSON_WHITESPACE = b' \t\n\r'


class ParseError(Exception):
    """Raised if the file or stream is not a valid JSON array."""


def iter_array(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Generator[Any]:
    """
    Enumerates the elements of the JSON array in the binary _stream_ one by
    one, without reading the whole stream into memory. Non-integer numbers are
    returned as ``float``\\ s; ``NaN`` and ``Infinity`` are not valid JSON.

    The elements before an error are all returned; then :class:`ParseError` is
    raised and the rest of the stream is not read.
    """
    chunk = stream.read(chunk_size)
    while chunk and not chunk.lstrip(JSON_WHITESPACE):
        chunk = stream.read(chunk_size)
    if not chunk.lstrip(JSON_WHITESPACE).startswith(b'['):
        raise ParseError('JSON must start with array.')

    elements = ijson.sendable_list()
    parser = ijson.items_coro(elements, 'item', use_float=True)
    try:
        while chunk:
            parser.send(chunk)
            yield from elements
            del elements[:]
            chunk = stream.read(chunk_size)
        parser.close()
    except (ijson.JSONError, UnicodeDecodeError) as e:
        yield from elements
        raise ParseError(f'Malformed JSON: {e}') from e
    yield from elements


def read_orders(input_file: Union[Path, str]) -> Generator[Order]:
    """
    Enumerates the orders in _input_file_, which must contain a JSON array of
    order objects. The file is closed when the generator is depleted or
    closed.

    :raises ParseError: if the file is not a well-formed JSON array;
    :raises RecordFormatError: if one of the elements is not a valid order.
    """
    with openall(input_file, 'rb') as inf:
        if inf.peek(len(codecs.BOM_UTF8)).startswith(codecs.BOM_UTF8):
            inf.read(len(codecs.BOM_UTF8))
        for obj in iter_array(inf):
            yield Order.from_dict(obj)


def list_files(directory: Union[Path, str], extension: str = 'json') -> list[Path]:
    """
    Lists the files in _directory_ (not recursively) with the extension
    _extension_. The extension is matched case-insensitively; compressed files
    (e.g. ``orders.json.gz``) also match.
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f'Directory does not exist: {directory}')
    if not directory.is_dir():
        raise NotADirectoryError(f'Path is not a directory: {directory}')

    extension = extension.lstrip('.').lower()
    return sorted(path for path in directory.iterdir()
                  if path.is_file() and file_suffix(path).lower() == extension)


def create_file(directory: Union[Path, str], file_name: str) -> Path:
    """
    Creates an empty file called _file_name_ in _directory_. Missing
    directories are created; an existing file is replaced, unless it is
    read-only.
    """
    if not file_name or not file_name.strip():
        raise ValueError('File name cannot be empty.')

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    output_file = directory / file_name
    if output_file.exists() and not os.access(output_file, os.W_OK):
        raise PermissionError(
            f'File is read-only and cannot be replaced: {output_file}')
    output_file.unlink(missing_ok=True)
    output_file.touch()
    return output_file


def write_xml(entries: Iterable[ReportEntry], output_file: Path):
    """
    Writes the report as

    .. code-block:: xml

        <statistics>
          <items>
            <item><value>NEW</value><count>2</count></item>
          </items>
        </statistics>
    """
    root = etree.Element('statistics')
    items = etree.SubElement(root, 'items')
    for entry in entries:
        item = etree.SubElement(items, 'item')
        etree.SubElement(item, 'value').text = entry.value
        etree.SubElement(item, 'count').text = str(entry.count)
    etree.ElementTree(root).write(str(output_file), encoding='UTF-8',
                                  xml_declaration=True, pretty_print=True)


def write_json(entries: Iterable[ReportEntry], output_file: Path):
    """Writes the report as ``{"items": [{"value": ..., "count": ...}]}``."""
    report = {'items': [{'value': entry.value, 'count': entry.count}
                        for entry in entries]}
    with openall(output_file, 'wt') as outf:
        json.dump(report, outf, ensure_ascii=False, indent=2)
        print(file=outf)


writers = {'xml': write_xml, 'json': write_json}


def write_report(entries: Iterable[ReportEntry], output_dir: Union[Path, str],
                 attribute, fmt: str = 'xml') -> Path:
    """
    Writes the report to ``statistics_by_<attribute>.<fmt>`` in _output_dir_.

    :returns: the path to the report file.
    """
    try:
        writer = writers[fmt]
    except KeyError:
        raise ValueError(f'Unsupported output format: {fmt}') from None
    output_file = create_file(output_dir, report_file_name(attribute, fmt))
    writer(entries, output_file)
    logging.info(f'Statistics written to {output_file}.')
    return output_file
