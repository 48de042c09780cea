#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Counts the values of an order attribute in a directory of JSON order files
and writes a report of the values, most frequent first, to
``statistics_by_<attribute>.<format>`` in the output directory.
"""

from argparse import ArgumentParser
import logging
import sys

from order_stats.attributes import Attribute
from order_stats.config import (
    DEFAULT_ATTRIBUTE, DEFAULT_FORMAT, DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR,
    DEFAULT_THREADS, INPUT_EXTENSION, OUTPUT_FORMATS, RunConfig, load_config
)
from order_stats.processing import NoInputFilesError
from order_stats.service import StatisticsAbortedError, collect_statistics


def parse_arguments():
    parser = ArgumentParser(description=__doc__)
    parser.add_argument('--config', '-c',
                        help='a YAML configuration file. Command line '
                             'arguments override the values in it.')
    parser.add_argument('--input-dir', '-i',
                        help='the directory with the JSON order files '
                             f'(default: {DEFAULT_INPUT_DIR}).')
    parser.add_argument('--output-dir', '-o',
                        help='the directory to write the report to '
                             f'(default: {DEFAULT_OUTPUT_DIR}).')
    parser.add_argument('--attribute', '-a',
                        help='the attribute to collect statistics by. One of '
                             f'{", ".join(Attribute.names())} '
                             f'(default: {DEFAULT_ATTRIBUTE}).')
    parser.add_argument('--threads', '-P', type=int,
                        help='number of worker threads to use '
                             f'(default: {DEFAULT_THREADS}).')
    parser.add_argument('--format', '-f', dest='output_format',
                        choices=OUTPUT_FORMATS,
                        help=f'the report format (default: {DEFAULT_FORMAT}).')
    parser.add_argument('--extension', '-e',
                        help='the extension of the input files '
                             f'(default: {INPUT_EXTENSION}).')
    parser.add_argument('--progress', '-p', action='store_true',
                        help='display a progress bar.')
    parser.add_argument('--log-level', '-L', type=str, default='info',
                        choices=['debug', 'info', 'warning', 'error', 'critical'],
                        help='the logging level.')
    args = parser.parse_args()

    try:
        config = load_config(args.config) if args.config else RunConfig()
        args.config = config.replace(
            input_dir=args.input_dir, output_dir=args.output_dir,
            attribute=args.attribute, threads=args.threads,
            output_format=args.output_format, extension=args.extension
        ).validate()
    except (OSError, ValueError) as e:
        parser.error(str(e))
    return args


def main():
    args = parse_arguments()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(threadName)s - %(levelname)s - %(message)s'
    )

    config = args.config
    logging.info(f'Input directory: {config.input_dir}, attribute: '
                 f'{config.attribute}, output directory: {config.output_dir}, '
                 f'threads: {config.threads}.')
    try:
        output_file = collect_statistics(config, args.progress)
    except (FileNotFoundError, NotADirectoryError, NoInputFilesError) as e:
        logging.error(f'Failed to process statistics: {e}')
        sys.exit(1)
    except StatisticsAbortedError as sae:
        logging.error(f'{sae} No report was written.')
        sys.exit(1)
    except Exception:
        logging.exception('An unexpected error occurred.')
        sys.exit(1)

    logging.info(f'Done. The report is in {output_file}.')


if __name__ == '__main__':
    main()
