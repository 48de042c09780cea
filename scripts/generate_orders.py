#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Generates JSON files with random orders."""

from argparse import ArgumentParser
import logging

from order_stats.generator import generate_files


def parse_arguments():
    parser = ArgumentParser(description=__doc__)
    parser.add_argument('--output-dir', '-o', required=True,
                        help='the output directory.')
    parser.add_argument('--files', '-n', type=int, default=1,
                        help='the number of files to generate (default: 1).')
    parser.add_argument('--orders', '-r', type=int, default=1000,
                        help='the number of orders per file (default: 1000).')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='the random seed.')
    parser.add_argument('--compress', '-z', action='store_true',
                        help='write gzipped (.json.gz) files.')
    parser.add_argument('--log-level', '-L', type=str, default='info',
                        choices=['debug', 'info', 'warning', 'error', 'critical'],
                        help='the logging level.')
    args = parser.parse_args()
    if args.files < 1:
        parser.error('At least one file must be generated.')
    if args.orders < 0:
        parser.error('The number of orders cannot be negative.')
    return args


def main():
    args = parse_arguments()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    generate_files(args.output_dir, args.files, args.orders,
                   args.seed, args.compress)


if __name__ == '__main__':
    main()
