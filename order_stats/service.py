#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Runs the whole statistics workflow: from the input files to the report."""

import logging
from pathlib import Path
import time

from order_stats.config import RunConfig
from order_stats.io import list_files, write_report
from order_stats.processing import NoInputFilesError, RunOutcome, WorkerPool
from order_stats.statistics import build_report


class StatisticsAbortedError(Exception):
    """
    Raised if the run was aborted. The counts are incomplete then, so no
    report is written.
    """
    def __init__(self, outcome: RunOutcome):
        super().__init__(f'Statistics processing aborted: {outcome.detail}')
        self.outcome = outcome


def log_summary(outcome: RunOutcome, seconds: float, threads: int):
    """Logs how long the run took and what happened to the files."""
    logging.info(
        f'Processed {len(outcome.files)} files in {seconds:.3f} seconds on '
        f'{threads} threads: {len(outcome.succeeded)} succeeded, '
        f'{len(outcome.failed)} failed, {len(outcome.skipped)} skipped; '
        f'{sum(f.records for f in outcome.files)} orders, '
        f'{len(outcome.counter)} distinct values.'
    )
    for failed in outcome.failed:
        logging.warning(f'Could not process {failed.path}: {failed.detail}')


def collect_statistics(config: RunConfig, progress: bool = False) -> Path:
    """
    Counts the values of the configured attribute in the input files and
    writes the report.

    :returns: the path of the report file.
    :raises FileNotFoundError: if the input directory does not exist;
    :raises NotADirectoryError: if it is not a directory;
    :raises NoInputFilesError: if it contains no input files;
    :raises StatisticsAbortedError: if the run was aborted.
    """
    config.validate()
    start = time.perf_counter()

    files = list_files(config.input_dir, config.extension)
    if not files:
        raise NoInputFilesError(
            f'No {config.extension.upper()} files found in input directory: '
            f'{config.input_dir}')
    logging.info(f'Found a total of {len(files)} input files.')

    outcome = WorkerPool(config.threads, progress).run(files, config.attribute)
    if not outcome.completed:
        raise StatisticsAbortedError(outcome)

    report = build_report(outcome.counter)
    output_file = write_report(report, config.output_dir, config.attribute,
                               config.output_format)
    log_summary(outcome, time.perf_counter() - start, config.threads)
    return output_file
