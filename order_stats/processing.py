#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Processing the order files in parallel. Each file is read by a separate task
that adds the values of the selected attribute to a shared counter; the
:class:`WorkerPool` runs these tasks on a fixed number of threads.

Errors in a file only affect the file in question: the orders already
counted stay counted and the other files are processed normally. An unknown
attribute, on the other hand, aborts the whole run: files not yet started
are skipped, and the files being processed stop after the current order.
"""

from collections.abc import Iterable
from contextlib import closing
import concurrent.futures as cf
from dataclasses import dataclass
from enum import Enum
import logging
from pathlib import Path
import threading
from typing import Optional, Union

from order_stats.attributes import Attribute, UnknownAttributeError, extract
from order_stats.config import DEFAULT_THREADS, THREAD_WARNING_THRESHOLD
from order_stats.io import ParseError, read_orders
from order_stats.model import RecordFormatError
from order_stats.statistics import ConcurrentCounter
from order_stats.utils import otqdm


class NoInputFilesError(Exception):
    """Raised if there are no files to process."""


class FileStatus(Enum):
    SUCCESS = 'success'
    RECORD_ERROR = 'record error'
    FATAL_ATTRIBUTE_ERROR = 'fatal attribute error'
    SKIPPED = 'skipped'


@dataclass(frozen=True)
class FileOutcome:
    """
    What happened to a file.

    .. attribute:: records

        The number of orders counted from the file. For a file with errors,
        this is the number of orders before the first error.
    """
    path: Path
    status: FileStatus
    records: int = 0
    detail: Optional[str] = None


class RunStatus(Enum):
    COMPLETED = 'completed'
    ABORTED = 'aborted'


@dataclass(frozen=True)
class RunOutcome:
    """
    The result of processing all files. :attr:`files` lists the outcome of each
    file in the order they were given; :attr:`counter` holds the counts.
    """
    status: RunStatus
    files: list[FileOutcome]
    counter: ConcurrentCounter
    detail: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.status is RunStatus.COMPLETED

    def with_status(self, status: FileStatus) -> list[FileOutcome]:
        return [outcome for outcome in self.files if outcome.status is status]

    @property
    def succeeded(self) -> list[FileOutcome]:
        return self.with_status(FileStatus.SUCCESS)

    @property
    def failed(self) -> list[FileOutcome]:
        return self.with_status(FileStatus.RECORD_ERROR)

    @property
    def skipped(self) -> list[FileOutcome]:
        return self.with_status(FileStatus.SKIPPED)


def process_file(input_file: Path, attribute: Union[Attribute, str],
                 counter: ConcurrentCounter,
                 abort: Optional[threading.Event] = None) -> FileOutcome:
    """
    Counts the values of _attribute_ in the orders in _input_file_.

    :param input_file: a JSON file with an array of orders.
    :param attribute: the attribute whose values are counted.
    :param counter: the counter shared by all files.
    :param abort: if specified and set, processing stops after the current
                  order and the file is reported as skipped.
    :raises UnknownAttributeError: if _attribute_ is invalid. This is not a
                                   problem with the file, so it is not
                                   reported as such.
    """
    attribute = Attribute.parse(attribute)
    input_file = Path(input_file)
    logging.debug(f'Processing file {input_file}...')
    records = 0
    try:
        with closing(read_orders(input_file)) as orders:
            for order in orders:
                counter.update(extract(order, attribute))
                records += 1
                if abort is not None and abort.is_set():
                    logging.info(f'Stopped processing {input_file.name} '
                                 f'after {records} orders.')
                    return FileOutcome(input_file, FileStatus.SKIPPED, records,
                                       'Run aborted during processing.')
    except (ParseError, RecordFormatError, OSError) as e:
        logging.error(f'Error processing file {input_file.name} '
                      f'(after {records} orders): {e}')
        return FileOutcome(input_file, FileStatus.RECORD_ERROR, records, str(e))

    logging.info(f'Processed by "{attribute}": {input_file.name} '
                 f'({records} orders).')
    return FileOutcome(input_file, FileStatus.SUCCESS, records)


def _run_task(input_file: Path, attribute: Union[Attribute, str],
              counter: ConcurrentCounter,
              abort: threading.Event) -> FileOutcome:
    """
    Wraps :func:`process_file` for the worker threads: skips the file if the
    run has already been aborted, and aborts it on an unknown attribute.
    """
    if abort.is_set():
        return FileOutcome(Path(input_file), FileStatus.SKIPPED,
                           detail='Run aborted before the file was started.')
    try:
        return process_file(input_file, attribute, counter, abort)
    except UnknownAttributeError as uae:
        abort.set()
        logging.error(f'Aborting the run: {uae}')
        return FileOutcome(Path(input_file), FileStatus.FATAL_ATTRIBUTE_ERROR,
                           detail=str(uae))


class WorkerPool:
    """
    Processes files on a fixed number of threads.

    .. attribute:: threads

        The maximum number of files processed at the same time.

    .. attribute:: progress

        Whether to display a progress bar (one step per file).
    """
    def __init__(self, threads: int = DEFAULT_THREADS, progress: bool = False):
        if threads < 1:
            raise ValueError(f'The number of threads must be at least 1, '
                             f'not {threads}.')
        if threads > THREAD_WARNING_THRESHOLD:
            logging.warning(f'Thread pool size {threads} is very large.')
        self.threads = threads
        self.progress = progress

    def run(self, files: Iterable[Union[Path, str]],
            attribute: Union[Attribute, str],
            counter: Optional[ConcurrentCounter] = None) -> RunOutcome:
        """
        Counts the values of _attribute_ in _files_ into _counter_. Blocks
        until all files have been processed or skipped.

        :returns: the outcome of the run. It is aborted if _attribute_ turned
                  out to be invalid; otherwise it is completed, even if some
                  files could not be processed.
        :raises NoInputFilesError: if _files_ is empty.
        """
        files = [Path(f) for f in files]
        if not files:
            raise NoInputFilesError('No input files to process.')
        if counter is None:
            counter = ConcurrentCounter()

        abort = threading.Event()
        outcomes: list[Optional[FileOutcome]] = [None] * len(files)
        logging.info(f'Processing {len(files)} files on {self.threads} '
                     f'threads by "{attribute}"...')
        with cf.ThreadPoolExecutor(max_workers=self.threads,
                                   thread_name_prefix='worker') as executor, \
             otqdm(total=len(files), desc='Processing files', unit='file',
                   disable=not self.progress) as progress_bar:
            futures = {
                executor.submit(_run_task, input_file, attribute, counter, abort): i
                for i, input_file in enumerate(files)
            }
            cancelled = False
            try:
                for future in cf.as_completed(futures):
                    i = futures[future]
                    if future.cancelled():
                        outcome = FileOutcome(
                            files[i], FileStatus.SKIPPED,
                            detail='Run aborted before the file was started.')
                    else:
                        outcome = future.result()
                    outcomes[i] = outcome
                    if abort.is_set() and not cancelled:
                        # No-op for the futures that are already running
                        for f in futures:
                            f.cancel()
                        cancelled = True
                    progress_bar.update(1)
            except BaseException:
                abort.set()
                raise

        fatal = [outcome for outcome in outcomes
                 if outcome.status is FileStatus.FATAL_ATTRIBUTE_ERROR]
        if fatal:
            return RunOutcome(RunStatus.ABORTED, outcomes, counter,
                              fatal[0].detail)
        return RunOutcome(RunStatus.COMPLETED, outcomes, counter)
