#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration of a statistics run. The configuration can be loaded from a
YAML file such as::

    input_dir: ~/orders
    output_dir: ~/orders/statistics
    attribute: city
    threads: 8
    format: xml
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Union

import yaml


DEFAULT_INPUT_DIR = 'data'
DEFAULT_OUTPUT_DIR = 'data/output'
DEFAULT_ATTRIBUTE = 'id'
DEFAULT_THREADS = 8
DEFAULT_FORMAT = 'xml'
INPUT_EXTENSION = 'json'
OUTPUT_FORMATS = ('xml', 'json')
OUTPUT_PREFIX = 'statistics_by_'
# Above this many threads, the worker pool warns the user
THREAD_WARNING_THRESHOLD = 100

# YAML key -> RunConfig field, where they differ
_yaml_keys = {'format': 'output_format'}


def report_file_name(attribute, fmt: str) -> str:
    """The name of the report file: e.g. ``statistics_by_city.xml``."""
    return f'{OUTPUT_PREFIX}{attribute}.{fmt}'


@dataclass
class RunConfig:
    """All settings of a statistics run."""
    input_dir: Path = Path(DEFAULT_INPUT_DIR)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    attribute: str = DEFAULT_ATTRIBUTE
    threads: int = DEFAULT_THREADS
    output_format: str = DEFAULT_FORMAT
    extension: str = INPUT_EXTENSION

    def __post_init__(self):
        self.input_dir = Path(self.input_dir).expanduser()
        self.output_dir = Path(self.output_dir).expanduser()

    @property
    def output_file_name(self) -> str:
        return report_file_name(self.attribute, self.output_format)

    def validate(self) -> 'RunConfig':
        """
        Checks the values that can be checked before the run. Note that the
        attribute is not one of them: an invalid attribute aborts the run.

        :raises ValueError: if a setting is invalid.
        """
        if not isinstance(self.threads, int) or self.threads < 1:
            raise ValueError(f'Thread pool size must be a positive integer, '
                             f'not {self.threads!r}.')
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f'Unsupported output format {self.output_format!r}; '
                             f'choose from {", ".join(OUTPUT_FORMATS)}.')
        return self

    def replace(self, **changes: Any) -> 'RunConfig':
        """Returns a copy with the non-``None`` values in _changes_ applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update((k, v) for k, v in changes.items() if v is not None)
        return RunConfig(**values)


def load_config(config_file: Union[Path, str]) -> RunConfig:
    """Loads the configuration from a YAML file."""
    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f'Config file {config_file} is missing.')
    except yaml.YAMLError as ye:
        raise ValueError(f'Config file {config_file} is not valid YAML: {ye}')

    if not isinstance(config, dict):
        raise ValueError(f'Config file {config_file} must contain a mapping.')
    known = {f.name for f in fields(RunConfig)}
    values = {}
    for key, value in config.items():
        field = _yaml_keys.get(key, key)
        if field not in known:
            raise ValueError(f'Unknown key in config file {config_file}: {key}')
        values[field] = value
    return RunConfig(**values)
