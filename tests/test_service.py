"""Tests for the whole statistics workflow."""

import logging

from lxml import etree
import pytest

from order_stats.config import RunConfig
from order_stats.processing import NoInputFilesError, RunStatus
from order_stats.service import StatisticsAbortedError, collect_statistics


@pytest.fixture
def input_dir(tmp_path, write_json, make_order):
    directory = tmp_path / 'orders'
    write_json('a.json', [make_order(1, tags='gift, urgent'),
                          make_order(2, tags='gift')], directory)
    write_json('b.JSON', [make_order(3, tags='vip | gift')], directory)
    write_json('c.json', '[{"tags": "urgent"}, {"tags": 5}]', directory)
    write_json('ignored.txt', [make_order(4, tags='ignored')], directory)
    return directory


def read_xml_report(path):
    root = etree.parse(str(path)).getroot()
    return [(item.findtext('value'), int(item.findtext('count')))
            for item in root.iterfind('items/item')]


def test_collect_statistics(tmp_path, input_dir, caplog):
    config = RunConfig(input_dir=input_dir, output_dir=tmp_path / 'out',
                       attribute='tags', threads=2)
    with caplog.at_level(logging.INFO):
        output_file = collect_statistics(config)

    assert output_file == tmp_path / 'out' / 'statistics_by_tags.xml'
    assert read_xml_report(output_file) == [
        ('gift', 3), ('urgent', 2), ('vip', 1)]
    assert '2 succeeded, 1 failed, 0 skipped' in caplog.text


def test_json_report(tmp_path, input_dir):
    config = RunConfig(input_dir=input_dir, output_dir=tmp_path / 'out',
                       attribute='status', output_format='json')
    output_file = collect_statistics(config)
    assert output_file.name == 'statistics_by_status.json'
    assert '"NEW"' in output_file.read_text(encoding='utf-8')


def test_aborted_run_writes_no_report(tmp_path, input_dir):
    config = RunConfig(input_dir=input_dir, output_dir=tmp_path / 'out',
                       attribute='bogus', threads=2)
    with pytest.raises(StatisticsAbortedError) as excinfo:
        collect_statistics(config)
    assert excinfo.value.outcome.status is RunStatus.ABORTED
    assert 'bogus' in str(excinfo.value)
    assert not (tmp_path / 'out').exists()


def test_no_input_files(tmp_path, write_json):
    write_json('orders/readme.txt', 'no orders here')
    config = RunConfig(input_dir=tmp_path / 'orders',
                       output_dir=tmp_path / 'out')
    with pytest.raises(NoInputFilesError, match='No JSON files found'):
        collect_statistics(config)


def test_missing_input_directory(tmp_path):
    config = RunConfig(input_dir=tmp_path / 'missing',
                       output_dir=tmp_path / 'out')
    with pytest.raises(FileNotFoundError):
        collect_statistics(config)


def test_invalid_config(tmp_path, input_dir):
    config = RunConfig(input_dir=input_dir, output_dir=tmp_path / 'out',
                       threads=0)
    with pytest.raises(ValueError):
        collect_statistics(config)


def test_large_pool_warns_once(tmp_path, input_dir, caplog):
    config = RunConfig(input_dir=input_dir, output_dir=tmp_path / 'out',
                       attribute='status', threads=101)
    with caplog.at_level(logging.WARNING):
        collect_statistics(config)
    assert caplog.text.count('is very large') == 1
