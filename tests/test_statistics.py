"""Tests for the concurrent counter and the report."""

import threading

from order_stats.statistics import ConcurrentCounter, ReportEntry, build_report


def test_increment():
    counter = ConcurrentCounter()
    counter.increment('NEW')
    counter.increment('DONE')
    counter.increment('NEW')
    assert counter.as_dict() == {'NEW': 2, 'DONE': 1}
    assert counter['NEW'] == 2
    assert counter['missing'] == 0
    assert 'missing' not in counter
    assert len(counter) == 2


def test_update():
    counter = ConcurrentCounter(['a', 'b'])
    counter.update({'a', 'c'})
    counter.update([])
    assert counter.as_dict() == {'a': 2, 'b': 1, 'c': 1}


def test_concurrent_increments():
    counter = ConcurrentCounter()
    barrier = threading.Barrier(8)

    def work(tid):
        barrier.wait()
        for i in range(5000):
            counter.increment(f'value-{i % 10}')
            counter.update([f'thread-{tid}', 'shared'])

    threads = [threading.Thread(target=work, args=(tid,)) for tid in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    counts = counter.as_dict()
    assert all(counts[f'value-{i}'] == 8 * 500 for i in range(10))
    assert all(counts[f'thread-{tid}'] == 5000 for tid in range(8))
    assert counts['shared'] == 8 * 5000


def test_report_order():
    counter = ConcurrentCounter(['urgent'] * 3 + ['gift'] * 5 + ['vip'] * 3
                                + ['b2b'])
    assert build_report(counter) == [
        ReportEntry('gift', 5),
        ReportEntry('urgent', 3),
        ReportEntry('vip', 3),
        ReportEntry('b2b', 1),
    ]


def test_ties_are_ordered_by_value():
    counter = ConcurrentCounter(['c', 'B', 'a'])
    assert [entry.value for entry in build_report(counter)] == ['B', 'a', 'c']


def test_empty_report():
    assert build_report(ConcurrentCounter()) == []
