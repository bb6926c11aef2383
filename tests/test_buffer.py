"""Tests for the bounded record buffer."""

import threading

import pytest

from stacklog.buffer import DEFAULT_CAPACITY, RecordBuffer
from stacklog.record import LogRecord
from stacklog.severity import Severity


def make_record(message, **overrides):
    """Create a record with sensible defaults."""
    fields = {
        'timestamp': 'ts',
        'message': message,
        'source': None,
        'severity': Severity.DEFAULT,
        'formatted_line': f'[ts]: {message}',
    }
    fields.update(overrides)
    return LogRecord(**fields)


class TestAppend:
    """Tests for append() and eviction."""

    def test_default_capacity(self):
        assert RecordBuffer().capacity == DEFAULT_CAPACITY == 500

    def test_append_under_capacity(self):
        buf = RecordBuffer(capacity=3)
        assert buf.append(make_record('a')) is None
        assert buf.append(make_record('b')) is None
        assert len(buf) == 2

    def test_evicts_oldest_one_at_a_time(self):
        buf = RecordBuffer(capacity=2)
        first = make_record('a')
        buf.append(first)
        buf.append(make_record('b'))

        evicted = buf.append(make_record('c'))

        assert evicted is first
        assert [r.message for r in buf.snapshot()] == ['b', 'c']

    @pytest.mark.parametrize('n, capacity', [(0, 3), (2, 3), (3, 3), (10, 3), (7, 1)])
    def test_keeps_most_recent(self, n, capacity):
        buf = RecordBuffer(capacity=capacity)
        for i in range(n):
            buf.append(make_record(str(i)))

        assert len(buf) == min(n, capacity)
        assert [r.message for r in buf.snapshot()] == \
            [str(i) for i in range(max(0, n - capacity), n)]

    def test_concurrent_appends_respect_capacity(self):
        buf = RecordBuffer(capacity=50)
        evicted = []
        lock = threading.Lock()

        def writer(prefix):
            for i in range(200):
                old = buf.append(make_record(f'{prefix}-{i}'))
                if old is not None:
                    with lock:
                        evicted.append(old)

        threads = [threading.Thread(target=writer, args=(t,)) for t in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(buf) == 50
        assert len(evicted) == 800 - 50
        kept = {r.message for r in buf.snapshot()}
        assert kept.isdisjoint(r.message for r in evicted)


class TestSnapshot:
    """Tests for snapshot(), snapshot_formatted() and recent()."""

    def test_snapshot_is_independent_copy(self):
        buf = RecordBuffer()
        buf.append(make_record('a'))

        copy = buf.snapshot()
        copy.clear()

        assert len(buf) == 1

    def test_snapshot_formatted_joins_lines(self):
        buf = RecordBuffer()
        buf.append(make_record('a'))
        buf.append(make_record('b'))
        assert buf.snapshot_formatted() == '[ts]: a\n[ts]: b'

    def test_snapshot_formatted_empty(self):
        assert RecordBuffer().snapshot_formatted() == ''

    def test_recent(self):
        buf = RecordBuffer()
        for m in 'abcde':
            buf.append(make_record(m))
        assert buf.recent(2) == ['[ts]: d', '[ts]: e']
        assert buf.recent(100) == [f'[ts]: {m}' for m in 'abcde']
        assert buf.recent(0) == []

    def test_clear(self):
        buf = RecordBuffer()
        buf.append(make_record('a'))
        buf.clear()
        assert buf.snapshot() == []


class TestLogRecord:
    """Tests for LogRecord."""

    def test_immutable(self):
        record = make_record('a')
        with pytest.raises(AttributeError):
            record.message = 'b'

    def test_to_dict(self):
        record = make_record('a', source='mod', severity=Severity.WARN)
        assert record.to_dict() == {
            'timestamp': 'ts',
            'message': 'a',
            'source': 'mod',
            'severity': 'WARN',
            'formatted': '[ts]: a',
        }
