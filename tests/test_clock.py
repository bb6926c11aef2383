"""Tests for the timestamp clock."""

import locale
import re
from datetime import datetime
from unittest.mock import patch

from stacklog.clock import Clock, LOCALE_TIMESTAMP_FORMAT


class TestClock:
    """Tests for Clock."""

    def test_render_appends_milliseconds(self):
        clock = Clock('%Y-%m-%d %H:%M:%S')
        moment = datetime(2026, 10, 17, 14, 3, 5, 420000)
        assert clock.render(moment) == '2026-10-17 14:03:05.420'

    def test_milliseconds_not_padded(self):
        clock = Clock('%H:%M:%S')
        assert clock.render(datetime(2026, 1, 1, 0, 0, 0, 5000)) == '00:00:00.5'

    def test_sub_millisecond_truncated(self):
        clock = Clock('%H:%M:%S')
        assert clock.render(datetime(2026, 1, 1, 0, 0, 0, 999)) == '00:00:00.0'

    def test_call_uses_current_time(self):
        clock = Clock('%Y')
        stamp = clock()
        assert re.fullmatch(r'\d{4}\.\d{1,3}', stamp)

    def test_default_render_is_unambiguous(self):
        with patch('stacklog.clock.locale.setlocale') as setlocale:
            clock = Clock()
        setlocale.assert_not_called()
        moment = datetime(2026, 10, 17, 14, 3, 5, 42000)
        assert clock.render(moment) == '2026-10-17 14:03:05.42'


class TestLocaleClock:
    """Tests for Clock(use_locale=True)."""

    def test_resolves_host_locale(self):
        with patch('stacklog.clock.locale.setlocale') as setlocale:
            clock = Clock(use_locale=True)
        setlocale.assert_called_once_with(locale.LC_TIME, '')
        assert clock.fmt == LOCALE_TIMESTAMP_FORMAT

    def test_explicit_format_wins(self):
        with patch('stacklog.clock.locale.setlocale'):
            clock = Clock('%H:%M', use_locale=True)
        assert clock.render(datetime(2026, 1, 1, 9, 30, 0, 7000)) == '09:30.7'
