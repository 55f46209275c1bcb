"""
Unit tests for core/page_signal.py
"""

import pytest
from core.page_signal import PageSignal


class TestPageSignal:
    """Tests for subscribe()/publish()"""

    @pytest.mark.unit
    def test_publish_calls_handlers_in_order(self):
        signal = PageSignal('s1')
        seen = []
        signal.subscribe('evt', lambda **data: seen.append(('a', data)))
        signal.subscribe('evt', lambda **data: seen.append(('b', data)))

        assert signal.publish('evt', value=1) == 2
        assert seen == [('a', {'value': 1}), ('b', {'value': 1})]

    @pytest.mark.unit
    def test_unsubscribe(self):
        signal = PageSignal('s1')
        seen = []
        unsubscribe = signal.subscribe('evt', lambda: seen.append(1))
        unsubscribe()

        assert signal.publish('evt') == 0
        assert seen == []

    @pytest.mark.unit
    def test_other_events_ignored(self):
        signal = PageSignal('s1')
        seen = []
        signal.subscribe('evt', lambda: seen.append(1))
        signal.publish('other')
        assert seen == []
