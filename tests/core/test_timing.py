"""
Tests for the section Timer.
"""

import pytest

from numkernel.core.compute.timing import Timer


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert 'elimination' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('pass'):
            pass
        first = timer._sections['pass']
        with timer.section('pass'):
            pass
        timer.stop()
        assert timer.result()['pass'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
