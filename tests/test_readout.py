"""Tests for clock text, color ramp, and beep point of the readout."""

import pytest

from talktimer.timer.readout import (
    Readout, build_readout, color_for, completion,
    format_remaining, is_beep_point,
)


class TestFormatRemaining:

    @pytest.mark.parametrize("seconds, text", [
        (0, "00:00"),
        (5, "00:05"),
        (60, "01:00"),
        (599, "09:59"),
        (600, "10:00"),
        (3599, "59:59"),
        (3600, "1:00:00"),
        (3661, "1:01:01"),
        (36000, "10:00:00"),
    ])
    def test_known_values(self, seconds, text):
        assert format_remaining(seconds) == text

    def test_hours_segment_only_when_nonzero(self):
        total = 3 * 3600 + 17
        for remaining in range(0, total + 1, 7):
            hours, rest = divmod(remaining, 3600)
            minutes, secs = divmod(rest, 60)
            text = format_remaining(remaining)
            if hours > 0:
                assert text == f"{hours}:{minutes:02d}:{secs:02d}"
            else:
                assert text == f"{minutes:02d}:{secs:02d}"


class TestColor:

    def test_start_is_green(self):
        assert color_for(0.0) == (0, 0xCC, 0)

    def test_end_is_red(self):
        assert color_for(1.0) == (0xCC, 0, 0)

    def test_halfway(self):
        r, g, b = color_for(0.5)
        assert r == 102
        assert g == 161  # cbrt(0.5) * 204 = 161.9…
        assert b == 0

    def test_red_rises_as_green_falls(self):
        previous = color_for(0.0)
        for step in range(1, 11):
            current = color_for(step / 10)
            assert current[0] >= previous[0]
            assert current[1] <= previous[1]
            previous = current

    def test_color_hex(self):
        assert build_readout(600, 600).color_hex == "#00CC00"
        assert build_readout(600, 0).color_hex == "#CC0000"


class TestReadout:

    def test_completion(self):
        assert completion(600, 600) == 0.0
        assert completion(600, 300) == pytest.approx(0.5)
        assert completion(600, 0) == 1.0

    def test_fields(self):
        r = build_readout(600, 60)
        assert isinstance(r, Readout)
        assert r.remaining == 60
        assert r.total == 600
        assert r.text == "01:00"
        assert r.completion == pytest.approx(0.9)

    def test_beep_only_for_ticks(self):
        assert build_readout(600, 60).beep is False
        assert build_readout(600, 60, ticked=True).beep is True
        assert build_readout(600, 61, ticked=True).beep is False

    def test_beep_point(self):
        assert is_beep_point(600, 60)
        assert is_beep_point(10, 1)
        assert not is_beep_point(15, 1)
        assert not is_beep_point(600, 600)

    def test_readout_is_frozen(self):
        r = build_readout(10, 5)
        with pytest.raises(AttributeError):
            r.remaining = 3
