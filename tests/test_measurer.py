"""Tests for font width tables and the caching measurer."""
import pytest

from shieldsvg.cache import LRUCache
from shieldsvg.measurer import (
    CharWidthTable,
    Font,
    MeasurementError,
    TextMeasurer,
    get_width_table,
    round_up_to_odd,
    text_width,
)


class TestCharWidthTable:
    def test_from_ranges_sums_widths(self):
        table = CharWidthTable.from_ranges([(97, 99, 5), (109, 109, 10)])
        assert table.width_of("abc") == 15.0

    def test_em_width_is_width_of_m(self):
        table = CharWidthTable.from_ranges([(109, 109, 10)])
        assert table.em_width == 10.0

    def test_unknown_char_uses_em_width(self):
        table = CharWidthTable.from_ranges([(97, 97, 5), (109, 109, 10)])
        assert table.width_of("a?") == 15.0

    def test_unknown_char_without_fallback_raises(self):
        table = CharWidthTable.from_ranges([(97, 97, 5), (109, 109, 10)])
        with pytest.raises(MeasurementError):
            table.width_of("a?", allow_fallback=False)

    def test_measurement_error_is_value_error(self):
        assert issubclass(MeasurementError, ValueError)

    def test_control_chars_have_zero_width(self):
        table = CharWidthTable.from_ranges([(97, 97, 5), (109, 109, 10)])
        assert table.width_of("a\t\n\x7f") == 5.0
        assert table.width_of("\x00", allow_fallback=False) == 0.0

    def test_empty_text(self):
        assert get_width_table(Font.VERDANA_11).width_of("") == 0.0

    def test_from_json(self):
        table = CharWidthTable.from_json("[[97, 98, 4.5], [109, 109, 9]]")
        assert table.width_of("ab") == 9.0

    def test_from_json_rejects_non_list(self):
        with pytest.raises(ValueError):
            CharWidthTable.from_json('{"a": 1}')

    def test_from_json_rejects_bad_entry(self):
        with pytest.raises(ValueError):
            CharWidthTable.from_json("[[97, 98]]")

    def test_load(self, tmp_path):
        path = tmp_path / "font.json"
        path.write_text("[[109, 109, 7]]", encoding="utf-8")
        assert CharWidthTable.load(path).width_of("mm") == 14.0


class TestBundledFonts:
    @pytest.mark.parametrize("font", list(Font))
    def test_every_font_loads(self, font):
        table = get_width_table(font)
        assert table.em_width > 0
        assert table.width_of("A") > 0

    def test_tables_are_shared(self):
        assert get_width_table(Font.VERDANA_11) is get_width_table(Font.VERDANA_11)

    def test_fonts_differ(self):
        assert text_width("m", Font.VERDANA_11) != text_width("m", Font.HELVETICA_BOLD_11)

    def test_verdana_widths(self):
        assert text_width("build", Font.VERDANA_11) == pytest.approx(26.640625)
        assert text_width("passing", Font.VERDANA_11) == pytest.approx(41.685059, abs=1e-5)

    def test_monotonic_for_repeated_char(self):
        widths = [text_width("a" * n, Font.VERDANA_11) for n in range(6)]
        assert widths == sorted(widths)
        assert widths[4] == pytest.approx(4 * widths[1])

    def test_non_ascii_falls_back_to_m(self):
        assert text_width("é", Font.VERDANA_11) == text_width("m", Font.VERDANA_11)


class TestRoundUpToOdd:
    @pytest.mark.parametrize("value,expected", [
        (0.0, 1), (1.0, 1), (2.0, 3), (26.64, 27), (41.69, 41), (50.99, 51),
    ])
    def test_values(self, value, expected):
        assert round_up_to_odd(value) == expected


class TestTextMeasurer:
    def test_preferred_width(self):
        measurer = TextMeasurer(LRUCache(16))
        assert measurer.preferred_width("build", Font.VERDANA_11) == 27
        assert measurer.preferred_width("passing", Font.VERDANA_11) == 41

    def test_empty_text_is_one(self):
        assert TextMeasurer(LRUCache(4)).preferred_width("", Font.VERDANA_11) == 1

    def test_caches_by_text_and_font(self):
        cache = LRUCache(16)
        measurer = TextMeasurer(cache)
        measurer.preferred_width("build", Font.VERDANA_11)
        assert ("build", Font.VERDANA_11) in cache
        assert ("build", Font.HELVETICA_BOLD_11) not in cache

    def test_long_text_bypasses_cache(self):
        cache = LRUCache(16)
        measurer = TextMeasurer(cache)
        width = measurer.preferred_width("a" * 2000, Font.VERDANA_11)
        assert width % 2 == 1
        assert len(cache) == 0

    def test_spaced_width(self):
        measurer = TextMeasurer(LRUCache(4))
        assert measurer.spaced_width("BUILDING", Font.VERDANA_10, 1.25) == 61
        assert measurer.spaced_width("PASS", Font.VERDANA_BOLD_10, 1.25) == 34

    def test_spaced_width_empty(self):
        assert TextMeasurer(LRUCache(4)).spaced_width("", Font.VERDANA_10, 1.25) == 0
