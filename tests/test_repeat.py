#
# Padded Column - Repeat Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from padded_column.display import Text
from padded_column.repeat import Repeat


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRepeat:
    @pytest.mark.parametrize(
        "unit, count, expected",
        [
            pytest.param("-", 0, "", id="zero"),
            pytest.param("-", 3, "---", id="dash"),
            pytest.param("ab", 2, "abab", id="multi-char"),
            pytest.param(0, 4, "0000", id="non-str-unit"),
        ],
    )
    def test_str(self, unit, count, expected):
        assert str(Repeat(unit, count)) == expected

    @pytest.mark.parametrize(
        "unit, count, expected",
        [
            pytest.param("-", 0, 0, id="zero"),
            pytest.param("-", 5, 5, id="narrow"),
            pytest.param("日", 3, 6, id="wide"),
            pytest.param("", 3, 0, id="empty-unit"),
        ],
    )
    def test_width(self, unit, count, expected):
        assert Repeat(unit, count).width() == expected

    def test_unit_coerced(self):
        assert Repeat("-", 1).unit == Text("-")

    def test_len(self):
        assert len(Repeat("-", 7)) == 7

    def test_write_to_is_incremental(self, recording_sink):
        """One write per unit, no joined string."""
        Repeat("*", 4).write_to(recording_sink)
        assert recording_sink.writes == ["*", "*", "*", "*"]

    def test_restartable(self, sink):
        pad = Repeat("=", 2)
        assert list(pad) == list(pad)
        pad.write_to(sink)
        pad.write_to(sink)
        assert sink.getvalue() == "===="

    def test_large_count_not_materialized(self):
        pad = Repeat("-", 10 ** 12)
        assert len(pad) == 10 ** 12
        assert pad.width() == 10 ** 12
        assert next(iter(pad)) == Text("-")

    @pytest.mark.parametrize(
        "count, error",
        [
            pytest.param(-1, ValueError, id="negative"),
            pytest.param(1.0, TypeError, id="float"),
            pytest.param(True, TypeError, id="bool"),
        ],
    )
    def test_invalid_count(self, count, error):
        with pytest.raises(error):
            Repeat("-", count)
