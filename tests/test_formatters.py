#
# Mixcol - Formatters Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from mixcol.formatters import fmt_type, fmt_value


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtValue:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(42, "<int: 42>", id="int"),
            pytest.param("name", "<str: 'name'>", id="str"),
            pytest.param(None, "<NoneType: None>", id="none"),
            pytest.param([1, 2], "<list: [1, 2]>", id="list"),
        ],
    )
    def test_values(self, value, expected):
        assert fmt_value(value) == expected

    def test_truncates_quoted_repr(self):
        assert fmt_value("users.victor", max_repr=8) == "<str: 'user'...>"

    def test_truncates_plain_repr(self):
        assert fmt_value(list(range(100)), max_repr=5) == "<list: [0, 1...>"

    def test_escapes_angle_bracket(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"

    def test_broken_repr(self):
        result = fmt_value(BrokenRepr())
        assert result.startswith("<BrokenRepr: ")
        assert "repr failed: RuntimeError" in result


class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(float, "<type: float>", id="type"),
            pytest.param(BrokenRepr(), "<type: BrokenRepr>", id="custom"),
        ],
    )
    def test_fmt_type(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_truncates_long_type_name(self):
        assert fmt_type(float, max_repr=3) == "<type: flo...>"
