import pytest

from aprox.quadrature import Method, UnknownMethodError


class TestMethodParse:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("m", Method.MIDPOINT),
            ("l", Method.LEFT),
            ("r", Method.RIGHT),
            ("t", Method.TRAPEZOIDAL),
            ("s", Method.SIMPSON),
        ],
    )
    def test_single_letter_selectors(self, selector, expected):
        assert Method.parse(selector) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("midpoint", Method.MIDPOINT),
            ("left", Method.LEFT),
            ("right", Method.RIGHT),
            ("trapezoid", Method.TRAPEZOIDAL),
            ("trapezoidal", Method.TRAPEZOIDAL),
            ("simpson", Method.SIMPSON),
        ],
    )
    def test_rule_names(self, name, expected):
        assert Method.parse(name) is expected

    def test_case_insensitive(self):
        assert Method.parse("S") is Method.SIMPSON
        assert Method.parse(" Trapezoidal ") is Method.TRAPEZOIDAL

    def test_member_passthrough(self):
        for member in Method:
            assert Method.parse(member) is member

    @pytest.mark.parametrize("selector", ["x", "", "simpsons", 3, None])
    def test_unknown_selector_raises(self, selector):
        with pytest.raises(UnknownMethodError):
            Method.parse(selector)


class TestMethodValues:
    def test_values_are_selectors(self):
        assert [member.value for member in Method] == [
            "m",
            "l",
            "r",
            "t",
            "s",
        ]
