import pytest

from ui import delta_label, format_currency


@pytest.mark.parametrize(
    "value, expected",
    [(0, "$0.00"), (1234.5, "$1,234.50"), (-20, "-$20.00"), (5923.199, "$5,923.20"), (-0.004, "$0.00")],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_delta_label():
    assert delta_label(0) == "Surplus"
    assert delta_label(12.5) == "Surplus"
    assert delta_label(-0.01) == "Deficit"
    assert delta_label(float("nan")) == "Deficit"
