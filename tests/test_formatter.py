"""
Pruebas de NumericFormatter.
"""

import math

import pytest

from app.domain.services.formatter import NumericFormatter, SeparatorConfig


@pytest.fixture
def fmt():
    return NumericFormatter()


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234567.5, "1,234,567.50"),
        (0, "0.00"),
        (999.999, "1,000.00"),
        (12345.678, "12,345.68"),
        (100, "100.00"),
        (1000, "1,000.00"),
        (0.5, "0.50"),
        (123456, "123,456.00"),
    ],
)
def test_format_default_locale(fmt, value, expected):
    assert fmt.format(value) == expected


def test_format_negative_keeps_sign_outside_grouping(fmt):
    assert fmt.format(-1234.5) == "-1,234.50"
    assert fmt.format(-100) == "-100.00"


def test_format_negative_that_rounds_to_zero_has_no_sign(fmt):
    assert fmt.format(-0.001) == "0.00"


def test_format_custom_separators():
    fmt = NumericFormatter(SeparatorConfig(thousands=".", decimal=","))
    assert fmt.format(1234567.5) == "1.234.567,50"
    assert fmt.format(999.999) == "1.000,00"


def test_format_rejects_non_finite(fmt):
    with pytest.raises(ValueError):
        fmt.format(math.inf)
    with pytest.raises(ValueError):
        fmt.format(math.nan)


def test_separator_config_rejects_equal_separators():
    with pytest.raises(ValueError):
        SeparatorConfig(thousands=".", decimal=".")
