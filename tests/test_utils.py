"""Tests for the pt-BR display helpers."""

import pytest

from deputados.utils import format_brl, format_data


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "R$ 0,00"),
        (None, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (1234567.891, "R$ 1.234.567,89"),
        (-45.1, "-R$ 45,10"),
    ],
)
def test_format_brl(value, expected):
    assert format_brl(value) == expected


def test_format_data():
    assert format_data("2024-03-05") == "05/03/2024"
    assert format_data("2024-03-05T10:30", with_time=True) == "05/03/2024 10:30"
    assert format_data("2024-03-05T10:30") == "05/03/2024"


def test_format_data_missing_or_invalid():
    assert format_data(None) == "Data não informada"
    assert format_data("") == "Data não informada"
    assert format_data("ontem") == "Data inválida"
