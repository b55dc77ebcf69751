import pytest

from storefront.core.errors import ValidationFailure
from storefront.schemas.cart import parse_add_quantity, parse_update_quantity


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1.5", "0", "-3"])
def test_add_quantity_falls_back_to_one(raw):
    assert parse_add_quantity(raw) == 1


def test_add_quantity_accepts_positive_integers():
    assert parse_add_quantity("4") == 4
    assert parse_add_quantity(" 12 ") == 12


def test_update_quantity_passes_non_positive_values_through():
    assert parse_update_quantity("0") == 0
    assert parse_update_quantity("-5") == -5
    assert parse_update_quantity("3") == 3


@pytest.mark.parametrize("raw", [None, "", "x", "2.5"])
def test_update_quantity_rejects_non_integers(raw):
    with pytest.raises(ValidationFailure):
        parse_update_quantity(raw)
