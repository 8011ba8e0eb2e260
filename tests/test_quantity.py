import pytest
from hypothesis import given, strategies as st

from eraserapi.quantity import Quantity


@pytest.mark.parametrize("text", ["25Mi", "7m", "500Mi", "2Gi", "1500m"])
def test_canonical_strings_unchanged(text):
    assert Quantity.parse(text).to_json() == text


def test_thousand_milli_is_one():
    assert Quantity.parse("1000m") == Quantity.parse("1")
    assert Quantity.parse("1000m").to_json() == "1"


def test_zero():
    assert Quantity().is_zero()
    assert Quantity().to_json() == "0"
    assert not Quantity.parse("7m").is_zero()


def test_binary_value():
    assert Quantity.parse("1Ki").value == 1024


@pytest.mark.parametrize("bad", ["", "abc", "1Zi", "--1", "1.2.3"])
def test_invalid(bad):
    with pytest.raises(ValueError):
        Quantity.parse(bad)


@given(st.integers(min_value=0, max_value=10**12), st.sampled_from(["", "m", "k", "Mi", "Gi"]))
def test_round_trip(n, suffix):
    q = Quantity.parse(f"{n}{suffix}")
    assert Quantity.parse(q.to_json()) == q