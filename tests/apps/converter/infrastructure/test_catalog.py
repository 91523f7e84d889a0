import pytest

from apps.converter.infrastructure.catalog import CurrencyCatalog, DEFAULT_CURRENCIES


def test_default_catalog_contents():
    catalog = CurrencyCatalog()

    assert len(catalog) == 12
    assert "USD" in catalog
    assert "INR" in catalog
    assert "XXX" not in catalog
    assert catalog.name_for("EUR") == "Euro"


def test_default_catalog_order():
    catalog = CurrencyCatalog()

    assert list(catalog)[:3] == ["USD", "EUR", "INR"]


def test_default_currencies_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CURRENCIES["ABC"] = "Alphabet"  # type: ignore[index]


def test_catalog_copies_its_input():
    source = {"USD": "United States Dollar"}
    catalog = CurrencyCatalog(source)

    source["EUR"] = "Euro"

    assert "EUR" not in catalog


@pytest.mark.parametrize("code", ["usd", "US", "USDT", "U1D"])
def test_catalog_rejects_malformed_codes(code):
    with pytest.raises(ValueError):
        CurrencyCatalog({code: "Broken"})
