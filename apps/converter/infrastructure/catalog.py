"""
Read-only currency catalog.

Passed to whoever validates codes instead of living as global mutable state.
"""

from types import MappingProxyType
from typing import Iterator, Mapping

DEFAULT_CURRENCIES: Mapping[str, str] = MappingProxyType({
    "USD": "United States Dollar",
    "EUR": "Euro",
    "INR": "Indian Rupee",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "CHF": "Swiss Franc",
    "SGD": "Singapore Dollar",
    "CNY": "Chinese Yuan",
    "HKD": "Hong Kong Dollar",
    "NZD": "New Zealand Dollar",
})


class CurrencyCatalog:

    def __init__(self, currencies: Mapping[str, str] = DEFAULT_CURRENCIES):
        for code in currencies:
            if len(code) != 3 or not code.isalpha() or not code.isupper():
                raise ValueError(f"Currency code must be 3 uppercase letters, got '{code}'")
        self._currencies = MappingProxyType(dict(currencies))

    def __contains__(self, code: object) -> bool:
        return code in self._currencies

    def __iter__(self) -> Iterator[str]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def name_for(self, code: str) -> str:
        return self._currencies[code]

    def items(self):
        return self._currencies.items()
