"""
Parsing of raw user input into domain values.

Anything rejected here raises an InvalidInputError subclass and never
reaches rate lookup or conversion.
"""

from datetime import date
from decimal import Decimal, InvalidOperation

from apps.converter.domain.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidDateError,
)
from apps.converter.domain.interfaces import CurrencyLookup


def parse_currency_code(raw: str, catalog: CurrencyLookup) -> str:
    code = raw.strip().upper()
    if code not in catalog:
        raise InvalidCurrencyError(f"Invalid code '{raw.strip()}'. Example: USD, INR, EUR")
    return code


def parse_amount(raw: str) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        raise InvalidAmountError(f"Not a number: '{raw.strip()}'")

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError("Amount must be a number greater than 0")
    return amount


def parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidDateError(f"Invalid date '{raw.strip()}'. Use YYYY-MM-DD")
