"""
Pure domain entities.
No dependency on the network or the filesystem.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext


def format_money(value: Decimal) -> str:
    """Render a value with thousands separators and 2 decimals, e.g. 8,300.00."""
    return f"{value:,.2f}"


def format_amount(value: Decimal) -> str:
    """
    Render an entered amount the way it is written to the history log.

    Integral amounts keep a single trailing ".0" (100 -> "100.0"),
    anything else is printed in plain positional notation (12.50 -> "12.5").
    """
    # enough precision that normalize never rounds the entered digits
    with localcontext() as ctx:
        ctx.prec = max(len(value.as_tuple().digits), 1)
        normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return f"{format(normalized, 'f')}.0"
    return format(normalized, "f")


@dataclass(frozen=True)
class RateQuote:

    base: str
    target: str
    rate: Decimal
    valuation_date: date | None = None

    def __post_init__(self):
        if self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate}")

    @property
    def is_live(self) -> bool:
        return self.valuation_date is None


@dataclass(frozen=True)
class ConversionRecord:

    record_date: date
    amount: Decimal
    base: str
    target: str
    converted_amount: Decimal
    historical: bool = False

    def to_line(self) -> str:
        """Single history line; historical conversions get the HIST prefix and an arrow."""
        if self.historical:
            return (
                f"HIST {self.record_date.isoformat()} | {format_amount(self.amount)} {self.base}"
                f" -> {format_money(self.converted_amount)} {self.target}"
            )
        return (
            f"{self.record_date.isoformat()} | {format_amount(self.amount)} {self.base}"
            f" = {format_money(self.converted_amount)} {self.target}"
        )


@dataclass(frozen=True)
class DailyRateEntry:

    valuation_date: date
    rate: Decimal | None = None

    @property
    def available(self) -> bool:
        return self.rate is not None
