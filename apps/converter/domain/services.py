"""
Domain services - Core business logic.
Rate retrieval behind a single "rate or None" contract, and conversion.
"""

import logging
from decimal import Decimal, localcontext
from datetime import date

from apps.converter.domain.exceptions import InvalidCurrencyError
from apps.converter.domain.interfaces import BaseExchangeRateProvider, CurrencyLookup
from apps.converter.domain.models import ConversionRecord, RateQuote

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """
    Domain service that hands out live and historical rates.

    Every failure mode of the provider (network error, timeout, non-2xx
    status, no data for the date, rate missing from the payload) comes back
    as None. Callers must check for None before using a rate; there is no
    default or zero rate.

    Currency codes are checked against the catalog before the provider is
    asked, so an unknown code never turns into a request.
    """

    def __init__(self, provider: BaseExchangeRateProvider, catalog: CurrencyLookup):
        self.provider = provider
        self.catalog = catalog

    def _check_codes(self, *codes: str) -> None:
        for code in codes:
            if code not in self.catalog:
                raise InvalidCurrencyError(f"Unknown currency code '{code}'")

    def live_rate(self, source_currency_code: str, exchanged_currency_code: str) -> Decimal | None:
        """
        Get the latest available rate.

        Returns:
            Units of exchanged currency per one unit of source currency,
            or None if the rate cannot be obtained
        """
        self._check_codes(source_currency_code, exchanged_currency_code)
        rate = self.provider.get_exchange_rate_data(source_currency_code, exchanged_currency_code)
        if rate is None:
            logger.info("Live rate unavailable for %s/%s", source_currency_code, exchanged_currency_code)
        return rate

    def historical_rate(
        self,
        source_currency_code: str,
        exchanged_currency_code: str,
        valuation_date: date
    ) -> Decimal | None:
        """
        Get the rate pinned to a calendar date.

        "No data for that date" and "service unreachable" both return None.

        Example:
            >>> rate = service.historical_rate("USD", "INR", date(2024, 1, 15))
            >>> if rate is not None:
            ...     converted = ConversionService.convert(Decimal("50"), rate)
        """
        self._check_codes(source_currency_code, exchanged_currency_code)
        rate = self.provider.get_exchange_rate_data(
            source_currency_code,
            exchanged_currency_code,
            valuation_date
        )
        if rate is None:
            logger.info(
                "Historical rate unavailable for %s/%s on %s",
                source_currency_code, exchanged_currency_code, valuation_date
            )
        return rate

    def get_quote(
        self,
        source_currency_code: str,
        exchanged_currency_code: str,
        valuation_date: date | None = None
    ) -> RateQuote | None:
        if valuation_date is None:
            rate = self.live_rate(source_currency_code, exchanged_currency_code)
        else:
            rate = self.historical_rate(source_currency_code, exchanged_currency_code, valuation_date)

        if rate is None:
            return None

        return RateQuote(
            base=source_currency_code,
            target=exchanged_currency_code,
            rate=rate,
            valuation_date=valuation_date,
        )


class ConversionService:

    @staticmethod
    def convert(amount: Decimal, rate: Decimal) -> Decimal:
        """
        Convert an amount with a known rate.

        The product is returned unrounded; rounding to 2 decimals only
        happens when the value is rendered as text.
        """
        with localcontext() as ctx:
            # digits of a product never exceed the digits of both factors
            ctx.prec = len(amount.as_tuple().digits) + len(rate.as_tuple().digits)
            return amount * rate

    @staticmethod
    def build_record(
        source_currency_code: str,
        exchanged_currency_code: str,
        amount: Decimal,
        rate: Decimal,
        valuation_date: date | None = None
    ) -> ConversionRecord:
        """
        Convert and wrap the result for the history log.

        Without a valuation_date the record is stamped with today's date;
        with one it becomes a historical (HIST) record for that date.
        """
        return ConversionRecord(
            record_date=valuation_date or date.today(),
            amount=amount,
            base=source_currency_code,
            target=exchanged_currency_code,
            converted_amount=ConversionService.convert(amount, rate),
            historical=valuation_date is not None,
        )
