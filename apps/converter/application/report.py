"""
Day-by-day rate report for the most recent days.
"""

import asyncio
import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import List

from apps.converter.domain.exceptions import InvalidInputError
from apps.converter.domain.models import DailyRateEntry
from apps.converter.domain.services import ExchangeRateService

logger = logging.getLogger(__name__)


class SevenDayReport:
    """
    Collects one rate per calendar day for today and the preceding days,
    most recent first.

    A day without a rate becomes an entry with rate=None; it never stops
    the remaining days from being fetched. The result always has exactly
    seven entries and is built completely before it is returned.
    """

    days = 7

    def __init__(self, service: ExchangeRateService):
        self.service = service

    def _dates(self, today: date) -> List[date]:
        return [today - timedelta(days=offset) for offset in range(self.days)]

    def run(
        self,
        source_currency_code: str,
        exchanged_currency_code: str,
        today: date | None = None,
        concurrent: bool = False
    ) -> List[DailyRateEntry]:
        """
        Args:
            source_currency_code: Base currency (e.g. "USD")
            exchanged_currency_code: Target currency (e.g. "INR")
            today: First (most recent) day of the report, defaults to date.today()
            concurrent: Fetch all days at once instead of one after another

        Returns:
            List of DailyRateEntry in strictly descending date order
        """
        dates = self._dates(today or date.today())

        if concurrent:
            return asyncio.run(
                self._run_concurrently(source_currency_code, exchanged_currency_code, dates)
            )

        entries: List[DailyRateEntry] = []
        for valuation_date in dates:
            rate = self.service.historical_rate(
                source_currency_code,
                exchanged_currency_code,
                valuation_date
            )
            entries.append(DailyRateEntry(valuation_date=valuation_date, rate=rate))
        return entries

    async def _fetch_day(
        self,
        source_currency_code: str,
        exchanged_currency_code: str,
        valuation_date: date
    ) -> Decimal | None:
        """
        Run the blocking lookup in a worker thread via asyncio.to_thread.
        """
        return await asyncio.to_thread(
            self.service.historical_rate,
            source_currency_code,
            exchanged_currency_code,
            valuation_date
        )

    async def _run_concurrently(
        self,
        source_currency_code: str,
        exchanged_currency_code: str,
        dates: List[date]
    ) -> List[DailyRateEntry]:
        tasks = [
            self._fetch_day(source_currency_code, exchanged_currency_code, valuation_date)
            for valuation_date in dates
        ]

        # gather keeps input order, so entries stay most-recent-first
        results = await asyncio.gather(*tasks, return_exceptions=True)

        entries: List[DailyRateEntry] = []
        for valuation_date, result in zip(dates, results):
            if isinstance(result, InvalidInputError):
                raise result
            if isinstance(result, Exception):
                logger.warning("Rate lookup for %s raised: %s", valuation_date, result)
                result = None
            entries.append(DailyRateEntry(valuation_date=valuation_date, rate=result))
        return entries
