"""
Mock provider for offline use and testing.
Generates deterministic but realistic exchange rates.
"""

import logging
import random
from decimal import Decimal
from datetime import date

from apps.converter.domain.interfaces import BaseExchangeRateProvider

logger = logging.getLogger(__name__)


class MockProvider(BaseExchangeRateProvider):
    """
    Mock provider that generates exchange rates without any network call.
    Useful for:
    - Running the converter without connectivity
    - Tests that need plausible rates
    """

    # Units of each currency per one USD (approximate real-world values)
    BASE_RATES = {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.92"),
        "INR": Decimal("83.0"),
        "GBP": Decimal("0.79"),
        "JPY": Decimal("148.0"),
        "AUD": Decimal("1.52"),
        "CAD": Decimal("1.35"),
        "CHF": Decimal("0.88"),
        "SGD": Decimal("1.34"),
        "CNY": Decimal("7.19"),
        "HKD": Decimal("7.82"),
        "NZD": Decimal("1.63"),
    }

    def get_exchange_rate_data(
        self,
        source_currency: str,
        exchanged_currency: str,
        date: date | None = None
    ) -> Decimal | None:
        """
        Generate a mock exchange rate with small random variation.

        Args:
            source_currency: Base currency code
            exchanged_currency: Target currency code
            date: Date for the rate (seeds the variation), None for today

        Returns:
            Mock exchange rate as Decimal, or None for unsupported currencies
        """
        source_rate = self.BASE_RATES.get(source_currency)
        target_rate = self.BASE_RATES.get(exchanged_currency)

        if source_rate is None or target_rate is None:
            logger.warning("MockProvider: unsupported currency pair %s/%s", source_currency, exchanged_currency)
            return None

        # Cross rate through USD
        base_rate = target_rate / source_rate

        # ±2% variation, seeded by pair and date so repeated calls agree
        rng = random.Random(f"{source_currency}{exchanged_currency}{date or _today()}")
        variation = Decimal(str(rng.uniform(0.98, 1.02)))
        mock_rate = base_rate * variation

        return mock_rate.quantize(Decimal("0.000001"))


def _today() -> date:
    return date.today()
