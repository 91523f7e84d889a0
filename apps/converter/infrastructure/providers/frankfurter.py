import logging

import requests
from decimal import Decimal
from datetime import date

from core.settings import FRANKFURTER_URL, REQUEST_TIMEOUT
from apps.converter.domain.interfaces import BaseExchangeRateProvider
from apps.converter.infrastructure.providers.extractor import extract_rate

logger = logging.getLogger(__name__)


class FrankfurterProvider(BaseExchangeRateProvider):
    """
    Frankfurter API provider.
    Uses /latest for live rates and /YYYY-MM-DD for historical rates.
    """

    def __init__(self, base_url: str = FRANKFURTER_URL, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def build_live_url(self, source_currency: str, exchanged_currency: str) -> str:
        # Format: https://api.frankfurter.app/latest?from=USD&to=INR
        return f"{self.base_url}/latest?from={source_currency}&to={exchanged_currency}"

    def build_historical_url(self, source_currency: str, exchanged_currency: str, date: date) -> str:
        # Format: https://api.frankfurter.app/2024-01-15?from=USD&to=INR
        date_str = date.strftime("%Y-%m-%d")
        return f"{self.base_url}/{date_str}?from={source_currency}&to={exchanged_currency}"

    def get_exchange_rate_data(
        self,
        source_currency: str,
        exchanged_currency: str,
        date: date | None = None
    ) -> Decimal | None:
        """
        Fetch a live (date=None) or historical exchange rate from Frankfurter.

        Args:
            source_currency: Base currency code (e.g. USD)
            exchanged_currency: Target currency code (e.g. INR)
            date: Date for the exchange rate, None for the latest one

        Returns:
            Exchange rate as Decimal, or None if error occurs
        """
        if date is None:
            url = self.build_live_url(source_currency, exchanged_currency)
        else:
            url = self.build_historical_url(source_currency, exchanged_currency, date)
        label = f"{source_currency}/{exchanged_currency} on {date or 'latest'}"

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()

            # Response format: {"amount":1.0,"base":"USD","date":"2024-01-15","rates":{"INR":83.12}}
            rate = extract_rate(response.text, exchanged_currency)

        except requests.exceptions.Timeout:
            logger.warning("Timeout calling Frankfurter API for %s", label)
            return None
        except requests.exceptions.HTTPError as e:
            logger.warning("HTTP error from Frankfurter for %s: %s", label, e)
            return None
        except requests.exceptions.RequestException as e:
            logger.warning("Request to Frankfurter failed for %s: %s", label, e)
            return None
        except Exception:
            logger.exception("Unexpected error calling Frankfurter for %s", label)
            return None

        if rate is None:
            logger.warning("No %s rate in Frankfurter response for %s", exchanged_currency, label)
        return rate
