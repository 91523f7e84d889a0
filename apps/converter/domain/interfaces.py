from abc import ABC, abstractmethod
from decimal import Decimal
from datetime import date
from typing import Protocol


class BaseExchangeRateProvider(ABC):
    @abstractmethod
    def get_exchange_rate_data(self, source_currency: str, exchanged_currency: str, date: date | None = None) -> Decimal | None:
        pass


class CurrencyLookup(Protocol):
    def __contains__(self, code: object) -> bool: ...

    def name_for(self, code: str) -> str: ...
