import pytest
from decimal import Decimal, getcontext, localcontext
from datetime import date
from unittest.mock import MagicMock

from apps.converter.domain.exceptions import InvalidCurrencyError
from apps.converter.domain.models import RateQuote
from apps.converter.domain.services import ConversionService, ExchangeRateService
from apps.converter.infrastructure.catalog import CurrencyCatalog


@pytest.fixture
def provider():
    return MagicMock()


@pytest.fixture
def service(provider):
    return ExchangeRateService(provider, CurrencyCatalog())


class TestExchangeRateService:
    """Tests for ExchangeRateService domain service."""

    def test_live_rate(self, service, provider):
        provider.get_exchange_rate_data.return_value = Decimal("83.00")

        rate = service.live_rate("USD", "INR")

        assert rate == Decimal("83.00")
        provider.get_exchange_rate_data.assert_called_once_with("USD", "INR")

    def test_live_rate_unavailable(self, service, provider):
        provider.get_exchange_rate_data.return_value = None

        assert service.live_rate("USD", "INR") is None

    def test_historical_rate(self, service, provider):
        provider.get_exchange_rate_data.return_value = Decimal("82.50")
        test_date = date(2024, 1, 15)

        rate = service.historical_rate("USD", "INR", test_date)

        assert rate == Decimal("82.50")
        provider.get_exchange_rate_data.assert_called_once_with("USD", "INR", test_date)

    def test_historical_rate_no_data(self, service, provider):
        """
        No data for the date looks exactly like any other failure.
        """
        provider.get_exchange_rate_data.return_value = None

        assert service.historical_rate("USD", "INR", date(1990, 1, 1)) is None

    @pytest.mark.parametrize("base,target", [("XXX", "INR"), ("USD", "usd"), ("USD", "BTC")])
    def test_unknown_code_never_reaches_provider(self, service, provider, base, target):
        with pytest.raises(InvalidCurrencyError):
            service.live_rate(base, target)
        with pytest.raises(InvalidCurrencyError):
            service.historical_rate(base, target, date(2024, 1, 15))

        provider.get_exchange_rate_data.assert_not_called()

    def test_get_quote_live(self, service, provider):
        provider.get_exchange_rate_data.return_value = Decimal("83.00")

        quote = service.get_quote("USD", "INR")

        assert quote == RateQuote(base="USD", target="INR", rate=Decimal("83.00"))

    def test_get_quote_historical(self, service, provider):
        provider.get_exchange_rate_data.return_value = Decimal("82.50")

        quote = service.get_quote("USD", "INR", date(2024, 1, 15))

        assert quote.valuation_date == date(2024, 1, 15)
        assert quote.rate == Decimal("82.50")

    def test_get_quote_unavailable(self, service, provider):
        provider.get_exchange_rate_data.return_value = None

        assert service.get_quote("USD", "INR") is None


class TestConversionService:

    @pytest.mark.parametrize(
        "amount,rate",
        [
            (Decimal("100.00"), Decimal("83.00")),
            (Decimal("0.01"), Decimal("0.000123")),
            (Decimal("123456.789"), Decimal("1.234567")),
            (Decimal("3"), Decimal("0.333333")),
            (Decimal("98765432109876543210.987654321"), Decimal("0.000123456789123")),
        ],
    )
    def test_convert_is_exact_product(self, amount, rate):
        with localcontext() as ctx:
            ctx.prec = 100
            expected = amount * rate

        assert ConversionService.convert(amount, rate) == expected

    def test_convert_keeps_every_digit(self):
        """
        More significant digits than the default 28-digit context still multiply exactly.
        """
        result = ConversionService.convert(Decimal("1234567890.123456789012345"), Decimal("83.123456"))

        assert result == Decimal("102621549693.689994969368943064320")

    def test_convert_leaves_caller_context_alone(self):
        before = getcontext().prec

        ConversionService.convert(Decimal("1234567890.123456789012345"), Decimal("83.123456"))

        assert getcontext().prec == before

    def test_convert_scenario(self):
        assert ConversionService.convert(Decimal("100.00"), Decimal("83.00")) == Decimal("8300.00")

    def test_convert_is_not_rounded(self):
        result = ConversionService.convert(Decimal("1"), Decimal("1.234567"))

        assert result == Decimal("1.234567")

    def test_build_record_immediate(self):
        record = ConversionService.build_record("USD", "INR", Decimal("100.00"), Decimal("83.00"))

        assert record.historical is False
        assert record.record_date == date.today()
        assert record.converted_amount == Decimal("8300.00")
        assert record.to_line() == f"{date.today().isoformat()} | 100.0 USD = 8,300.00 INR"

    def test_build_record_historical(self):
        record = ConversionService.build_record(
            "USD", "INR", Decimal("50"), Decimal("82.50"), date(2024, 1, 15)
        )

        assert record.historical is True
        assert record.to_line() == "HIST 2024-01-15 | 50.0 USD -> 4,125.00 INR"
