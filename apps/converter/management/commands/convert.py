import argparse
import logging
import sys
from datetime import date
from decimal import Decimal
from typing import List, Optional, TextIO

from core import settings
from core.logging import init_logging
from apps.converter.application.report import SevenDayReport
from apps.converter.application.validation import parse_amount, parse_currency_code, parse_date
from apps.converter.domain.exceptions import InvalidInputError
from apps.converter.domain.models import format_money
from apps.converter.domain.services import ConversionService, ExchangeRateService
from apps.converter.infrastructure.catalog import CurrencyCatalog
from apps.converter.infrastructure.persistence.history import HistoryLog
from apps.converter.infrastructure.providers.registry import get_provider_instance

logger = logging.getLogger(__name__)

BANNER = (
    "===============================================\n"
    "           CURRENCY CONVERTER (LIVE + HIST)    \n"
    "==============================================="
)

MENU = (
    "\nMENU:\n"
    "1. Convert amount\n"
    "2. Historical rate for specific date\n"
    "3. Show last 7 days\n"
    "4. Change currencies\n"
    "5. Exit"
)


class CommandError(Exception):
    pass


class Command:
    help = 'Convert amounts between currencies using live and historical rates'

    def __init__(
        self,
        service: ExchangeRateService,
        catalog: CurrencyCatalog,
        history: HistoryLog,
        report: SevenDayReport,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.service = service
        self.catalog = catalog
        self.history = history
        self.report = report
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            '--base',
            type=str,
            help='Base currency code (e.g. USD); skips the interactive menu together with --target'
        )
        parser.add_argument(
            '--target',
            type=str,
            help='Target currency code (e.g. INR)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            help='Amount to convert and record in the history file'
        )
        parser.add_argument(
            '--date',
            type=str,
            help='Use the rate of this date (YYYY-MM-DD) instead of the live rate'
        )
        parser.add_argument(
            '--report',
            action='store_true',
            help='Print the rates of the last 7 days'
        )
        parser.add_argument(
            '--concurrent',
            action='store_true',
            help='Fetch the report days in parallel'
        )

    # Output / input helpers ------------------------------------

    def write(self, msg: str = "") -> None:
        self.stdout.write(msg + "\n")

    def prompt(self, msg: str) -> str:
        self.stdout.write(msg)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def read_code(self, msg: str) -> str:
        while True:
            try:
                return parse_currency_code(self.prompt(msg), self.catalog)
            except InvalidInputError:
                self.write("Invalid code. Example: USD, INR, EUR")

    def read_amount(self, msg: str) -> Decimal:
        while True:
            try:
                return parse_amount(self.prompt(msg))
            except InvalidInputError:
                self.write("Enter a valid number greater than 0.")

    # Operations -----------------------------------------------

    def print_currencies(self) -> None:
        self.write("\nAvailable Currencies:")
        for i, (code, name) in enumerate(self.catalog.items(), start=1):
            self.write(f"{i:2d}. {code:<5} {name:<25}")

    def convert_and_record(
        self,
        base: str,
        target: str,
        amount: Decimal,
        rate: Decimal,
        valuation_date: date | None = None
    ) -> None:
        record = ConversionService.build_record(base, target, amount, rate, valuation_date)
        self.write(
            f"\nRESULT: {format_money(amount)} {base} = "
            f"{format_money(record.converted_amount)} {target}"
        )
        if not self.history.append_record(record):
            logger.debug("Conversion shown but not recorded: %s %s -> %s", amount, base, target)

    def print_report(self, base: str, target: str, concurrent: bool = False) -> None:
        self.write(f"\nLast {self.report.days} days rates:")
        for entry in self.report.run(base, target, concurrent=concurrent):
            if entry.available:
                self.write(f"{entry.valuation_date} : 1 {base} = {format_money(entry.rate)} {target}")
            else:
                self.write(f"{entry.valuation_date} : no data")

    def historical_single(self, base: str, target: str) -> None:
        while True:
            raw = self.prompt("\nEnter date (YYYY-MM-DD) or 'b' to go back: ")
            if raw.lower() == "b":
                return

            try:
                valuation_date = parse_date(raw)
            except InvalidInputError:
                self.write("Invalid date.")
                continue

            rate = self.service.historical_rate(base, target, valuation_date)
            if rate is None:
                self.write("No historical data for this date.")
                continue

            self.write(f"On {valuation_date} → 1 {base} = {format_money(rate)} {target}")
            amount = self.read_amount("Enter amount to convert: ")
            self.convert_and_record(base, target, amount, rate, valuation_date)

    def menu_loop(self, base: str, target: str, rate: Decimal) -> bool:
        """
        Returns:
            True to go back to currency selection, False to exit
        """
        while True:
            self.write(MENU)
            choice = self.prompt("Choice: ")

            if choice == "1":
                amount = self.read_amount("\nEnter amount to convert: ")
                self.convert_and_record(base, target, amount, rate)
            elif choice == "2":
                self.historical_single(base, target)
            elif choice == "3":
                self.print_report(base, target)
            elif choice == "4":
                self.write()
                return True
            elif choice == "5":
                self.write("Goodbye!")
                return False
            else:
                self.write("Invalid choice.")

    def interactive(self) -> None:
        self.write(BANNER)

        while True:
            self.print_currencies()

            base = self.read_code("\nEnter BASE currency: ")
            target = self.read_code("Enter TARGET currency: ")

            self.write("\nFetching live exchange rate...")
            rate = self.service.live_rate(base, target)

            if rate is None:
                self.write("API Error: Try different currency.")
                continue

            self.write(f"Live Rate: 1 {base} = {format_money(rate)} {target}")

            if not self.menu_loop(base, target, rate):
                return

    def one_shot(self, **options) -> None:
        if options.get('report') and (options.get('amount') or options.get('date')):
            raise CommandError('--report cannot be combined with --amount or --date')

        try:
            base = parse_currency_code(options['base'], self.catalog)
            target = parse_currency_code(options['target'], self.catalog)
            valuation_date = parse_date(options['date']) if options.get('date') else None
            amount = parse_amount(options['amount']) if options.get('amount') else None
        except InvalidInputError as e:
            raise CommandError(str(e))

        if options.get('report'):
            self.print_report(base, target, concurrent=options.get('concurrent', False))
            return

        if valuation_date is None:
            rate = self.service.live_rate(base, target)
        else:
            rate = self.service.historical_rate(base, target, valuation_date)

        if rate is None:
            raise CommandError(f"Rate for {base}/{target} is not available right now")

        label = f"On {valuation_date} →" if valuation_date else "Live Rate:"
        self.write(f"{label} 1 {base} = {format_money(rate)} {target}")

        if amount is not None:
            self.convert_and_record(base, target, amount, rate, valuation_date)

    def handle(self, **options) -> None:
        has_base = bool(options.get('base'))
        has_target = bool(options.get('target'))
        if has_base != has_target:
            raise CommandError('--base and --target must be given together')

        if has_base:
            self.one_shot(**options)
            return

        try:
            self.interactive()
        except (EOFError, KeyboardInterrupt):
            self.write("\nGoodbye!")


def build_command(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Command:
    provider = get_provider_instance(settings.RATE_PROVIDER)
    if provider is None:
        raise CommandError(f"Unknown rate provider '{settings.RATE_PROVIDER}'")

    catalog = CurrencyCatalog()
    service = ExchangeRateService(provider, catalog)
    return Command(
        service=service,
        catalog=catalog,
        history=HistoryLog(settings.HISTORY_FILE),
        report=SevenDayReport(service),
        stdin=stdin,
        stdout=stdout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    init_logging(settings.LOG_LEVEL)

    parser = argparse.ArgumentParser(prog='currency-converter', description=Command.help)
    try:
        command = build_command()
        command.add_arguments(parser)
        options = vars(parser.parse_args(argv))
        command.handle(**options)
    except CommandError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
