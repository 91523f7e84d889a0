"""
Rate extraction from raw response text.

The payload is scanned as text rather than decoded: the first
``"<CODE>":<number>`` occurrence anywhere in the body is taken as the rate.
Known limitation: the scan is not aware of the document structure, so if
the code also appears as a key in some other section (or twice in the
rates object) the earliest match wins.
"""

import re
from decimal import Decimal, InvalidOperation

NUMBER_PATTERN = r"([0-9.]+(?:[eE][-+]?[0-9]+)?)"


def extract_rate(body: str, currency_code: str) -> Decimal | None:
    """
    Args:
        body: Response text, e.g. '{"base":"USD","rates":{"INR":83.12}}'
        currency_code: Code whose rate is wanted (e.g. "INR")

    Returns:
        The rate as a positive Decimal, or None if not found
    """
    pattern = re.compile('"' + re.escape(currency_code) + r'"\s*:\s*' + NUMBER_PATTERN)
    match = pattern.search(body)
    if match is None:
        return None

    try:
        rate = Decimal(match.group(1))
    except InvalidOperation:
        return None

    if not rate.is_finite() or rate <= 0:
        return None
    return rate
