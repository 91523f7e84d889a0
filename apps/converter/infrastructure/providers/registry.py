"""
Provider Registry - Maps provider names to adapter classes.
The configured name (CONVERTER_RATE_PROVIDER) is resolved here.
"""

import logging

from apps.converter.domain.interfaces import BaseExchangeRateProvider
from apps.converter.infrastructure.providers.frankfurter import FrankfurterProvider
from apps.converter.infrastructure.providers.mock import MockProvider

logger = logging.getLogger(__name__)


PROVIDER_REGISTRY: dict[str, type[BaseExchangeRateProvider]] = {
    "frankfurter": FrankfurterProvider,
    "mock": MockProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.error("Provider '%s' not found in registry", provider_name)
        return None

    return provider_class()
