from apps.converter.infrastructure.providers.registry import (
    get_provider_instance,
    PROVIDER_REGISTRY
)
from apps.converter.infrastructure.providers.mock import MockProvider
from apps.converter.infrastructure.providers.frankfurter import FrankfurterProvider


class TestProviderRegistry:
    """Tests for provider registry functions."""

    def test_provider_registry_contains_providers(self):
        """
        Test that PROVIDER_REGISTRY contains expected providers.
        """
        assert "mock" in PROVIDER_REGISTRY
        assert "frankfurter" in PROVIDER_REGISTRY

    def test_get_provider_instance_mock(self):
        instance = get_provider_instance("mock")

        assert isinstance(instance, MockProvider)

    def test_get_provider_instance_frankfurter(self):
        """
        Test that the Frankfurter provider picks up the configured defaults.
        """
        instance = get_provider_instance("frankfurter")

        assert isinstance(instance, FrankfurterProvider)
        assert instance.timeout > 0
        assert instance.base_url.startswith("http")

    def test_get_provider_instance_invalid(self):
        """
        Test that get_provider_instance returns None for invalid provider name.
        """
        instance = get_provider_instance("invalid_provider")

        assert instance is None
