"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as SettingsError

from myshop.infrastructure.bootstrap import pricing_policy
from myshop.infrastructure.settings import Settings, get_settings


class TestPricingSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.free_shipping_threshold == Decimal("200.00")
        assert settings.standard_shipping_cost == Decimal("15.00")
        assert settings.large_order_threshold == Decimal("500.00")
        assert settings.large_order_discount_rate == Decimal("0.10")

    @pytest.mark.parametrize(
        "variable",
        [
            "MYSHOP_FREE_SHIPPING_THRESHOLD",
            "MYSHOP_STANDARD_SHIPPING_COST",
            "MYSHOP_LARGE_ORDER_THRESHOLD",
            "MYSHOP_LARGE_ORDER_DISCOUNT_RATE",
        ],
    )
    def test_negative_value_rejected_at_load(self, monkeypatch, variable):
        monkeypatch.setenv(variable, "-1")
        with pytest.raises(SettingsError):
            Settings(_env_file=None)

    def test_policy_built_from_environment(self, monkeypatch):
        monkeypatch.setenv("MYSHOP_STANDARD_SHIPPING_COST", "9.90")
        get_settings.cache_clear()
        try:
            assert pricing_policy().standard_shipping_cost == Decimal("9.90")
        finally:
            get_settings.cache_clear()
