"""
Unit tests for environment-backed settings.
"""

import pytest

from sales_report.config import get_settings, validate_top_n
from sales_report.errors import InvalidConfiguration


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SALES_REPORT_TOP_PRODUCTS", raising=False)
        monkeypatch.delenv("SALES_REPORT_LOG_LEVEL", raising=False)
        settings = get_settings()
        assert settings.top_products == 10
        assert settings.log_level == "INFO"

    def test_top_products_from_env(self, monkeypatch):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS", "3")
        assert get_settings().top_products == 3

    @pytest.mark.parametrize("raw", ["0", "-2", "11", "50"])
    def test_top_products_outside_range_rejected(self, monkeypatch, raw):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS", raw)
        with pytest.raises(InvalidConfiguration, match="between 1 and 10"):
            get_settings()

    def test_top_products_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS", "ten")
        with pytest.raises(ValueError, match="SALES_REPORT_TOP_PRODUCTS"):
            get_settings()


class TestValidateTopN:
    @pytest.mark.parametrize("top_n", [1, 5, 10])
    def test_in_range(self, top_n):
        assert validate_top_n(top_n) == top_n

    @pytest.mark.parametrize("top_n", [0, -1, 11, "3", None])
    def test_out_of_range_or_wrong_type(self, top_n):
        with pytest.raises(InvalidConfiguration):
            validate_top_n(top_n)
