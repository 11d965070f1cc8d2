"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from sales_report.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.top_products_limit == 10
        assert s.seed == 42

    def test_limit_read_from_env(self, monkeypatch):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS_LIMIT", "3")
        assert Settings(_env_file=None).top_products_limit == 3

    def test_negative_limit_rejected(self, monkeypatch):
        monkeypatch.setenv("SALES_REPORT_TOP_PRODUCTS_LIMIT", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_zero_limit_allowed(self):
        assert Settings(_env_file=None, top_products_limit=0).top_products_limit == 0
