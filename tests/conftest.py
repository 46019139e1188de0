"""
Pytest configuration and shared fixtures for the CapitalVision tests.
"""

import os

import pytest

# Settings require a secret key; set one before the application is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "testing")

from capitalvision import create_app  # noqa: E402
from capitalvision.config import reset_global_settings  # noqa: E402
from capitalvision.models.parameters import InvestmentParameters  # noqa: E402


@pytest.fixture
def default_params():
    """Parameters a new simulation starts from."""
    return InvestmentParameters.defaults()


@pytest.fixture
def frictionless_params():
    """Parameters without fees, taxes or inflation, for hand-checked figures."""
    return InvestmentParameters(
        initial_amount=1000,
        monthly_payment=0,
        duration_years=1,
        scpi_annual_rate_pct=12.0,
        etf_annual_rate_pct=12.0,
        management_fee_annual_pct=0,
        entry_fee_pct=0,
        income_tax_rate_pct=0,
        social_tax_rate_pct=0,
        reinvest_dividends=True,
        inflation_rate_pct=0,
    )


@pytest.fixture
def app():
    """Create an application configured for testing."""
    reset_global_settings()
    app = create_app("testing")
    yield app
    reset_global_settings()


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    return app.test_client()
