"""
Investment parameters for capital projections.

This module defines the shared parameter set that drives every projection,
along with the asset kinds that can be projected and the scenario table
that scales market-driven rates.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class Scenario(str, Enum):
    """Macro assumption applied to market-driven rates."""

    OPTIMISTIC = "optimistic"
    NEUTRAL = "neutral"
    PESSIMISTIC = "pessimistic"


class AssetKind(str, Enum):
    """Financial products that can be projected."""

    INCOME_PROPERTY = "income_property"
    EQUITY_INDEX = "equity_index"
    RISK_FREE_SAVINGS = "risk_free_savings"

    @property
    def is_market_driven(self) -> bool:
        """Whether the scenario multiplier applies to this asset kind."""
        return self is not AssetKind.RISK_FREE_SAVINGS


SCENARIO_MULTIPLIERS: Mapping[Scenario, float] = MappingProxyType(
    {
        Scenario.OPTIMISTIC: 1.2,
        Scenario.NEUTRAL: 1.0,
        Scenario.PESSIMISTIC: 0.7,
    }
)

# Fixed annual rate (percent) of the risk-free reference savings account
RISK_FREE_REFERENCE_RATE_PCT = 2.0


def scenario_multiplier(scenario: Scenario) -> float:
    """Get the rate multiplier for a scenario."""
    return SCENARIO_MULTIPLIERS[Scenario(scenario)]


class InvestmentParameters(BaseModel):
    """Shared user parameters for a projection.

    Rates are expressed in percent (4.5 means 4.5 %). Instances are frozen so
    the same parameters can be handed to several projections safely.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_amount: float = Field(..., ge=0, description="Initial capital invested")
    monthly_payment: float = Field(
        ..., ge=0, description="Contribution added at the start of every month"
    )
    duration_years: int = Field(..., gt=0, description="Number of years simulated")

    scpi_annual_rate_pct: float = Field(
        ..., ge=0, description="Nominal annual rate of the income property vehicle"
    )
    etf_annual_rate_pct: float = Field(
        ..., ge=0, description="Nominal annual rate of the equity-index tracker"
    )

    management_fee_annual_pct: float = Field(
        default=0.0, ge=0, le=100, description="Annual management fee on capital"
    )
    entry_fee_pct: float = Field(
        default=0.0, ge=0, le=100, description="Fee charged on every contribution"
    )
    income_tax_rate_pct: float = Field(
        default=0.0, ge=0, le=100, description="Income tax on distributed returns"
    )
    social_tax_rate_pct: float = Field(
        default=0.0, ge=0, le=100, description="Social charges on distributed returns"
    )

    reinvest_dividends: bool = Field(
        default=True, description="Compound net returns back into capital"
    )
    inflation_rate_pct: float = Field(
        default=0.0, ge=0, description="Annual inflation used for the real-value check"
    )
    scenario: Scenario = Field(
        default=Scenario.NEUTRAL, description="Optimism applied to market rates"
    )

    @property
    def effective_tax_rate(self) -> float:
        """Combined tax rate on returns as a fraction."""
        return (self.income_tax_rate_pct + self.social_tax_rate_pct) / 100

    @property
    def total_investment(self) -> float:
        """Total capital contributed over the whole duration, before fees."""
        return self.initial_amount + self.monthly_payment * 12 * self.duration_years

    @classmethod
    def defaults(cls) -> "InvestmentParameters":
        """Parameters a new simulation starts from."""
        return cls(
            initial_amount=10000,
            monthly_payment=500,
            duration_years=10,
            scpi_annual_rate_pct=4.5,
            etf_annual_rate_pct=7.0,
            management_fee_annual_pct=1.5,
            entry_fee_pct=5.0,
            income_tax_rate_pct=30.0,
            social_tax_rate_pct=17.2,
            reinvest_dividends=True,
            inflation_rate_pct=2.0,
            scenario=Scenario.NEUTRAL,
        )

    @classmethod
    def from_partial(cls, overrides: Dict[str, Any]) -> "InvestmentParameters":
        """Build parameters from defaults updated with the given fields.

        Raises:
            pydantic.ValidationError: If a field is unknown or out of range
        """
        data = cls.defaults().model_dump()
        data.update(overrides)
        return cls.model_validate(data)
