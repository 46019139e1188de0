"""
Projection engine for capital growth.

This module simulates, month by month, how capital evolves when invested in
one asset kind, and derives year-level snapshots and aggregate performance
metrics from that path.

The engine is a set of pure functions:
1. ``resolve_rates`` turns parameters and an asset kind into monthly rates
2. ``iterate_months`` yields the state after every simulated month
3. ``simulate`` folds the monthly states into a ProjectionResult

No state is kept between calls, so projections of different asset kinds can
be run in any order or side by side.
"""

import math
from typing import Iterator, List

from pydantic import BaseModel, ConfigDict, Field

from capitalvision.models.exceptions import InvalidParameterError
from capitalvision.models.parameters import (
    RISK_FREE_REFERENCE_RATE_PCT,
    AssetKind,
    InvestmentParameters,
    scenario_multiplier,
)
from capitalvision.models.projection.result import ProjectionResult, YearlySnapshot

MONTHS_PER_YEAR = 12


class ResolvedRates(BaseModel):
    """Rates applied to one projection."""

    model_config = ConfigDict(frozen=True)

    nominal_rate_pct: float = Field(..., description="Rate before scenario scaling")
    effective_rate_pct: float = Field(..., description="Rate after scenario scaling")
    monthly_rate: float = Field(..., description="Monthly return as a fraction")
    effective_tax_rate: float = Field(..., description="Tax on returns as a fraction")
    compounds: bool = Field(
        ..., description="Whether net monthly returns are added back to capital"
    )


class MonthlyState(BaseModel):
    """Capital and flows of one simulated month."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    capital: float = Field(..., description="Capital after the month's update")
    contribution_fee: float
    dividend: float
    management_fee: float
    tax: float


def validate_parameters(params: InvestmentParameters) -> None:
    """
    Check that parameters can be simulated.

    InvestmentParameters already validates on construction; this guards
    instances built without validation (e.g. ``model_construct``).

    Raises:
        InvalidParameterError: If the duration is not positive or an amount
            or rate is negative
    """
    if params.duration_years <= 0:
        raise InvalidParameterError(
            f"duration_years must be positive, got {params.duration_years}"
        )

    for name in (
        "initial_amount",
        "monthly_payment",
        "scpi_annual_rate_pct",
        "etf_annual_rate_pct",
        "management_fee_annual_pct",
        "entry_fee_pct",
        "income_tax_rate_pct",
        "social_tax_rate_pct",
        "inflation_rate_pct",
    ):
        value = getattr(params, name)
        if value < 0:
            raise InvalidParameterError(f"{name} cannot be negative: {value}")


def resolve_rates(
    params: InvestmentParameters, asset_kind: AssetKind
) -> ResolvedRates:
    """
    Resolve the rates used to project an asset kind.

    The risk-free reference savings always use the fixed reference rate and
    ignore the scenario; market-driven kinds are scaled by the scenario
    multiplier.
    """
    asset_kind = AssetKind(asset_kind)

    if asset_kind is AssetKind.INCOME_PROPERTY:
        nominal_rate = params.scpi_annual_rate_pct
    elif asset_kind is AssetKind.EQUITY_INDEX:
        nominal_rate = params.etf_annual_rate_pct
    else:
        nominal_rate = RISK_FREE_REFERENCE_RATE_PCT

    effective_rate = nominal_rate
    if asset_kind.is_market_driven:
        effective_rate *= scenario_multiplier(params.scenario)

    return ResolvedRates(
        nominal_rate_pct=nominal_rate,
        effective_rate_pct=effective_rate,
        monthly_rate=effective_rate / 100 / MONTHS_PER_YEAR,
        effective_tax_rate=params.effective_tax_rate,
        # Risk-free savings never compound, even when reinvesting
        compounds=params.reinvest_dividends and asset_kind.is_market_driven,
    )


def iterate_months(
    params: InvestmentParameters, asset_kind: AssetKind
) -> Iterator[MonthlyState]:
    """
    Simulate capital month by month.

    Each month the contribution (net of entry fee) is credited first, then
    the return, management fee and tax are computed on the updated capital.

    Args:
        params: Investment parameters
        asset_kind: Asset kind to project

    Yields:
        MonthlyState for every month, ``duration_years * 12`` in total

    Raises:
        InvalidParameterError: If parameters cannot be simulated
    """
    validate_parameters(params)
    rates = resolve_rates(params, asset_kind)

    entry_fee_rate = params.entry_fee_pct / 100
    capital = params.initial_amount * (1 - entry_fee_rate)

    for year in range(1, params.duration_years + 1):
        for month in range(1, MONTHS_PER_YEAR + 1):
            contribution_fee = 0.0
            if params.monthly_payment > 0:
                capital += params.monthly_payment * (1 - entry_fee_rate)
                contribution_fee = params.monthly_payment * params.entry_fee_pct / 100

            dividend = capital * rates.monthly_rate
            management_fee = (
                capital * (params.management_fee_annual_pct / 100) / MONTHS_PER_YEAR
            )
            tax = dividend * rates.effective_tax_rate

            if rates.compounds:
                capital += dividend - tax - management_fee
            else:
                capital -= management_fee

            yield MonthlyState(
                year=year,
                month=month,
                capital=capital,
                contribution_fee=contribution_fee,
                dividend=dividend,
                management_fee=management_fee,
                tax=tax,
            )


def annual_return_pct(
    total_investment: float, final_value: float, years: int
) -> float:
    """
    Average annual growth (percent) from total investment to final value.

    A total loss gives -100. A negative final value is floored at -100, since
    its fractional root has no real value. Returns 0 when nothing was invested.
    """
    if total_investment <= 0 or years <= 0:
        return 0.0
    if final_value < 0:
        return -100.0
    return ((final_value / total_investment) ** (1 / years) - 1) * 100


def geometric_return_pct(
    total_investment: float, final_value: float, years: int
) -> float:
    """
    Two-point geometric rate used as the internal rate of return.

    Returns 0 when there is nothing to compare: no investment, a final value
    that is not positive, or no elapsed years.
    """
    if total_investment <= 0 or final_value <= 0 or years <= 0:
        return 0.0
    return ((final_value / total_investment) ** (1 / years) - 1) * 100


def compound_factor(rate_pct: float, years: int) -> float:
    """Growth factor of ``rate_pct`` over ``years``, saturating to infinity."""
    try:
        return (1 + rate_pct / 100) ** years
    except OverflowError:
        return math.inf


def simulate(params: InvestmentParameters, asset_kind: AssetKind) -> ProjectionResult:
    """
    Project capital growth for one asset kind.

    Args:
        params: Investment parameters
        asset_kind: Asset kind to project

    Returns:
        ProjectionResult with yearly snapshots and aggregate metrics

    Raises:
        InvalidParameterError: If parameters cannot be simulated
    """
    asset_kind = AssetKind(asset_kind)
    reinvest = params.reinvest_dividends

    total_dividends = 0.0
    total_fees = params.initial_amount * params.entry_fee_pct / 100
    total_tax = 0.0
    capital = params.initial_amount * (1 - params.entry_fee_pct / 100)

    yearly_data: List[YearlySnapshot] = []
    yearly_dividends = yearly_fees = yearly_tax = 0.0

    for state in iterate_months(params, asset_kind):
        # Same accumulation order as the monthly loop: contribution fee first
        yearly_fees += state.contribution_fee
        yearly_dividends += state.dividend
        yearly_fees += state.management_fee
        yearly_tax += state.tax
        capital = state.capital

        if state.month == MONTHS_PER_YEAR:
            total_dividends += yearly_dividends
            total_fees += yearly_fees
            total_tax += yearly_tax

            yearly_data.append(
                YearlySnapshot(
                    year=state.year,
                    capital=capital,
                    dividends=yearly_dividends,
                    fees=yearly_fees,
                    tax=yearly_tax,
                    net_capital=capital
                    + (0 if reinvest else yearly_dividends - yearly_tax),
                )
            )
            yearly_dividends = yearly_fees = yearly_tax = 0.0

    final_capital = capital
    net_final_capital = final_capital + (0 if reinvest else total_dividends - total_tax)
    total_investment = params.total_investment
    annual_return = annual_return_pct(
        total_investment, net_final_capital, params.duration_years
    )
    internal_rate_of_return = geometric_return_pct(
        total_investment, net_final_capital, params.duration_years
    )

    inflation_factor = compound_factor(params.inflation_rate_pct, params.duration_years)
    # inf * 0 is nan; nothing invested has nothing to deflate
    inflated_investment = total_investment * inflation_factor if total_investment else 0.0
    net_present_value = net_final_capital - inflated_investment

    return ProjectionResult(
        asset_kind=asset_kind,
        final_capital=final_capital,
        total_dividends=total_dividends,
        total_fees=total_fees,
        total_tax=total_tax,
        net_final_capital=net_final_capital,
        total_investment=total_investment,
        annual_return_pct=annual_return,
        internal_rate_of_return_pct=internal_rate_of_return,
        net_present_value=net_present_value,
        yearly_data=tuple(yearly_data),
    )
