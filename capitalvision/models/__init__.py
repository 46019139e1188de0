"""Data models for capital projections."""

from .exceptions import InvalidParameterError, ProjectionError
from .formatting import CurrencyFormatter, format_currency, format_percentage
from .parameters import (
    RISK_FREE_REFERENCE_RATE_PCT,
    SCENARIO_MULTIPLIERS,
    AssetKind,
    InvestmentParameters,
    Scenario,
    scenario_multiplier,
)
from .projection import (
    ComparisonResult,
    ProjectionResult,
    YearlySnapshot,
    simulate,
)

__all__ = [
    "AssetKind",
    "Scenario",
    "InvestmentParameters",
    "SCENARIO_MULTIPLIERS",
    "RISK_FREE_REFERENCE_RATE_PCT",
    "scenario_multiplier",
    "ProjectionError",
    "InvalidParameterError",
    "CurrencyFormatter",
    "format_currency",
    "format_percentage",
    "ComparisonResult",
    "ProjectionResult",
    "YearlySnapshot",
    "simulate",
]
