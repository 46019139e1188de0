"""
Capital projection module.

This module provides the deterministic projection engine and the result
values it produces.

Key Components:
- engine: rate resolution, the monthly simulation loop and ``simulate``
- result: yearly snapshots, per-asset results and the three-asset comparison
"""

from .engine import (
    MonthlyState,
    ResolvedRates,
    annual_return_pct,
    compound_factor,
    geometric_return_pct,
    iterate_months,
    resolve_rates,
    simulate,
    validate_parameters,
)
from .result import ComparisonResult, ProjectionResult, YearlySnapshot

__all__ = [
    "simulate",
    "iterate_months",
    "resolve_rates",
    "validate_parameters",
    "annual_return_pct",
    "geometric_return_pct",
    "compound_factor",
    "MonthlyState",
    "ResolvedRates",
    "ProjectionResult",
    "YearlySnapshot",
    "ComparisonResult",
]
