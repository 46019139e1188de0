"""
Projection result models.

This module provides the immutable result values produced by the projection
engine and the comparison grouping assembled by callers.

The models serve as the unified output format that:
1. Carries year-level snapshots and aggregate performance metrics
2. Provides helper accessors for series and comparisons
3. Supports serialization for API responses and downstream reporting
"""

import json
from typing import Any, Dict, Iterator, Literal, Tuple

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from capitalvision.models.parameters import AssetKind

# Metrics accepted by ComparisonResult.best_performer
COMPARABLE_METRICS = (
    "final_capital",
    "net_final_capital",
    "total_dividends",
    "annual_return_pct",
    "internal_rate_of_return_pct",
    "net_present_value",
)


class YearlySnapshot(BaseModel):
    """State of a projection at the end of one simulated year."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(..., ge=1, description="Simulated year (1-based)")
    capital: float = Field(..., description="Capital at year end")
    dividends: float = Field(..., description="Returns generated during the year")
    fees: float = Field(..., description="Entry and management fees of the year")
    tax: float = Field(..., description="Tax on the year's returns")
    net_capital: float = Field(
        ..., description="Capital plus undistributed net returns when not reinvesting"
    )


class ProjectionResult(BaseModel):
    """
    Outcome of projecting one asset kind.

    Every monetary field comes from the monthly simulation loop. The
    internal rate of return is the two-point geometric return between total
    contributions and net final capital, not a cash-flow IRR; ``irr_method``
    records this.

    Example:
        ```python
        result = simulate(params, AssetKind.EQUITY_INDEX)
        result.net_final_capital
        result.get_capital_series()
        ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    asset_kind: AssetKind = Field(..., description="Projected asset kind")

    final_capital: float = Field(..., description="Capital after the last month")
    total_dividends: float = Field(..., description="Returns over the whole horizon")
    total_fees: float = Field(..., description="Entry and management fees paid")
    total_tax: float = Field(..., description="Tax charged on returns")
    net_final_capital: float = Field(
        ..., description="Final capital plus undistributed net returns"
    )
    total_investment: float = Field(
        ..., description="Initial amount plus all monthly payments"
    )

    annual_return_pct: float = Field(
        ..., description="Geometric average annual return on total contributions"
    )
    internal_rate_of_return_pct: float = Field(
        ..., description="Simplified internal rate of return"
    )
    irr_method: Literal["two_point_geometric"] = Field(
        default="two_point_geometric",
        description="How internal_rate_of_return_pct is computed",
    )
    net_present_value: float = Field(
        ..., description="Net final capital minus inflation-grown contributions"
    )

    yearly_data: Tuple[YearlySnapshot, ...] = Field(
        ..., description="One snapshot per simulated year, in order"
    )

    @field_validator("yearly_data")
    @classmethod
    def validate_year_sequence(
        cls, v: Tuple[YearlySnapshot, ...]
    ) -> Tuple[YearlySnapshot, ...]:
        """Validate that snapshots cover years 1..n without gaps."""
        for index, snapshot in enumerate(v):
            if snapshot.year != index + 1:
                raise ValueError(
                    f"yearly_data must be ordered from year 1 without gaps, "
                    f"got year {snapshot.year} at position {index}"
                )
        return v

    @property
    def years(self) -> int:
        """Get the number of simulated years."""
        return len(self.yearly_data)

    def get_capital_series(self) -> NDArray[np.float64]:
        """Get year-end capital for every year."""
        return np.array([s.capital for s in self.yearly_data], dtype=np.float64)

    def get_net_capital_series(self) -> NDArray[np.float64]:
        """Get year-end net capital for every year."""
        return np.array([s.net_capital for s in self.yearly_data], dtype=np.float64)

    def get_dividend_series(self) -> NDArray[np.float64]:
        """Get yearly returns for every year."""
        return np.array([s.dividends for s in self.yearly_data], dtype=np.float64)

    def get_snapshot(self, year: int) -> YearlySnapshot:
        """Get the snapshot of a simulated year (1-based)."""
        if not 1 <= year <= self.years:
            raise ValueError(f"Year {year} is outside the projection (1..{self.years})")
        return self.yearly_data[year - 1]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        """Convert result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


class ComparisonResult(BaseModel):
    """Projections of the three asset kinds from the same parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    income_property: ProjectionResult = Field(
        ..., description="Income property vehicle projection"
    )
    equity_index: ProjectionResult = Field(
        ..., description="Equity-index tracker projection"
    )
    risk_free_savings: ProjectionResult = Field(
        ..., description="Risk-free reference savings projection"
    )

    @model_validator(mode="after")
    def validate_projections_align(self) -> "ComparisonResult":
        """Validate that every slot holds its own asset kind over the same years."""
        years = self.income_property.years
        for asset_kind, result in self.items():
            if result.asset_kind != asset_kind:
                raise ValueError(
                    f"{asset_kind.value} holds a projection of "
                    f"{result.asset_kind.value}"
                )
            if result.years != years:
                raise ValueError(
                    f"All projections must cover the same years, "
                    f"{asset_kind.value} has {result.years} instead of {years}"
                )
        return self

    def get(self, asset_kind: AssetKind) -> ProjectionResult:
        """Get the projection for an asset kind."""
        return getattr(self, AssetKind(asset_kind).value)

    def items(self) -> Iterator[Tuple[AssetKind, ProjectionResult]]:
        """Iterate over (asset kind, projection) pairs in fixed order."""
        for asset_kind in AssetKind:
            yield asset_kind, self.get(asset_kind)

    def best_performer(self, metric: str = "net_final_capital") -> AssetKind:
        """
        Get the asset kind with the highest value for a metric.

        Ties resolve to the first asset kind in declaration order.

        Args:
            metric: Name of a ProjectionResult metric (see COMPARABLE_METRICS)

        Returns:
            The best performing asset kind
        """
        if metric not in COMPARABLE_METRICS:
            raise ValueError(f"Unknown metric: {metric}")

        best_kind, best_value = None, None
        for asset_kind, result in self.items():
            value = getattr(result, metric)
            if best_value is None or value > best_value:
                best_kind, best_value = asset_kind, value
        return best_kind

    def summary(self) -> Dict[str, Any]:
        """Create the key comparison figures shown next to the projections."""
        income, equity = self.income_property, self.equity_index
        return {
            "kpis": {
                asset_kind.value: {
                    "net_final_capital": result.net_final_capital,
                    "internal_rate_of_return_pct": result.internal_rate_of_return_pct,
                    "annual_return_pct": result.annual_return_pct,
                    "total_dividends": result.total_dividends,
                    "net_present_value": result.net_present_value,
                }
                for asset_kind, result in self.items()
            },
            "best_performer": {
                metric: self.best_performer(metric).value
                for metric in (
                    "net_final_capital",
                    "internal_rate_of_return_pct",
                    "total_dividends",
                )
            },
            "net_capital_difference": income.net_final_capital
            - equity.net_final_capital,
            "irr_gap_pct": abs(
                income.internal_rate_of_return_pct
                - equity.internal_rate_of_return_pct
            ),
        }

    def to_yearly_table(self) -> pd.DataFrame:
        """
        Build a year-by-year table of net capital and dividends per asset kind.

        Returns:
            DataFrame indexed by year with ``<asset_kind>_net_capital`` and
            ``<asset_kind>_dividends`` columns
        """
        columns: Dict[str, NDArray[np.float64]] = {}
        for asset_kind, result in self.items():
            columns[f"{asset_kind.value}_net_capital"] = result.get_net_capital_series()
            columns[f"{asset_kind.value}_dividends"] = result.get_dividend_series()

        years = [s.year for s in self.income_property.yearly_data]
        return pd.DataFrame(columns, index=pd.Index(years, name="year"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert comparison to a JSON-compatible dictionary."""
        data = {
            asset_kind.value: result.to_dict() for asset_kind, result in self.items()
        }
        data["summary"] = self.summary()
        return data
