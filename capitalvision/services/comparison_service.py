"""
Comparison service for projecting all asset kinds from one parameter set.

This service is the caller of the projection engine: it runs one projection
per asset kind and groups the results into a ComparisonResult.
"""

import logging
from typing import Any, Dict, Union

from capitalvision.models.parameters import AssetKind, InvestmentParameters
from capitalvision.models.projection import (
    ComparisonResult,
    ProjectionResult,
    simulate,
)

logger = logging.getLogger(__name__)


class ComparisonService:
    """Service for running and comparing capital projections."""

    def __init__(self) -> None:
        """Initialize the comparison service."""
        self.logger = logging.getLogger(__name__)

    def project(
        self,
        params: InvestmentParameters,
        asset_kind: Union[AssetKind, str],
    ) -> ProjectionResult:
        """Run the projection of a single asset kind.

        Args:
            params: Investment parameters
            asset_kind: Asset kind to project

        Returns:
            ProjectionResult for the asset kind

        Raises:
            InvalidParameterError: If parameters cannot be simulated
            ValueError: If the asset kind is unknown
        """
        asset_kind = AssetKind(asset_kind)
        self.logger.debug(
            f"Projecting {asset_kind.value} over {params.duration_years} years "
            f"({params.scenario.value} scenario)"
        )

        result = simulate(params, asset_kind)

        self.logger.debug(
            f"Projection {asset_kind.value} done: "
            f"net final capital {result.net_final_capital:.2f}"
        )
        return result

    def compare(self, params: InvestmentParameters) -> ComparisonResult:
        """Project every asset kind and group the results.

        Args:
            params: Investment parameters shared by all projections

        Returns:
            ComparisonResult with one projection per asset kind

        Raises:
            InvalidParameterError: If parameters cannot be simulated
        """
        self.logger.info(
            f"Starting comparison over {params.duration_years} years "
            f"with {params.scenario.value} scenario"
        )

        try:
            comparison = ComparisonResult(
                **{
                    asset_kind.value: self.project(params, asset_kind)
                    for asset_kind in AssetKind
                }
            )
        except Exception as e:
            self.logger.error(f"Comparison failed: {str(e)}")
            raise

        self.logger.info(
            f"Completed comparison, best performer "
            f"{comparison.best_performer().value}"
        )
        return comparison

    def compare_from_dict(self, data: Dict[str, Any]) -> ComparisonResult:
        """Compare projections for parameters given as a partial dictionary.

        Missing fields take the default parameter values.

        Raises:
            pydantic.ValidationError: If a field is unknown or out of range
            InvalidParameterError: If parameters cannot be simulated
        """
        return self.compare(InvestmentParameters.from_partial(data))
