# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports turn already computed health results into presentation-ready
tables. They only format and arrange data, never score anything.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from ..core.primitives.settings import ReportingSettings
from ..health.results import HealthScoreResult


class BaseReport(ABC):
    """
    Abstract base class for reports over a set of health results.

    Args:
        results: Property id to health result, e.g. the output of
            `PropertyHealthService.recalculate_all()`
        settings: Display settings (decimal precision)
    """

    def __init__(
        self,
        results: Mapping[str, HealthScoreResult],
        settings: Optional[ReportingSettings] = None,
    ):
        for property_id, result in results.items():
            if not isinstance(result, HealthScoreResult):
                raise TypeError(
                    f"Expected HealthScoreResult for property {property_id}, "
                    f"got {type(result).__name__}"
                )
        self._results: Dict[str, HealthScoreResult] = dict(results)
        self.settings = settings or ReportingSettings()

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Build the report output (DataFrame, Series, dict, ...)."""
        pass
