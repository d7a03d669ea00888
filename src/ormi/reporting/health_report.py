# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Health Report

One row per property with its score, grade, status and every factor
sub-score, the view dashboards and exports are built from.
"""

from __future__ import annotations

from typing import Mapping, Optional

import pandas as pd

from ..core.primitives.enums import HealthFactorEnum, HealthGradeEnum
from ..core.primitives.settings import ReportingSettings
from ..health.results import HealthScoreResult
from .base import BaseReport

SUMMARY_COLUMNS = ["score", "grade", "status"]
FACTOR_COLUMNS = [factor.value for factor in HealthFactorEnum]


class PortfolioHealthReport(BaseReport):
    """
    Tabular health overview for a portfolio of properties.

    Example:
        ```python
        results = service.recalculate_all()
        report = PortfolioHealthReport(results).generate()
        report[report["grade"] == "F"]  # properties needing attention
        ```
    """

    def generate(self, sort: bool = True) -> pd.DataFrame:
        """
        Build the portfolio table.

        Args:
            sort: Order rows by score, best first (ties keep input order)

        Returns:
            DataFrame indexed by property id with columns score, grade,
            status and one column per health factor
        """
        rows = {
            property_id: {
                "score": result.score,
                "grade": result.grade.value,
                "status": result.status.value,
                **result.breakdown.as_dict(),
            }
            for property_id, result in self._results.items()
        }

        report = pd.DataFrame.from_dict(
            rows, orient="index", columns=SUMMARY_COLUMNS + FACTOR_COLUMNS
        )
        report.index.name = "property_id"
        if report.empty:
            return report

        report["score"] = report["score"].astype(int)
        report[FACTOR_COLUMNS] = (
            report[FACTOR_COLUMNS].astype(float).round(self.settings.decimal_precision)
        )
        if sort:
            report = report.sort_values("score", ascending=False, kind="stable")
        return report


def health_report(
    results: Mapping[str, HealthScoreResult],
    settings: Optional[ReportingSettings] = None,
) -> pd.DataFrame:
    """Shortcut for `PortfolioHealthReport(results, settings).generate()`."""
    return PortfolioHealthReport(results, settings).generate()


def grade_distribution(report: pd.DataFrame) -> pd.Series:
    """
    Count properties per letter grade.

    Args:
        report: Output of `health_report`

    Returns:
        Series indexed A..F (every grade present, zero when unused)
    """
    grades = [grade.value for grade in HealthGradeEnum]
    counts = report["grade"].value_counts().reindex(grades, fill_value=0).astype(int)
    counts.index.name = "grade"
    counts.name = "properties"
    return counts
