# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi Reporting Module

Presentation-ready views over computed health results:
    results = service.recalculate_all()
    table = health_report(results)
    grades = grade_distribution(table)
"""

from .base import BaseReport
from .health_report import PortfolioHealthReport, grade_distribution, health_report

__all__ = [
    "BaseReport",
    "PortfolioHealthReport",
    "grade_distribution",
    "health_report",
]
