# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi Property Health

Scores a property's operational state on a 0-100 scale from occupancy,
maintenance backlog, building age, amenities and three external signals
(collection rate, inspection status, market position).

Key Components:
- compute_health: pure scorer over a PropertyAggregate
- build_aggregate: property graph -> PropertyAggregate
- PropertyHealthService: load, score and persist via a PropertyRepository
- HealthTriggers: recalculation hooks for data changes

Example:
    ```python
    from ormi.health import PropertyAggregate, compute_health

    result = compute_health(PropertyAggregate(unit_count=10, occupied_unit_count=9))
    print(result.score, result.grade.value, result.breakdown.as_dict())
    ```
"""

from .aggregate import PropertyAggregate, build_aggregate
from .repository import (
    InMemoryPropertyRepository,
    PropertyNotFoundError,
    PropertyRepository,
)
from .results import HealthBreakdown, HealthFactors, HealthScoreResult
from .scoring import (
    age_score,
    amenities_score,
    compute_breakdown,
    compute_health,
    financial_score,
    grade_for,
    inspection_score,
    maintenance_score,
    market_score,
    occupancy_score,
    property_age,
    status_for,
)
from .service import PropertyHealthService
from .signals import (
    DefaultSignalProvider,
    PaymentCollectionSignalProvider,
    SignalProvider,
)
from .triggers import HealthTriggers

__all__ = [
    # Aggregate
    "PropertyAggregate",
    "build_aggregate",
    # Results
    "HealthBreakdown",
    "HealthFactors",
    "HealthScoreResult",
    # Scoring
    "compute_health",
    "compute_breakdown",
    "occupancy_score",
    "maintenance_score",
    "age_score",
    "amenities_score",
    "financial_score",
    "inspection_score",
    "market_score",
    "grade_for",
    "status_for",
    "property_age",
    # Signals
    "SignalProvider",
    "DefaultSignalProvider",
    "PaymentCollectionSignalProvider",
    # Storage and services
    "PropertyRepository",
    "InMemoryPropertyRepository",
    "PropertyNotFoundError",
    "PropertyHealthService",
    "HealthTriggers",
]
