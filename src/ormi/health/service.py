# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Health Service

Glue between storage and the pure scorer: loads a property, builds its
aggregate, scores it, and writes the score back with a timestamp. Also
serves stored scores, recalculating them on read once they go stale.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from ..core.base.property import PropertyRecord
from ..core.primitives.settings import HealthSettings
from .aggregate import build_aggregate
from .repository import PropertyRepository
from .results import HealthScoreResult
from .scoring import compute_health
from .signals import DefaultSignalProvider, SignalProvider

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment



class PropertyHealthService:
    """
    Calculates and persists property health scores.

    Args:
        repository: Where properties are loaded from and scores written to
        signals: Provider for collection rate, inspection status and market
            position (placeholder defaults when omitted)
        settings: Weights, defaults and staleness window
        clock: Returns the current time; also fixes the reference year for
            the age factor (naive datetimes are read as UTC)

    Example:
        ```python
        service = PropertyHealthService(InMemoryPropertyRepository([record]))
        result = service.update(record.id)
        print(f"{result.score} ({result.grade.value}, {result.status.value})")
        ```
    """

    def __init__(
        self,
        repository: PropertyRepository,
        signals: Optional[SignalProvider] = None,
        settings: Optional[HealthSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.repository = repository
        self.settings = settings or HealthSettings()
        self.signals = signals or DefaultSignalProvider(self.settings.signal_defaults)
        self.clock = clock or utc_now

    def calculate(self, property_id: str) -> HealthScoreResult:
        """
        Score a property without persisting anything.

        Raises:
            PropertyNotFoundError: If the property does not exist
        """
        record = self.repository.get(property_id)
        return self.calculate_for(record)

    def calculate_for(self, record: PropertyRecord) -> HealthScoreResult:
        """Score an already loaded property."""
        aggregate = build_aggregate(record, self.signals)
        return compute_health(aggregate, self.settings, as_of=self.clock().date())

    def update(self, property_id: str) -> HealthScoreResult:
        """
        Recalculate a property's score and write it back.

        Raises:
            PropertyNotFoundError: If the property does not exist
        """
        result = self.calculate(property_id)
        self.repository.save_health(property_id, result.score, self.clock())
        logger.info(f"Updated property {property_id} health to {result.score}")
        return result

    def is_stale(self, record: PropertyRecord) -> bool:
        """True when the stored score is missing or older than the staleness window."""
        calculated_at = record.last_health_calculation
        if calculated_at is None:
            return True
        # Naive timestamps, stored or from the clock, are UTC
        return as_utc(self.clock()) - as_utc(calculated_at) > self.settings.staleness_window

    def current_score(self, property_id: str) -> int:
        """
        Stored health score, refreshed first if it is stale.

        A failed refresh is logged and the previously stored score (0 if
        none) is returned instead.

        Raises:
            PropertyNotFoundError: If the property does not exist
        """
        record = self.repository.get(property_id)
        score = record.property_health or 0

        if self.is_stale(record):
            try:
                score = self.update(property_id).score
            except Exception as e:
                logger.warning(
                    f"Failed to calculate health for property {property_id}, "
                    f"using existing score {score}: {e}"
                )

        return score

    def recalculate_all(self) -> Dict[str, HealthScoreResult]:
        """
        Recalculate and persist every property's score.

        Properties that fail are logged and left out of the returned mapping.
        """
        logger.info("Recalculating health for all properties")
        results: Dict[str, HealthScoreResult] = {}
        for property_id in self.repository.list_ids():
            try:
                results[property_id] = self.update(property_id)
            except Exception as e:
                logger.warning(f"Failed to update health for property {property_id}: {e}")
        logger.info(f"Recalculated health for {len(results)} properties")
        return results
