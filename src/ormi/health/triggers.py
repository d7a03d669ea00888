# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Health recalculation triggers.

Write paths call these hooks after changing data that feeds the health
score. A trigger never fails the write that fired it: errors are logged and
the hook returns None.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.primitives.enums import HealthTriggerEnum
from .results import HealthScoreResult
from .service import PropertyHealthService

logger = logging.getLogger(__name__)


class HealthTriggers:
    """Recalculates a property's stored health when its inputs change."""

    def __init__(self, service: PropertyHealthService):
        self.service = service

    def fire(
        self, property_id: str, trigger: HealthTriggerEnum
    ) -> Optional[HealthScoreResult]:
        """Recalculate and persist health for a property after a change."""
        trigger = HealthTriggerEnum(trigger)
        logger.debug(
            f"{trigger.value} changed for property {property_id}, recalculating health"
        )
        try:
            result = self.service.update(property_id)
        except Exception:
            logger.exception(
                f"Failed to recalculate health for property {property_id} "
                f"after {trigger.value} change"
            )
            return None
        logger.debug(f"Health recalculated for property {property_id}")
        return result

    def on_unit_status_change(self, property_id: str) -> Optional[HealthScoreResult]:
        """Call when a unit is created, deleted, or changes status."""
        return self.fire(property_id, HealthTriggerEnum.UNIT_STATUS)

    def on_maintenance_request_change(
        self, property_id: str
    ) -> Optional[HealthScoreResult]:
        """Call when a maintenance request is created, updated, or completed."""
        return self.fire(property_id, HealthTriggerEnum.MAINTENANCE_REQUEST)

    def on_property_details_change(
        self, property_id: str
    ) -> Optional[HealthScoreResult]:
        """Call when amenities, year built, or other property fields change."""
        return self.fire(property_id, HealthTriggerEnum.PROPERTY_DETAILS)

    def on_financial_data_change(
        self, property_id: str
    ) -> Optional[HealthScoreResult]:
        """Call when payments, rents, or collection figures change."""
        return self.fire(property_id, HealthTriggerEnum.FINANCIAL_DATA)
