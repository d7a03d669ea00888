# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Aggregate - Scorer Input

The aggregate is the flat set of counts and rates the health scorer works
from. It is assembled from a loaded property graph by `build_aggregate`,
which keeps the scorer itself free of any knowledge about units, payments
or maintenance requests.
"""

from __future__ import annotations

from typing import Optional

from ..core.base.property import PropertyRecord
from ..core.primitives.model import Model
from ..core.primitives.types import FiniteFloat, PositiveInt
from .signals import DefaultSignalProvider, SignalProvider


class PropertyAggregate(Model):
    """
    Counts and signals describing one property.

    Counts are not cross-checked (an occupied count above the unit count is
    accepted as given). Counts must be non-negative integers and signals
    finite; out-of-range signal values are clamped by the scorer, not here.

    Attributes:
        unit_count: Total number of units
        occupied_unit_count: Units with OCCUPIED status
        maintenance_request_count: All maintenance requests on the property
        urgent_maintenance_request_count: Requests with URGENT priority
        year_built: Construction year, None when not recorded
        amenity_count: Number of listed amenities
        collection_rate: Share of billed rent collected (0-100)
        inspection_status: Latest inspection outcome (0-100)
        market_position: Competitive standing in the market (0-100)
    """

    unit_count: PositiveInt = 0
    occupied_unit_count: PositiveInt = 0
    maintenance_request_count: PositiveInt = 0
    urgent_maintenance_request_count: PositiveInt = 0
    year_built: Optional[PositiveInt] = None
    amenity_count: PositiveInt = 0
    collection_rate: FiniteFloat = 85.0
    inspection_status: FiniteFloat = 80.0
    market_position: FiniteFloat = 75.0

    @property
    def occupancy_rate(self) -> float:
        """Occupied units as a percentage of all units (0 with no units)."""
        if self.unit_count == 0:
            return 0.0
        return self.occupied_unit_count / self.unit_count * 100


def build_aggregate(
    record: PropertyRecord, signals: Optional[SignalProvider] = None
) -> PropertyAggregate:
    """
    Assemble the scorer input from a loaded property graph.

    Args:
        record: Property with its units, payments and maintenance requests
        signals: Provider for the external signals (placeholder defaults
            when omitted)

    Returns:
        PropertyAggregate ready for `compute_health`
    """
    if signals is None:
        signals = DefaultSignalProvider()

    return PropertyAggregate(
        unit_count=len(record.units),
        occupied_unit_count=sum(1 for unit in record.units if unit.is_occupied),
        maintenance_request_count=len(record.maintenance_requests),
        urgent_maintenance_request_count=sum(
            1 for request in record.maintenance_requests if request.is_urgent
        ),
        year_built=record.year_built,
        amenity_count=len(record.amenities),
        collection_rate=signals.collection_rate(record),
        inspection_status=signals.inspection_status(record),
        market_position=signals.market_position(record),
    )
