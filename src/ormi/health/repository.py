# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property repository - data access for health calculation.

The health service only needs three things from storage: load a property
graph, enumerate property ids, and persist a score with its timestamp.
Backends implement `PropertyRepository`; `InMemoryPropertyRepository` is
the reference implementation used by tests and in-process tooling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..core.base.property import PropertyRecord


class PropertyNotFoundError(LookupError):
    """Raised when a property id does not resolve to a stored property."""

    def __init__(self, property_id: str):
        super().__init__(f"Property not found: {property_id}")
        self.property_id = property_id


class PropertyRepository(ABC):
    """Storage interface for properties and their persisted health."""

    @abstractmethod
    def get(self, property_id: str) -> PropertyRecord:
        """
        Load a property with its units, payments and maintenance requests.

        Raises:
            PropertyNotFoundError: If no property has the given id
        """
        pass

    @abstractmethod
    def list_ids(self) -> List[str]:
        pass

    @abstractmethod
    def save_health(
        self, property_id: str, score: int, calculated_at: datetime
    ) -> PropertyRecord:
        """
        Persist a health score and its calculation time.

        Returns:
            The updated property record

        Raises:
            PropertyNotFoundError: If no property has the given id
        """
        pass


class InMemoryPropertyRepository(PropertyRepository):
    """Dictionary-backed repository holding immutable property records."""

    def __init__(self, properties: Optional[Iterable[PropertyRecord]] = None):
        self._properties: Dict[str, PropertyRecord] = {}
        for record in properties or []:
            self.add(record)

    def add(self, record: PropertyRecord) -> None:
        """Insert or replace a property."""
        self._properties[record.id] = record

    def get(self, property_id: str) -> PropertyRecord:
        try:
            return self._properties[property_id]
        except KeyError:
            raise PropertyNotFoundError(property_id) from None

    def list_ids(self) -> List[str]:
        return list(self._properties)

    def save_health(
        self, property_id: str, score: int, calculated_at: datetime
    ) -> PropertyRecord:
        updated = self.get(property_id).model_copy(
            update={
                "property_health": score,
                "last_health_calculation": calculated_at,
            }
        )
        self._properties[property_id] = updated
        return updated

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._properties
