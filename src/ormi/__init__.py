# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi - Property Health for Property Management

Scores the operational health of rental properties from their units,
maintenance backlog, age, amenities and financial signals.

Key Entry Points:
- ormi.health.compute_health() - Pure scorer over a PropertyAggregate
- ormi.health.PropertyHealthService - Load, score and persist via a repository
- ormi.health.HealthTriggers - Recalculation hooks for data changes
- ormi.reporting.health_report() - Portfolio table of health results

Example Usage:
    ```python
    from ormi.health import InMemoryPropertyRepository, PropertyHealthService

    service = PropertyHealthService(InMemoryPropertyRepository(properties))
    for property_id, result in service.recalculate_all().items():
        print(f"{property_id}: {result.score} {result.grade.value} ({result.status.value})")
    ```
"""

import importlib
import logging

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "health",
    "reporting",
]


_LAZY_MODULES = {
    "core": "ormi.core",
    "health": "ormi.health",
    "reporting": "ormi.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'ormi' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
