# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models. Records, aggregates and results are all
    snapshots; anything that changes over time (stored scores, timestamps)
    is replaced by the repository rather than mutated in place.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos in field names immediately
    )
