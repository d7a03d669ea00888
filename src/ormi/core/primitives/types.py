# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveFloat = Annotated[float, Field(ge=0)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
FloatBetween0And1 = Annotated[float, Field(ge=0, le=1)]
Score = Annotated[float, Field(ge=0, le=100)]
