# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGt0 = Annotated[int, Field(strict=True, gt=0)]
FloatBetween0And1 = Annotated[float, Field(strict=True, ge=0, le=1)]

# Ledger amounts arrive as Decimal/str/int from the persistence layer, so
# coercion stays lax while the sign constraint is enforced.
Amount = Annotated[float, Field(ge=0)]
