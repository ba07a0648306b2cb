"""Value types for position ranges and API request/response models."""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

Tick = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Price = Annotated[int, Field(ge=0)]
FeeRate = Annotated[int, Field(ge=0, le=UINT32_MAX)]


@dataclass(frozen=True)
class PositionRange:
    """A [tick_lower, tick_upper] liquidity range."""

    tick_lower: int
    tick_upper: int

    @property
    def width(self) -> int:
        return self.tick_upper - self.tick_lower

    def contains(self, tick: int) -> bool:
        return self.tick_lower <= tick <= self.tick_upper


@dataclass(frozen=True)
class RebalanceDecision:
    """Verdict plus the freshly computed optimal bounds."""

    should_rebalance: bool
    tick_lower: int
    tick_upper: int

    def __iter__(self):
        # unpacks as (should_rebalance, tick_lower, tick_upper)
        return iter((self.should_rebalance, self.tick_lower, self.tick_upper))


class PairRequest(BaseModel):
    """Token identifiers are echoed back untouched."""

    token0: str | None = None
    token1: str | None = None


class VolatilityRequest(PairRequest):
    """API request model for scoring a price window."""

    prices: list[Price]
    time_window: int


class BoundsRequest(PairRequest):
    """API request model for optimal position bounds."""

    prices: list[Price]
    liquidity_amount: int = Field(default=0, ge=0)


class RebalanceRequest(PairRequest):
    """API request model for a rebalance check."""

    current_lower_tick: Tick
    current_upper_tick: Tick
    prices: list[Price]


class VolatilityResponse(BaseModel):
    score: int
    token0: str | None = None
    token1: str | None = None


class FeeResponse(BaseModel):
    fee: int
    score: int
    base_fee: int
    max_fee: int


class BoundsResponse(BaseModel):
    tick_lower: int
    tick_upper: int


class RebalanceResponse(BaseModel):
    should_rebalance: bool
    tick_lower: int
    tick_upper: int


class EfficiencyResponse(BaseModel):
    efficiency: int
