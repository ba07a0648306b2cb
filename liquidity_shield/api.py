"""Analytics API (FastAPI)."""

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import Config
from .efficiency import calculate_position_efficiency
from .errors import ShieldError
from .optimizer import (
    EXTREME_VOLATILITY_MULTIPLIER,
    VOLATILITY_REGIMES,
    calculate_optimal_position_bounds,
)
from .rebalance import should_rebalance
from .ticks import DEFAULT_TICK_SPACING
from .types import (
    INT32_MAX,
    INT32_MIN,
    UINT32_MAX,
    BoundsRequest,
    BoundsResponse,
    EfficiencyResponse,
    FeeResponse,
    RebalanceRequest,
    RebalanceResponse,
    VolatilityRequest,
    VolatilityResponse,
)
from .volatility import (
    HIGH_VOLATILITY_THRESHOLD,
    LOW_VOLATILITY_THRESHOLD,
    MAX_VOLATILITY_SCORE,
    calculate_volatility_score,
    get_recommended_fee,
)

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Validates request envelopes and forwards them to the numeric core."""

    def __init__(self, config: Config):
        self.config = config

    def _check_length(self, prices: list[int]):
        if len(prices) > self.config.max_series_length:
            raise HTTPException(
                status_code=422,
                detail=f"Price series too long: {len(prices)} > {self.config.max_series_length}",
            )

    def _reject(self, e: ShieldError) -> HTTPException:
        logger.warning(f"Rejected request: {type(e).__name__}: {e}")
        return HTTPException(status_code=400, detail=f"{type(e).__name__}: {e}")

    def volatility(self, request: VolatilityRequest) -> VolatilityResponse:
        self._check_length(request.prices)
        try:
            score = calculate_volatility_score(
                request.prices, request.time_window, request.token0, request.token1
            )
        except ShieldError as e:
            raise self._reject(e) from e

        logger.info(f"Volatility score {score} over {len(request.prices)} prices")
        return VolatilityResponse(score=score, token0=request.token0, token1=request.token1)

    def fee(self, score: int, base_fee: int | None, max_fee: int | None) -> FeeResponse:
        base = self.config.base_fee if base_fee is None else base_fee
        top = self.config.max_fee if max_fee is None else max_fee
        fee = get_recommended_fee(score, base, top)
        logger.info(f"Fee {fee} for score {score} (band {base}-{top})")
        return FeeResponse(fee=fee, score=score, base_fee=base, max_fee=top)

    def bounds(self, request: BoundsRequest) -> BoundsResponse:
        self._check_length(request.prices)
        try:
            tick_lower, tick_upper = calculate_optimal_position_bounds(
                request.prices, request.liquidity_amount, request.token0, request.token1
            )
        except ShieldError as e:
            raise self._reject(e) from e

        logger.info(f"Optimal bounds [{tick_lower}, {tick_upper}]")
        return BoundsResponse(tick_lower=tick_lower, tick_upper=tick_upper)

    def rebalance(self, request: RebalanceRequest) -> RebalanceResponse:
        self._check_length(request.prices)
        try:
            decision = should_rebalance(
                request.current_lower_tick,
                request.current_upper_tick,
                request.prices,
                request.token0,
                request.token1,
            )
        except ShieldError as e:
            raise self._reject(e) from e

        logger.info(
            f"Rebalance [{request.current_lower_tick}, {request.current_upper_tick}] -> "
            f"{decision.should_rebalance} (optimal [{decision.tick_lower}, {decision.tick_upper}])"
        )
        return RebalanceResponse(
            should_rebalance=decision.should_rebalance,
            tick_lower=decision.tick_lower,
            tick_upper=decision.tick_upper,
        )

    def efficiency(self, tick_lower: int, tick_upper: int, current_tick: int) -> EfficiencyResponse:
        try:
            efficiency = calculate_position_efficiency(tick_lower, tick_upper, current_tick)
        except ShieldError as e:
            raise self._reject(e) from e

        logger.info(
            f"Efficiency {efficiency}% at tick {current_tick} in [{tick_lower}, {tick_upper}]"
        )
        return EfficiencyResponse(efficiency=efficiency)


def create_app(config: Config | None = None) -> FastAPI:
    """Create the FastAPI application."""
    config = config or Config()
    service = AnalyticsService(config)
    app = FastAPI(title="Liquidity Shield Analytics", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/volatility/score")
    def volatility_score(request: VolatilityRequest) -> VolatilityResponse:
        return service.volatility(request)

    @app.get("/fee/recommended")
    def recommended_fee(
        score: int = Query(ge=0, le=MAX_VOLATILITY_SCORE, description="Volatility score"),
        base_fee: int | None = Query(default=None, ge=0, le=UINT32_MAX),
        max_fee: int | None = Query(default=None, ge=0, le=UINT32_MAX),
    ) -> FeeResponse:
        return service.fee(score, base_fee, max_fee)

    @app.post("/position/bounds")
    def position_bounds(request: BoundsRequest) -> BoundsResponse:
        return service.bounds(request)

    @app.post("/position/rebalance")
    def position_rebalance(request: RebalanceRequest) -> RebalanceResponse:
        return service.rebalance(request)

    @app.get("/position/efficiency")
    def position_efficiency(
        tick_lower: int = Query(ge=INT32_MIN, le=INT32_MAX),
        tick_upper: int = Query(ge=INT32_MIN, le=INT32_MAX),
        current_tick: int = Query(ge=INT32_MIN, le=INT32_MAX),
    ) -> EfficiencyResponse:
        return service.efficiency(tick_lower, tick_upper, current_tick)

    @app.get("/config")
    def get_config():
        return {
            "tick_spacing": DEFAULT_TICK_SPACING,
            "max_volatility_score": MAX_VOLATILITY_SCORE,
            "fee_thresholds": [LOW_VOLATILITY_THRESHOLD, HIGH_VOLATILITY_THRESHOLD],
            "volatility_regimes": [list(regime) for regime in VOLATILITY_REGIMES],
            "extreme_volatility_multiplier": EXTREME_VOLATILITY_MULTIPLIER,
            "base_fee": config.base_fee,
            "max_fee": config.max_fee,
            "max_series_length": config.max_series_length,
        }

    return app
