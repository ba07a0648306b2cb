"""Configuration for the Liquidity Shield analytics service."""

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Service configuration.

    Scoring weights, regime thresholds and tick spacing are fixed policy
    constants in their modules and are not configurable here.
    """

    # API
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Default fee band (hundredths of a basis point: 500 = 0.05%)
    base_fee: int = field(default_factory=lambda: int(os.getenv("BASE_FEE", "500")))
    max_fee: int = field(default_factory=lambda: int(os.getenv("MAX_FEE", "10000")))

    # Longest price series the API will hand to the O(n) core
    max_series_length: int = field(
        default_factory=lambda: int(os.getenv("MAX_SERIES_LENGTH", "1000"))
    )
