"""
Constants and configuration for Coincide.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


COINCIDE_HOST: str = os.getenv("COINCIDE_HOST", "0.0.0.0")
COINCIDE_PORT: int = int(os.getenv("COINCIDE_PORT", "4323"))
COINCIDE_LOG_LEVEL: str = os.getenv("COINCIDE_LOG_LEVEL", "info").lower()

CLUSTER_ALGORITHM_SINGLE_PASS = "single_pass"

COINCIDE_CLUSTER_ALGORITHM = os.getenv(
    "COINCIDE_CLUSTER_ALGORITHM", CLUSTER_ALGORITHM_SINGLE_PASS
).lower()

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    host: str = COINCIDE_HOST
    port: int = COINCIDE_PORT
    log_level: str = COINCIDE_LOG_LEVEL

    # correlation defaults applied when a caller omits a parameter
    default_time_window_seconds: float = 600.0
    default_angular_threshold_deg: float = 1.0
    default_min_confidence_score: float = 0.1

    cluster_algorithm: str = COINCIDE_CLUSTER_ALGORITHM

    # event catalog queries
    max_query_results: int = 1000

    # pairwise enumeration is quadratic; the HTTP layer refuses larger inputs
    max_correlation_events: int = 5000

    model_config = {
        "env_prefix": "COINCIDE_",
        "extra": "ignore",
    }


settings = Settings()
