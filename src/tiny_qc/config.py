"""Configuration for tiny-qc, read from environment variables."""

import os
from typing import Optional

# Logging settings
LOG_LEVEL = os.getenv("TINY_QC_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv(
    "TINY_QC_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Sampling settings
_seed = os.getenv("TINY_QC_SEED")
DEFAULT_SEED: Optional[int] = int(_seed) if _seed else None

__all__ = ["LOG_LEVEL", "LOG_FORMAT", "DEFAULT_SEED"]
