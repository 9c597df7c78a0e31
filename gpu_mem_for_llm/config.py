"""
Run configuration for a single estimate.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from gpu_mem_for_llm.precision import Precision

logger = logging.getLogger(__name__)

DEFAULT_OVERHEAD = 20  # percent
DEFAULT_LOG_LEVEL = "WARNING"

OVERHEAD_ENV = "GPU_MEM_FOR_LLM_OVERHEAD"
LOG_LEVEL_ENV = "GPU_MEM_FOR_LLM_LOG_LEVEL"


@dataclass(frozen=True)
class EstimateConfig:
    """
    Everything one estimate needs, fixed before any computation runs.

    Attributes:
        size: Size token, e.g. "7b" or "100m"
        precision: The single selected precision
        overhead: Overhead as a percentage of parameter memory
        json_output: Render the result as JSON instead of text
    """

    size: str
    precision: Precision
    overhead: int = DEFAULT_OVERHEAD
    json_output: bool = False

    def __post_init__(self):
        if self.overhead < 0:
            raise ValueError(f"overhead must be a non-negative percentage, got {self.overhead}")


def default_overhead(env: Optional[dict] = None) -> int:
    """Overhead percentage from the environment, or DEFAULT_OVERHEAD."""
    env = os.environ if env is None else env
    raw = env.get(OVERHEAD_ENV)
    if raw is None or raw.strip() == "":
        return DEFAULT_OVERHEAD

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {OVERHEAD_ENV}={raw!r}: not an integer, using {DEFAULT_OVERHEAD}")
        return DEFAULT_OVERHEAD

    if value < 0:
        logger.warning(f"Ignoring {OVERHEAD_ENV}={raw!r}: must be >= 0, using {DEFAULT_OVERHEAD}")
        return DEFAULT_OVERHEAD
    return value


def default_log_level(env: Optional[dict] = None) -> str:
    env = os.environ if env is None else env
    return (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
