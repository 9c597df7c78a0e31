"""
GPU memory estimate for serving an LLM.

total = trunc(parameter_count * bytes_per_param * (100 + overhead) / 100)

The product is exact for any realistic model size, so the one division is
the only rounding step and whole-byte totals stay whole. Both the overhead
step here and the MB formatting in formatter.py truncate instead of
rounding, so an estimate never reports a fractional byte.
"""

import logging
from dataclasses import dataclass
from typing import Union

from gpu_mem_for_llm.config import DEFAULT_OVERHEAD, EstimateConfig
from gpu_mem_for_llm.precision import PrecisionLike, get_precision, to_precision
from gpu_mem_for_llm.size import format_params, get_parameter_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemoryEstimate:
    """
    Result of one estimate.

    Attributes:
        total_bytes: Memory required including overhead
        base_bytes: Memory for the parameters alone
        parameter_count: Number of model parameters
        bytes_per_param: Bytes used per parameter at the chosen precision
        overhead_percent: Overhead applied on top of base_bytes
    """

    total_bytes: int
    base_bytes: float
    parameter_count: int
    bytes_per_param: float
    overhead_percent: int

    @property
    def overhead_bytes(self) -> int:
        return self.total_bytes - int(self.base_bytes)


def calculate_required_memory(
    parameter_count: int,
    bytes_per_param: float,
    overhead_percent: Union[int, float] = DEFAULT_OVERHEAD,
) -> int:
    """Return the bytes needed to serve `parameter_count` parameters, overhead included."""
    if parameter_count < 0:
        raise ValueError(f"parameter count must be non-negative, got {parameter_count}")
    if bytes_per_param < 0:
        raise ValueError(f"bytes per parameter must be non-negative, got {bytes_per_param}")
    if overhead_percent < 0:
        raise ValueError(f"overhead must be non-negative, got {overhead_percent}")

    memory_for_params = parameter_count * bytes_per_param
    return int(memory_for_params * (100 + overhead_percent) / 100)


def estimate_memory(
    parameter_count: int,
    precision: PrecisionLike,
    overhead_percent: int = DEFAULT_OVERHEAD,
) -> MemoryEstimate:
    """Estimate memory for a parameter count at a given precision."""
    bytes_per_param = get_precision(precision)
    total = calculate_required_memory(parameter_count, bytes_per_param, overhead_percent)

    estimate = MemoryEstimate(
        total_bytes=total,
        base_bytes=parameter_count * bytes_per_param,
        parameter_count=parameter_count,
        bytes_per_param=bytes_per_param,
        overhead_percent=overhead_percent,
    )
    logger.info(
        f"{format_params(parameter_count)} params x {bytes_per_param:g} B = {int(estimate.base_bytes):,} bytes "
        f"+ {estimate.overhead_bytes:,} bytes ({overhead_percent}%) overhead = {total:,} bytes"
    )
    return estimate


def estimate_from_config(config: EstimateConfig) -> MemoryEstimate:
    """Run the full pipeline for a validated configuration."""
    parameter_count = get_parameter_size(config.size)
    return estimate_memory(parameter_count, to_precision(config.precision), config.overhead)
