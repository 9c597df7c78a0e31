"""
Estimate the GPU memory needed to serve a large language model.
"""

__version__ = "0.1.0"

from gpu_mem_for_llm.errors import (
    EstimateError,
    InvalidSizeFormat,
    MultiplePrecisionsSelected,
    NoPrecisionSelected,
)
from gpu_mem_for_llm.size import SizeSpec, SizeUnit, get_parameter_size, parse_size_spec
from gpu_mem_for_llm.precision import PRECISION_BYTES, Precision, get_precision, select_precision
from gpu_mem_for_llm.config import EstimateConfig
from gpu_mem_for_llm.estimator import (
    MemoryEstimate,
    calculate_required_memory,
    estimate_from_config,
    estimate_memory,
)
from gpu_mem_for_llm.formatter import format_memory, render, render_json, render_text

__all__ = [
    "__version__",
    "EstimateError",
    "InvalidSizeFormat",
    "MultiplePrecisionsSelected",
    "NoPrecisionSelected",
    "SizeSpec",
    "SizeUnit",
    "get_parameter_size",
    "parse_size_spec",
    "PRECISION_BYTES",
    "Precision",
    "get_precision",
    "select_precision",
    "EstimateConfig",
    "MemoryEstimate",
    "calculate_required_memory",
    "estimate_from_config",
    "estimate_memory",
    "format_memory",
    "render",
    "render_json",
    "render_text",
]
