"""
Numeric precisions and their bytes-per-parameter cost.
"""

import logging
from enum import Enum
from typing import Iterable, Mapping, Optional, Union

from gpu_mem_for_llm.errors import MultiplePrecisionsSelected, NoPrecisionSelected

logger = logging.getLogger(__name__)


class Precision(Enum):
    FP32 = "fp32"
    FP16 = "fp16"
    BF16 = "bf16"
    INT8 = "int8"
    INT4 = "int4"

    @property
    def flag(self) -> str:
        return f"--{self.value}"

    @property
    def bytes_per_param(self) -> float:
        return PRECISION_BYTES[self]


# --- Precision map (bytes/parameter) ---
PRECISION_BYTES = {
    Precision.FP32: 4.0,
    Precision.FP16: 2.0,
    Precision.BF16: 2.0,
    Precision.INT8: 1.0,
    Precision.INT4: 0.5,
}

PRECISION_FLAGS = ", ".join(p.flag for p in Precision)

PrecisionLike = Union[Precision, str]


def to_precision(value: PrecisionLike) -> Precision:
    if isinstance(value, Precision):
        return value
    try:
        return Precision(str(value).lower().lstrip("-"))
    except ValueError:
        raise ValueError(f"unknown precision '{value}'; expected one of {PRECISION_FLAGS}") from None


def select_precision(selected: Union[Mapping[str, bool], Iterable[PrecisionLike]]) -> Precision:
    """
    Pick the single active precision out of a set of selectors.

    Args:
        selected: Either a mapping of precision name -> flag value (as parsed
            from the command line) or an iterable of the active names.

    Returns:
        The one selected Precision.

    Raises:
        NoPrecisionSelected: If no selector is active.
        MultiplePrecisionsSelected: If more than one selector is active.
    """
    if isinstance(selected, Mapping):
        active = [name for name, is_set in selected.items() if is_set]
    else:
        active = list(selected)

    # dedupe while keeping the order the selectors were given in
    chosen = list(dict.fromkeys(to_precision(name) for name in active))

    if not chosen:
        raise NoPrecisionSelected(PRECISION_FLAGS)
    if len(chosen) > 1:
        raise MultiplePrecisionsSelected(PRECISION_FLAGS, selected=chosen)

    logger.debug(f"Selected precision {chosen[0].value}")
    return chosen[0]


def get_precision(precision: Optional[PrecisionLike]) -> float:
    """Return bytes per parameter for an already validated precision."""
    if precision is None:
        raise NoPrecisionSelected(PRECISION_FLAGS)
    return to_precision(precision).bytes_per_param
