"""
Model size tokens ("100m", "7b") and parameter counts.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from gpu_mem_for_llm.errors import InvalidSizeFormat

logger = logging.getLogger(__name__)

# Constants
MILLION = 1_000_000
BILLION = 1_000_000_000

SIZE_PATTERN = re.compile(r"(\d+)([mb])", re.IGNORECASE)


class SizeUnit(Enum):
    MILLION = "m"
    BILLION = "b"

    @property
    def multiplier(self) -> int:
        return MILLION if self is SizeUnit.MILLION else BILLION


@dataclass(frozen=True)
class SizeSpec:
    """A parsed size token: a non-negative magnitude and its unit."""

    magnitude: int
    unit: SizeUnit

    @property
    def parameter_count(self) -> int:
        return self.magnitude * self.unit.multiplier

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.value}"


def parse_size_spec(token: str) -> SizeSpec:
    """
    Parse a size token such as "100m" (100 million) or "7b" (7 billion).

    Only ASCII digits followed by a single 'm' or 'b' (either case) are
    accepted. Decimals, signs, whitespace and empty strings are rejected.

    Raises:
        InvalidSizeFormat: If the token does not match the pattern.
    """
    if not isinstance(token, str):
        raise InvalidSizeFormat(token)

    match = SIZE_PATTERN.fullmatch(token)
    # \d also matches non-ASCII digits, which int() would happily accept
    if match is None or not match.group(1).isascii():
        raise InvalidSizeFormat(token)

    magnitude = int(match.group(1))
    unit = SizeUnit(match.group(2).lower())
    return SizeSpec(magnitude=magnitude, unit=unit)


def get_parameter_size(token: str) -> int:
    """Return the absolute parameter count for a size token."""
    spec = parse_size_spec(token)
    logger.debug(f"Parsed size {spec} as {spec.parameter_count:,} parameters")
    return spec.parameter_count


def format_params(params: int) -> str:
    """Format parameter count in human-readable form."""
    if params >= BILLION:
        return f"{params / BILLION:.1f}B"
    elif params >= MILLION:
        return f"{params / MILLION:.1f}M"
    else:
        return f"{params:,}"
