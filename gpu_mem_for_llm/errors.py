"""
Exception types raised while validating estimator input.
"""

from typing import Optional


def _precision_flags() -> str:
    from gpu_mem_for_llm.precision import PRECISION_FLAGS

    return PRECISION_FLAGS


class EstimateError(ValueError):
    """Base class for all input validation failures."""


class InvalidSizeFormat(EstimateError):
    """The size token is not an integer followed by 'm' or 'b'."""

    def __init__(self, token=None):
        self.token = token
        super().__init__("invalid format; must be an integer followed by 'm' or 'b'")


class NoPrecisionSelected(EstimateError):
    """None of the precision selectors was given."""

    def __init__(self, flags: Optional[str] = None):
        super().__init__(f"no precision flag provided; use one of {flags or _precision_flags()}")


class MultiplePrecisionsSelected(EstimateError):
    """More than one precision selector was given."""

    def __init__(self, flags: Optional[str] = None, selected=None):
        self.selected = list(selected or [])
        super().__init__(f"only one of {flags or _precision_flags()} can be set at a time")
