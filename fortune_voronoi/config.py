"""Configuration helpers for the sweep engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class SweepOptions:
    """Numerical knobs of a sweep."""

    # two sites closer than this in Y are treated as simultaneous
    coincidence_epsilon: float = 1e-9
    # relative cross-product threshold below which bisector rays are parallel
    parallel_tolerance: float = 1e-12
    # slack added around a start vertex that already lies outside the box
    margin: float = 10.0
    dedupe: bool = True

    def __post_init__(self) -> None:
        if self.coincidence_epsilon < 0.0:
            raise ValueError("coincidence_epsilon must be non-negative")
        if self.parallel_tolerance < 0.0:
            raise ValueError("parallel_tolerance must be non-negative")
        if self.margin < 0.0:
            raise ValueError("margin must be non-negative")


_SWEEP_OPTIONS = SweepOptions()


def get_sweep_options() -> SweepOptions:
    return copy.deepcopy(_SWEEP_OPTIONS)


def set_sweep_options(options: SweepOptions) -> None:
    global _SWEEP_OPTIONS
    _SWEEP_OPTIONS = copy.deepcopy(options)


__all__ = ["SweepOptions", "get_sweep_options", "set_sweep_options"]
