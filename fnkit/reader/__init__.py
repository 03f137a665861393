"""
Reader Monad
============

Reader[R, A] - dependency injection over an immutable environment R.

    from fnkit import reader as Rd

    greeting = Rd.asks(lambda cfg: cfg["name"]).map(lambda n: f"hello, {n}")
    greeting.run_reader({"name": "fnkit"})  # "hello, fnkit"
"""

from .monad import Reader, ask, asks, pure, reader, run_reader
from .lift import (
    lift_a1_r,
    lift_a2_r,
    lift_a3_r,
    lift_a_r,
    lift_m1_r,
    lift_m2_r,
    lift_m3_r,
    lift_m_r,
    sequence_r,
    traverse_r,
)

__all__ = (
    # Monad
    "Reader",
    "run_reader",
    # Constructors
    "reader",
    "ask",
    "asks",
    "pure",
    # Lift
    "lift_m_r",
    "lift_m1_r",
    "lift_m2_r",
    "lift_m3_r",
    "lift_a_r",
    "lift_a1_r",
    "lift_a2_r",
    "lift_a3_r",
    # Collection
    "traverse_r",
    "sequence_r",
)
