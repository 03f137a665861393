"""
State Monad
===========

State[SA, SB, A] - indexed state monad:
- SA: input state type
- SB: output state type (may differ from SA)
- A: value type

StateT[S, A] = State[S, S, A] - the plain, same-type state monad.

Поддерживает namespace-стиль импорта:
    from fnkit import state as S

    S.modify(lambda n: n + 1).then_discard(S.get()).run(1)  # (2, 2)
"""

from .monad import State, StateT, get, gets, modify, pure, put, state
from .lift import (
    lift_a,
    lift_a1,
    lift_a2,
    lift_a3,
    lift_m,
    lift_m1,
    lift_m2,
    lift_m3,
    sequence,
    traverse,
)
from .optics import assign, over, view, zoom

__all__ = (
    # Monad
    "State",
    "StateT",
    # Constructors
    "state",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    # Lift
    "lift_a",
    "lift_a1",
    "lift_a2",
    "lift_a3",
    "lift_m",
    "lift_m1",
    "lift_m2",
    "lift_m3",
    # Collection
    "traverse",
    "sequence",
    # Lens helpers
    "view",
    "assign",
    "over",
    "zoom",
)
