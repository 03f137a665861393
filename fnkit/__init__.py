"""
fnkit - functional composition primitives.

Small, pure building blocks:
- State[SA, SB, A] - indexed state monad (state type may change between steps)
- Reader[R, A] - dependency injection over an immutable environment
- Lens[A, B] - composable get/set focus into nested data
- Those[A, B] - That / This / These: left, right or both

Architecture:
- Every value is immutable, every combinator returns a new value
- Nothing runs until a terminal operation (run / eval / exec / run_reader)
- Generic lifts (*M functions) work with any monad via capability protocols
- Sugar for State (no suffix) and for Reader (*_r suffix)

Supports namespace imports:
    from fnkit import state as S
    from fnkit import reader as Rd
"""

# Core types
from ._types import UNIT, Endo, Fn, Transition, Unit

# Internal helpers (for custom monads)
from . import _helpers

# Generic lifts
from . import lift
from .lift import Applicative, Functor, Monad, lift_aM, lift_mM

# State monad
from . import state
from .state import (
    State,
    StateT,
    assign,
    lift_a,
    lift_a1,
    lift_a2,
    lift_a3,
    lift_m,
    lift_m1,
    lift_m2,
    lift_m3,
    over,
    sequence,
    traverse,
    view,
    zoom,
)

# Reader monad
from . import reader
from .reader import (
    Reader,
    lift_a1_r,
    lift_a2_r,
    lift_a3_r,
    lift_a_r,
    lift_m1_r,
    lift_m2_r,
    lift_m3_r,
    lift_m_r,
    run_reader,
    sequence_r,
    traverse_r,
)

# Lens
from .lens import Lens

# Those
from .those import That, These, This, Those, from_either, from_options

__all__ = (
    # Types
    "Unit",
    "UNIT",
    "Fn",
    "Endo",
    "Transition",
    # Internal helpers (for custom monads)
    "_helpers",
    # Generic lifts
    "lift",
    "Functor",
    "Applicative",
    "Monad",
    "lift_aM",
    "lift_mM",
    # State module (namespace import - preferred)
    "state",
    # State
    "State",
    "StateT",
    "lift_a",
    "lift_a1",
    "lift_a2",
    "lift_a3",
    "lift_m",
    "lift_m1",
    "lift_m2",
    "lift_m3",
    "traverse",
    "sequence",
    "view",
    "assign",
    "over",
    "zoom",
    # Reader module
    "reader",
    # Reader
    "Reader",
    "run_reader",
    "lift_m_r",
    "lift_m1_r",
    "lift_m2_r",
    "lift_m3_r",
    "lift_a_r",
    "lift_a1_r",
    "lift_a2_r",
    "lift_a3_r",
    "traverse_r",
    "sequence_r",
    # Lens
    "Lens",
    # Those
    "Those",
    "That",
    "This",
    "These",
    "from_options",
    "from_either",
)
