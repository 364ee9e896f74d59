"""Reaction equations: 2 or 3 chemical states joined by arrows.

An elementary step has an initial and a final state::

    CO_g + *_s -> CO_s

A step through a transition state has three. Any leg may be written
reversibly with ``<->``::

    CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s
"""

import re
from dataclasses import dataclass, field

from .errors import InvalidEquationError
from .formula import ChemFormula
from .state import ChemState

ARROW_REGEX = re.compile(r"(<?->)")
REVERSIBLE_ARROW = "<->"
FORWARD_ARROW = "->"
MIN_STATES = 2
MAX_STATES = 3


def split_equation(text: str) -> tuple[list[str], list[str]]:
    """Split a reaction string into trimmed state strings and arrow tokens.

    Raises InvalidEquationError unless there are 2 or 3 non-empty states.
    """
    parts = ARROW_REGEX.split(text)
    states = [part.strip() for part in parts[0::2]]
    arrows = parts[1::2]

    if not MIN_STATES <= len(states) <= MAX_STATES:
        raise InvalidEquationError(text)
    if any(not state or "<" in state or ">" in state for state in states):
        raise InvalidEquationError(text)

    return states, arrows


@dataclass(frozen=True)
class RxnEquation:
    """A reaction step, owning its states in left-to-right order."""

    states: tuple[ChemState, ...]
    arrows: tuple[str, ...]
    raw: str = field(default="", compare=False)

    def __post_init__(self):
        states = tuple(self.states)
        arrows = tuple(self.arrows)
        valid = (
            MIN_STATES <= len(states) <= MAX_STATES
            and len(arrows) == len(states) - 1
            and all(isinstance(state, ChemState) for state in states)
            and all(arrow in (FORWARD_ARROW, REVERSIBLE_ARROW) for arrow in arrows)
        )
        if not valid:
            text = self.raw or " ".join(str(part) for part in states + arrows)
            raise InvalidEquationError(text)
        object.__setattr__(self, "states", states)
        object.__setattr__(self, "arrows", arrows)

    @classmethod
    def parse(cls, text: str) -> "RxnEquation":
        state_strs, arrows = split_equation(text)
        states = tuple(ChemState.parse(s) for s in state_strs)
        return cls(states, tuple(arrows), raw=text.strip())

    @property
    def text(self) -> str:
        return self.raw or str(self)

    @property
    def reversible(self) -> tuple[bool, ...]:
        """Per leg, whether it was written with ``<->``."""
        return tuple(arrow == REVERSIBLE_ARROW for arrow in self.arrows)

    @property
    def reactants(self) -> ChemState:
        return self.states[0]

    @property
    def products(self) -> ChemState:
        return self.states[-1]

    @property
    def transition_state(self) -> ChemState | None:
        if len(self.states) == MAX_STATES:
            return self.states[1]
        return None

    @property
    def is_elementary(self) -> bool:
        return self.transition_state is None

    def to_states(self) -> list[ChemState]:
        return list(self.states)

    def to_formula_lists(self) -> list[list[ChemFormula]]:
        return [state.to_list() for state in self.states]

    def check_conservation(self) -> bool:
        """Check every state against the initial state.

        Each later state is compared with ``states[0]`` only, never with its
        neighbour. The first non-conserving state raises ConservationError.
        """
        first = self.states[0]
        for state in self.states[1:]:
            first.conserve(state)
        return True

    def __str__(self):  # noqa
        pieces = [str(self.states[0])]
        for arrow, state in zip(self.arrows, self.states[1:]):
            pieces.extend([arrow, str(state)])
        return " ".join(pieces)

    def __repr__(self):  # noqa
        return f"RxnEquation({str(self)!r})"


def parse_equation(text: str) -> RxnEquation:
    """Parse a full reaction expression."""
    return RxnEquation.parse(text)
