"""Chemical states: one side of a reaction arrow, e.g. ``CO_g + *_s``."""

from dataclasses import dataclass, field

from .errors import ConservationTypeError, InvalidFormulaError
from .formula import ChemFormula, check_conservation, merge_counts

STATE_SEPARATOR = "+"


@dataclass(frozen=True)
class ChemState:
    """An ordered sum of formulas.

    Order follows the expression as written. It matters for display only,
    conservation compares the aggregated counts.
    """

    formulas: tuple[ChemFormula, ...]
    raw: str = field(default="", compare=False)

    def __post_init__(self):
        formulas = tuple(self.formulas)
        if not formulas:
            raise InvalidFormulaError(self.raw)
        for formula in formulas:
            if not isinstance(formula, ChemFormula):
                raise InvalidFormulaError(str(formula))
        object.__setattr__(self, "formulas", formulas)

    @classmethod
    def parse(cls, text: str) -> "ChemState":
        """Split on ``+`` and parse every piece as a formula.

        The first invalid piece raises InvalidFormulaError, so blank input
        fails on its single empty piece.
        """
        formulas = tuple(
            ChemFormula.parse(piece.strip()) for piece in text.split(STATE_SEPARATOR)
        )
        return cls(formulas, raw=text.strip())

    @property
    def text(self) -> str:
        return self.raw or str(self)

    def to_list(self) -> list[ChemFormula]:
        return list(self.formulas)

    def element_counts(self) -> dict[str, int]:
        return merge_counts(*(f.element_counts() for f in self.formulas))

    def site_counts(self) -> dict[str, int]:
        return merge_counts(*(f.site_counts() for f in self.formulas))

    def conserve(self, another: "ChemState") -> bool:
        """Return True if mass and sites match ``another``, raise otherwise."""
        if not isinstance(another, ChemState):
            raise ConservationTypeError(ChemState, another)
        check_conservation(self, another, level="state")
        return True

    def __len__(self):  # noqa
        return len(self.formulas)

    def __iter__(self):  # noqa
        return iter(self.formulas)

    def __str__(self):  # noqa
        return f" {STATE_SEPARATOR} ".join(str(f) for f in self.formulas)

    def __repr__(self):  # noqa
        return f"ChemState({str(self)!r})"


def parse_state(text: str) -> ChemState:
    """Parse a ``+``-joined list of formulas."""
    return ChemState.parse(text)
