"""A reaction mechanism: the ordered list of equations read from one source."""

import logging
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from .equation import RxnEquation
from .errors import RxnEquationError
from .formula import ChemFormula

logger = logging.getLogger(__name__)


@dataclass
class Mechanism:
    """Collection of reaction equations and the species they involve."""

    equations: list[RxnEquation] = field(default_factory=list)

    def __len__(self):  # noqa
        return len(self.equations)

    def __iter__(self):  # noqa
        return iter(self.equations)

    def __str__(self):  # noqa
        return "\n".join(str(eq) for eq in self.equations)

    def _formulas(self):
        for equation in self.equations:
            for state in equation.states:
                yield from state.formulas

    @property
    def species(self) -> list[str]:
        """Unique species-site names, sorted."""
        return sorted({f.species_site for f in self._formulas()})

    @property
    def elements(self) -> list[str]:
        elements = set()
        for formula in self._formulas():
            elements.update(formula.element_counts())
        return sorted(elements)

    @property
    def sites(self) -> list[str]:
        """Surface site tags; gas and liquid phases are not sites."""
        sites = set()
        for formula in self._formulas():
            sites.update(formula.site_counts())
        return sorted(sites)

    def check_conservation(self) -> bool:
        """Check every equation, raising the first ConservationError."""
        for equation in self.equations:
            equation.check_conservation()
        return True

    def find_violations(self) -> list[tuple[int, RxnEquation, RxnEquationError]]:
        """Collect the equations that fail conservation without raising."""
        violations = []
        for i, equation in enumerate(self.equations):
            try:
                equation.check_conservation()
            except RxnEquationError as e:
                logger.debug("Equation %d (%s): %s", i, equation.text, e)
                violations.append((i, equation, e))
        return violations

    def element_matrix(self) -> np.ndarray:
        """Atoms of each element per species, shape (n_elements, n_species).

        Counts are for one unit of each species, so ``2H2O_s`` and ``H2O_s``
        share the ``H2O_s`` column.
        """
        elements = self.elements
        species = self.species
        element_index = {e: i for i, e in enumerate(elements)}
        matrix = np.zeros((len(elements), len(species)), dtype=int)
        for j, name in enumerate(species):
            for element, number in ChemFormula.parse(name).element_counts().items():
                matrix[element_index[element], j] = number
        return matrix

    def stoichiometric_matrix(self) -> np.ndarray:
        """Net stoichiometry, shape (n_species, n_equations).

        Products count positive and reactants negative. Transition states
        are not part of the net reaction and are left out.
        """
        species_index = {s: i for i, s in enumerate(self.species)}
        matrix = np.zeros((len(species_index), len(self.equations)), dtype=int)
        for j, equation in enumerate(self.equations):
            for formula in equation.reactants:
                matrix[species_index[formula.species_site], j] -= formula.stoichiometry
            for formula in equation.products:
                matrix[species_index[formula.species_site], j] += formula.stoichiometry
        return matrix

    def to_dataframe(self) -> pd.DataFrame:
        """One row per equation with its states and conservation status."""
        violations = {i: e for i, _, e in self.find_violations()}
        rows = []
        for i, equation in enumerate(self.equations):
            ts = equation.transition_state
            rows.append(
                {
                    "equation": str(equation),
                    "reactants": str(equation.reactants),
                    "transition_state": str(ts) if ts is not None else None,
                    "products": str(equation.products),
                    "reversible": any(equation.reversible),
                    "conserved": i not in violations,
                    "error": violations[i].message if i in violations else None,
                }
            )
        return pd.DataFrame(rows)
