"""Chemical formula tokens, e.g. ``2H2O_3s``.

A formula is an optional stoichiometric prefix, a species name, an
underscore, an optional site count and a site tag::

    2H2O_3s  ->  stoichiometry 2, species H2O, site_count 3, site s
    CO_g     ->  gas-phase CO, occupies no surface site
    *_s      ->  an empty ``s`` site
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from .errors import (
    ConservationError,
    ConservationKind,
    ConservationTypeError,
    InvalidFormulaError,
)

FORMULA_REGEX = re.compile(r"(\d*)(([A-Za-z0-9*\-]+)_(\d*)([a-z*]+))")
SPECIES_NAME_REGEX = re.compile(r"[A-Za-z0-9*\-]+")
SITE_REGEX = re.compile(r"[a-z*]+")
SPECIES_REGEX = re.compile(r"([a-zA-Z*])(\d*)")

EMPTY_SITE = "*"
GAS_SITE = "g"
LIQUID_SITE = "l"
NON_SURFACE_SITES = (GAS_SITE, LIQUID_SITE)


class SpeciesKind(str, Enum):
    """Phase classification of a formula."""

    GAS = "gas"
    LIQUID = "liquid"
    SITE = "site"
    ADSORBATE = "adsorbate"


def merge_counts(*counts: dict[str, int]) -> dict[str, int]:
    """Sum count mappings key by key, absent keys counting as zero."""
    merged: dict[str, int] = {}
    for mapping in counts:
        for key, number in mapping.items():
            merged[key] = merged.get(key, 0) + number
    return merged


@dataclass(frozen=True)
class ChemFormula:
    """A single species on a site, with its stoichiometric coefficient."""

    species: str
    site: str
    stoichiometry: int = 1
    site_count: int = 1
    raw: str = field(default="", compare=False)

    def __post_init__(self):
        valid = (
            isinstance(self.species, str)
            and isinstance(self.site, str)
            and SPECIES_NAME_REGEX.fullmatch(self.species) is not None
            and SITE_REGEX.fullmatch(self.site) is not None
            and isinstance(self.stoichiometry, int)
            and isinstance(self.site_count, int)
            and self.stoichiometry >= 1
            and self.site_count >= 1
        )
        if not valid:
            raise InvalidFormulaError(self.raw or str(self))

    @classmethod
    def parse(cls, text: str) -> "ChemFormula":
        """Parse a formula token, raising InvalidFormulaError on bad input."""
        token = text.strip()
        match = FORMULA_REGEX.fullmatch(token)
        if match is None:
            raise InvalidFormulaError(text)

        stoich, _, species, nsite, site = match.groups()
        stoichiometry = int(stoich) if stoich else 1
        site_count = int(nsite) if nsite else 1
        if stoichiometry < 1 or site_count < 1:
            raise InvalidFormulaError(text)

        return cls(species, site, stoichiometry, site_count, raw=token)

    @property
    def species_site(self) -> str:
        """Species and site part in canonical form, without the stoichiometry.

        A unit site count is dropped, so ``CO_1s`` gives ``CO_s``; the token
        as written is kept in ``raw``.
        """
        nsite = str(self.site_count) if self.site_count != 1 else ""
        return f"{self.species}_{nsite}{self.site}"

    @property
    def text(self) -> str:
        """The token as written, or its canonical form if built directly."""
        return self.raw or str(self)

    @property
    def kind(self) -> SpeciesKind:
        if self.site == GAS_SITE:
            return SpeciesKind.GAS
        elif self.site == LIQUID_SITE:
            return SpeciesKind.LIQUID
        elif EMPTY_SITE in self.species_site:
            return SpeciesKind.SITE
        return SpeciesKind.ADSORBATE

    def element_counts(self) -> dict[str, int]:
        """Atoms of each element in this formula, stoichiometry included.

        Every letter (or ``*``) in the species name counts as one element
        symbol, followed by an optional count. An empty site has no atoms.
        """
        if self.species == EMPTY_SITE:
            return {}

        counts: dict[str, int] = {}
        for element, number in SPECIES_REGEX.findall(self.species):
            counts[element] = counts.get(element, 0) + (int(number) if number else 1)
        return {element: number * self.stoichiometry for element, number in counts.items()}

    def site_counts(self) -> dict[str, int]:
        """Occupied surface sites; gas and liquid species occupy none."""
        if self.site in NON_SURFACE_SITES:
            return {}
        return {self.site: self.stoichiometry * self.site_count}

    def conserve(self, another: "ChemFormula") -> bool:
        """Return True if mass and sites match ``another``, raise otherwise."""
        if not isinstance(another, ChemFormula):
            raise ConservationTypeError(ChemFormula, another)
        check_conservation(self, another, level="formula")
        return True

    def __str__(self):  # noqa
        stoich = str(self.stoichiometry) if self.stoichiometry != 1 else ""
        return f"{stoich}{self.species_site}"

    def __repr__(self):  # noqa
        return f"ChemFormula({str(self)!r})"


def check_conservation(left, right, level: str) -> None:
    """Compare element then site counts of two formulas or two states.

    Count mappings are compared as plain dicts, so key order is irrelevant.
    Mass is checked first; the first mismatch raises ConservationError.
    """
    if left.element_counts() != right.element_counts():
        raise ConservationError(ConservationKind.MASS, left.text, right.text, level)
    if left.site_counts() != right.site_counts():
        raise ConservationError(ConservationKind.SITE, left.text, right.text, level)


def parse_formula(text: str) -> ChemFormula:
    """Parse a single formula token."""
    return ChemFormula.parse(text)
