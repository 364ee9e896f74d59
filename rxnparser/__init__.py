"""
Top-level public API for the rxnparser surface reaction expression parser.

The intent is to expose a small, stable surface for typical users:

- ``parse_formula``, ``parse_state``, ``parse_equation``: parse a species
  token, a ``+``-joined state, or a full reaction expression.
- ``ChemFormula``, ``ChemState``, ``RxnEquation``: the parsed values, with
  element/site counting and mass/site conservation checks.
- ``parse_mechanism``/``load_mechanism``: read a whole mechanism from a
  text, CSV or YAML file.

Example
-------
>>> from rxnparser import parse_equation
>>> eq = parse_equation("CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s")
>>> eq.check_conservation()
True
"""

from .config import ParserConfig
from .equation import RxnEquation, parse_equation
from .errors import (
    ConservationError,
    ConservationKind,
    ConservationTypeError,
    InvalidEquationError,
    InvalidFormulaError,
    RxnEquationError,
)
from .formula import ChemFormula, SpeciesKind, parse_formula
from .main import load_mechanism
from .mechanism import Mechanism
from .parsers import parse_mechanism
from .state import ChemState, parse_state

__all__ = [
    "ChemFormula",
    "ChemState",
    "RxnEquation",
    "SpeciesKind",
    "parse_formula",
    "parse_state",
    "parse_equation",
    "RxnEquationError",
    "InvalidFormulaError",
    "InvalidEquationError",
    "ConservationError",
    "ConservationKind",
    "ConservationTypeError",
    "Mechanism",
    "ParserConfig",
    "parse_mechanism",
    "load_mechanism",
]
