"""Base class for parsing reaction mechanism files."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

import numpy as np

from ..config import ParserConfig
from ..equation import RxnEquation
from ..errors import InvalidEquationError, RxnEquationError
from ..mechanism import Mechanism

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for mechanism file parsers."""

    def __init__(self, format_type: str, config: ParserConfig | None = None):  # noqa
        self.format_type = format_type
        self.config = config or ParserConfig()

    @abstractmethod
    def parse_network(self, filepath: str) -> Mechanism:
        """Parse a mechanism file and return a Mechanism object."""

    def parse_reaction(self, entry) -> RxnEquation | None:
        """Parse a single reaction expression.

        Returns None for blank entries, and for invalid ones when the config
        is not strict. Entries that are not strings count as invalid.
        """
        expression = self._clean_expression(entry)
        if expression is None:
            return None
        try:
            if not isinstance(expression, str):
                raise InvalidEquationError(repr(expression))
            equation = RxnEquation.parse(expression)
            if self.config.check_conservation:
                equation.check_conservation()
        except RxnEquationError as e:
            if self.config.strict:
                raise
            logger.warning("Skipping %s reaction %r: %s", self.format_type, expression, e)
            return None
        return equation

    def _build_mechanism(self, entries: Iterable) -> Mechanism:
        equations = []
        for entry in entries:
            equation = self.parse_reaction(entry)
            if equation is not None:
                equations.append(equation)
        logger.info("Parsed %d %s reactions", len(equations), self.format_type)
        return Mechanism(equations)

    def _clean_expression(self, entry):
        """Strip string entries; None for blank strings, None and NaN.

        Any other non-string entry is passed through unchanged.
        """
        if entry is None or isinstance(entry, float) and np.isnan(entry):
            return None
        if not isinstance(entry, str):
            return entry
        expression = entry.strip()
        return expression or None
