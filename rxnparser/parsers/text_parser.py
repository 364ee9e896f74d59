"""Parser for plain-text mechanisms, one reaction expression per line."""

from ..config import ParserConfig
from ..mechanism import Mechanism
from .base_parser import BaseParser


class TextParser(BaseParser):
    """Parser for ``.rxn``/``.txt`` files.

    Blank lines and lines starting with the configured comment character
    are ignored. Trailing comments are stripped as well::

        # CO oxidation
        CO_g + *_s -> CO_s
        CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s  # LH step
    """

    def __init__(self, config: ParserConfig | None = None):  # noqa
        super().__init__("text", config)

    def parse_network(self, filepath: str) -> Mechanism:
        with open(filepath, "r", encoding=self.config.encoding) as f:
            lines = [line.split(self.config.comment_char, 1)[0] for line in f]
        return self._build_mechanism(lines)
