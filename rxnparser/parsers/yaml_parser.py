"""Parser for YAML mechanisms listing expressions under one key."""

import yaml

from ..config import ParserConfig
from ..mechanism import Mechanism
from .base_parser import BaseParser


class YAMLParser(BaseParser):
    """Parser for ``.yaml``/``.yml`` files such as::

        rxn_expressions:
          - CO_g + *_s -> CO_s
          - O2_g + 2*_s -> 2O_s
    """

    def __init__(self, config: ParserConfig | None = None):  # noqa
        super().__init__("yaml", config)

    def parse_network(self, filepath: str) -> Mechanism:
        with open(filepath, "r", encoding=self.config.encoding) as f:
            data = yaml.safe_load(f) or {}

        key = self.config.rxn_key
        if not isinstance(data, dict) or key not in data:
            raise ValueError(f"Key {key!r} not found in {filepath}")
        expressions = data[key]
        if not isinstance(expressions, list):
            raise ValueError(f"{key!r} in {filepath} must be a list of expressions")
        return self._build_mechanism(expressions)
