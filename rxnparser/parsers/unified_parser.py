import os
from enum import Enum
from typing import Dict, Optional, Type

from ..config import ParserConfig
from ..mechanism import Mechanism
from .base_parser import BaseParser
from .table_parser import TableParser
from .text_parser import TextParser
from .yaml_parser import YAMLParser


class MechanismFormat(str, Enum):
    text = "text"
    table = "table"
    yaml = "yaml"


class UnifiedMechanismParser:
    """
    Unified interface for parsing reaction mechanism files.

    Supports:
    - text (one expression per line, ``.rxn``/``.txt``)
    - table (CSV with an equation column, ``.csv``)
    - yaml (list of expressions under ``rxn_expressions``, ``.yaml``/``.yml``)
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.parsers: Dict[str, Type[BaseParser]] = {
            MechanismFormat.text.value: TextParser,
            MechanismFormat.table.value: TableParser,
            MechanismFormat.yaml.value: YAMLParser,
        }

    def parse(self, filepath: str, format_type: Optional[str] = None) -> Mechanism:
        """
        Parse a mechanism file using the appropriate parser.

        Args:
            filepath: Path to the mechanism file
            format_type: Format type ('text', 'table', 'yaml'). If None, auto-detect.

        Returns:
            Mechanism: Parsed reaction mechanism
        """
        if format_type is None:
            format_type = self._detect_format(filepath)
        format_type = getattr(format_type, "value", format_type)

        if format_type not in self.parsers:
            raise ValueError(
                f"Unsupported format: {format_type}. "
                f"Supported formats: {list(self.parsers.keys())}"
            )

        self.config.validate()
        parser = self.parsers[format_type](self.config)
        return parser.parse_network(filepath)

    def _detect_format(self, filepath: str) -> str:
        """Auto-detect file format based on the file extension"""
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Mechanism file not found: {filepath}")

        extension = os.path.splitext(str(filepath))[1].lower()
        if extension == ".csv":
            return MechanismFormat.table.value
        elif extension in (".yaml", ".yml"):
            return MechanismFormat.yaml.value
        elif extension in (".rxn", ".txt", ""):
            return MechanismFormat.text.value

        raise ValueError(f"Could not auto-detect format for file: {filepath}")

    def register_parser(self, format_type: str, parser_class: Type[BaseParser]):
        """Register a new parser for a specific format"""
        self.parsers[format_type] = parser_class

    def list_supported_formats(self) -> list:
        """List all supported mechanism formats"""
        return list(self.parsers.keys())


# Convenience function for direct parsing
def parse_mechanism(
    filepath: str,
    format_type: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> Mechanism:
    """
    Convenience function to parse a reaction mechanism file.

    Args:
        filepath: Path to the mechanism file
        format_type: Format type ('text', 'table', 'yaml'). If None, auto-detect.
        config: Parser configuration. Defaults to strict parsing with
            conservation checks.

    Returns:
        Mechanism: Parsed reaction mechanism
    """
    parser = UnifiedMechanismParser(config)
    return parser.parse(filepath, format_type)
