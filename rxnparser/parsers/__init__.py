"""Imports from all parsers."""

from .base_parser import BaseParser
from .table_parser import TableParser
from .text_parser import TextParser
from .unified_parser import MechanismFormat, UnifiedMechanismParser, parse_mechanism
from .yaml_parser import YAMLParser

__all__ = [
    "BaseParser",
    "TextParser",
    "TableParser",
    "YAMLParser",
    "MechanismFormat",
    "UnifiedMechanismParser",
    "parse_mechanism",
]
