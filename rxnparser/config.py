"""
Configuration for loading reaction mechanisms from files.

Simple dataclass-based config, loadable from YAML/JSON or set up in code.
"""

import json
from dataclasses import asdict, dataclass

import yaml

RESERVED_CHARACTERS = "+-<>_*"


@dataclass
class ParserConfig:
    """Configuration for the mechanism file parsers.

    Attributes
    ----------
    strict : bool
        Raise on the first invalid entry. When False, invalid entries are
        logged as warnings and skipped.
    check_conservation : bool
        Check mass and site conservation of every parsed equation.
    equation_column : str
        Column holding the reaction expression in tabular (CSV) files.
    comment_char : str
        Lines starting with this character are ignored in text files.
    rxn_key : str
        Key holding the list of expressions in YAML files.
    encoding : str
        Text encoding used to read mechanism files.
    """

    strict: bool = True
    check_conservation: bool = True
    equation_column: str = "equation"
    comment_char: str = "#"
    rxn_key: str = "rxn_expressions"
    encoding: str = "utf-8"

    @classmethod
    def from_yaml(cls, filepath: str) -> "ParserConfig":
        """Load configuration from YAML file."""
        with open(filepath, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def from_json(cls, filepath: str) -> "ParserConfig":
        """Load configuration from JSON file."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)

    def to_yaml(self, filepath: str):
        """Save configuration to YAML file."""
        with open(filepath, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    def to_json(self, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, "w") as f:
            json.dump(asdict(self), f, indent=2)

    def validate(self):
        """Basic validation of parameter values."""
        if not self.equation_column:
            raise ValueError("equation_column must not be empty")
        if len(self.comment_char) != 1:
            raise ValueError(f"comment_char must be one character: {self.comment_char!r}")
        if (
            self.comment_char in RESERVED_CHARACTERS
            or self.comment_char.isalnum()
            or self.comment_char.isspace()
        ):
            raise ValueError(
                f"comment_char {self.comment_char!r} is part of the reaction grammar"
            )
        if not self.rxn_key:
            raise ValueError("rxn_key must not be empty")
