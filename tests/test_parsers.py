#!/usr/bin/env python3
"""
Pytest-based tests for the rxnparser unified mechanism parser.

Tests the text, table (CSV) and YAML parsers and format auto-detection.
"""

import logging

import pytest

from rxnparser import (
    ConservationError,
    InvalidEquationError,
    InvalidFormulaError,
    ParserConfig,
)
from rxnparser.parsers import (
    BaseParser,
    MechanismFormat,
    TextParser,
    UnifiedMechanismParser,
    parse_mechanism,
)

EXPRESSIONS = [
    "CO_g + *_s -> CO_s",
    "O2_g + 2*_s -> 2O_s",
    "CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s",
]

TEXT_MECHANISM = """\
# CO oxidation on a single site type
CO_g + *_s -> CO_s

O2_g + 2*_s -> 2O_s
CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s  # Langmuir-Hinshelwood
"""

CSV_MECHANISM = """\
equation,Ea
CO_g + *_s -> CO_s,0.0
O2_g + 2*_s -> 2O_s,0.0
CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s,0.9
"""

YAML_MECHANISM = """\
rxn_expressions:
  - CO_g + *_s -> CO_s
  - O2_g + 2*_s -> 2O_s
  - CO_s + O_s <-> CO-O_s + *_s -> CO2_g + 2*_s
"""


class TestUnifiedParsers:
    """Test suite for unified mechanism parsers"""

    @pytest.fixture
    def parser(self):
        """Create parser instance for tests"""
        return UnifiedMechanismParser()

    @pytest.fixture
    def test_files(self, tmp_path):
        """Write one mechanism per format."""
        files = {
            "text": tmp_path / "co_oxidation.rxn",
            "table": tmp_path / "co_oxidation.csv",
            "yaml": tmp_path / "co_oxidation.yaml",
        }
        files["text"].write_text(TEXT_MECHANISM)
        files["table"].write_text(CSV_MECHANISM)
        files["yaml"].write_text(YAML_MECHANISM)
        return files

    def test_supported_formats(self, parser):
        """Test that all expected formats are supported"""
        formats = parser.list_supported_formats()
        for fmt in ["text", "table", "yaml"]:
            assert fmt in formats, f"Format {fmt} not supported"

    @pytest.mark.parametrize("format_type", ["text", "table", "yaml"])
    def test_parse_each_format(self, test_files, format_type):
        mechanism = parse_mechanism(test_files[format_type], format_type)
        assert [str(eq) for eq in mechanism] == EXPRESSIONS

    def test_format_enum_accepted(self, test_files):
        mechanism = parse_mechanism(test_files["yaml"], MechanismFormat.yaml)
        assert len(mechanism) == 3

    def test_auto_detection(self, test_files):
        for format_type, filepath in test_files.items():
            mechanism = parse_mechanism(str(filepath))
            assert len(mechanism) == 3, f"Auto-detection failed for {filepath}"

    def test_yml_extension(self, tmp_path):
        filepath = tmp_path / "mechanism.yml"
        filepath.write_text(YAML_MECHANISM)
        assert len(parse_mechanism(filepath)) == 3

    def test_error_handling(self, tmp_path):
        """Test error handling for invalid inputs"""
        with pytest.raises(FileNotFoundError):
            parse_mechanism("non_existent_file.rxn")

        filepath = tmp_path / "mechanism.json"
        filepath.write_text("{}")
        with pytest.raises(ValueError, match="Could not auto-detect"):
            parse_mechanism(filepath)

        with pytest.raises(ValueError, match="Unsupported format"):
            parse_mechanism(filepath, "invalid_format")

    def test_register_parser(self, parser, tmp_path):
        class ArrowParser(TextParser):
            def parse_reaction(self, entry):
                return super().parse_reaction(entry.replace("=>", "->"))

        parser.register_parser("arrows", ArrowParser)
        assert "arrows" in parser.list_supported_formats()

        filepath = tmp_path / "mechanism.rxn"
        filepath.write_text("CO_g + *_s => CO_s\n")
        mechanism = parser.parse(filepath, "arrows")
        assert str(mechanism) == "CO_g + *_s -> CO_s"


class TestInvalidEntries:
    """Strict and lenient handling of bad reactions"""

    @pytest.fixture
    def bad_file(self, tmp_path):
        filepath = tmp_path / "bad.rxn"
        filepath.write_text("CO_g + *_s -> CO_s\nCO_g -> CO\nCO_g -> CO_s\n")
        return filepath

    def test_strict_raises_first_error(self, bad_file):
        with pytest.raises(InvalidFormulaError):
            parse_mechanism(bad_file)

    def test_strict_conservation(self, tmp_path):
        filepath = tmp_path / "unbalanced.rxn"
        filepath.write_text("CO_g -> CO_s\n")
        with pytest.raises(ConservationError):
            parse_mechanism(filepath)

    def test_lenient_skips_with_warning(self, bad_file, caplog):
        config = ParserConfig(strict=False)
        with caplog.at_level(logging.WARNING, logger="rxnparser"):
            mechanism = parse_mechanism(bad_file, config=config)
        assert [str(eq) for eq in mechanism] == ["CO_g + *_s -> CO_s"]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2
        assert "CO_g -> CO" in caplog.text

    def test_conservation_check_disabled(self, bad_file):
        config = ParserConfig(strict=False, check_conservation=False)
        mechanism = parse_mechanism(bad_file, config=config)
        assert len(mechanism) == 2
        assert [i for i, _, _ in mechanism.find_violations()] == [1]

    def test_missing_column(self, tmp_path):
        filepath = tmp_path / "mechanism.csv"
        filepath.write_text(CSV_MECHANISM)
        config = ParserConfig(equation_column="reaction")
        with pytest.raises(ValueError, match="Column 'reaction' not found"):
            parse_mechanism(filepath, config=config)

    def test_custom_column(self, tmp_path):
        filepath = tmp_path / "mechanism.csv"
        filepath.write_text(CSV_MECHANISM.replace("equation,", "reaction,"))
        config = ParserConfig(equation_column="reaction")
        assert len(parse_mechanism(filepath, config=config)) == 3

    def test_missing_yaml_key(self, tmp_path):
        filepath = tmp_path / "mechanism.yaml"
        filepath.write_text("reactions:\n  - CO_g + *_s -> CO_s\n")
        with pytest.raises(ValueError, match="rxn_expressions"):
            parse_mechanism(filepath)

    def test_custom_yaml_key(self, tmp_path):
        filepath = tmp_path / "mechanism.yaml"
        filepath.write_text("reactions:\n  - CO_g + *_s -> CO_s\n")
        config = ParserConfig(rxn_key="reactions")
        assert len(parse_mechanism(filepath, config=config)) == 1

    def test_blank_entries_ignored(self):
        parser = TextParser()
        assert parser.parse_reaction("   ") is None
        assert parser.parse_reaction(None) is None
        assert parser.parse_reaction(float("nan")) is None

    @pytest.fixture
    def mixed_yaml(self, tmp_path):
        filepath = tmp_path / "mixed.yaml"
        filepath.write_text(
            "rxn_expressions:\n"
            "  - 42\n"
            "  - {a: 1}\n"
            "  - CO_g + *_s -> CO_s\n"
        )
        return filepath

    def test_strict_rejects_non_string_entries(self, mixed_yaml):
        with pytest.raises(InvalidEquationError, match="42"):
            parse_mechanism(mixed_yaml)

    def test_lenient_warns_on_non_string_entries(self, mixed_yaml, caplog):
        config = ParserConfig(strict=False)
        with caplog.at_level(logging.WARNING, logger="rxnparser"):
            mechanism = parse_mechanism(mixed_yaml, config=config)
        assert [str(eq) for eq in mechanism] == ["CO_g + *_s -> CO_s"]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_base_parser_is_abstract(self):
        with pytest.raises(TypeError):
            BaseParser("text")
