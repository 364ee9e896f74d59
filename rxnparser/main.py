"""Load and validate a reaction mechanism file in one call.

Usage
-----
    from rxnparser.main import load_mechanism
    from rxnparser.config import ParserConfig

    config = ParserConfig(strict=False)
    mechanism = load_mechanism("data/co_oxidation.rxn", config)
"""

from datetime import datetime

from .config import ParserConfig
from .mechanism import Mechanism
from .parsers import parse_mechanism


def load_mechanism(
    filepath: str,
    config: ParserConfig | None = None,
    format_type: str | None = None,
    verbose: bool = True,
) -> Mechanism:
    """Parse a mechanism file and report what was found.

    Parameters
    ----------
    filepath : str
        Path to the mechanism file
    config : ParserConfig, optional
        Parser configuration, strict with conservation checks by default
    format_type : str, optional
        Mechanism format ('text', 'table', 'yaml'). If None, auto-detect
    verbose : bool
        Print a summary of the parsed mechanism

    Returns:
    -------
    mechanism : Mechanism
        The parsed equations
    """
    start_time = datetime.now()
    config = config or ParserConfig()

    if verbose:
        print(f"Loading reaction mechanism from {filepath}...")

    mechanism = parse_mechanism(filepath, format_type, config)
    elapsed = (datetime.now() - start_time).total_seconds()

    if verbose:
        print(f"  Loaded {len(mechanism)} reactions in {elapsed:.3f} seconds")
        print(f"  Species ({len(mechanism.species)}): {', '.join(mechanism.species)}")
        print(f"  Elements: {', '.join(mechanism.elements)}")
        print(f"  Surface sites: {', '.join(mechanism.sites)}")
        if not config.check_conservation:
            violations = mechanism.find_violations()
            print(f"  Non-conserving reactions: {len(violations)}")
            for i, _, error in violations:
                print(f"    [{i}] {error}")

    return mechanism
