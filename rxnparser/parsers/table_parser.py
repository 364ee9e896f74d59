"""Parser for tabular (CSV) mechanisms."""

import pandas as pd

from ..config import ParserConfig
from ..mechanism import Mechanism
from .base_parser import BaseParser


class TableParser(BaseParser):
    """Parser for CSV files with one reaction expression per row.

    The expression is read from ``config.equation_column``; other columns
    (rate parameters, references, ...) are ignored.
    """

    def __init__(self, config: ParserConfig | None = None):  # noqa
        super().__init__("table", config)

    def parse_network(self, filepath: str) -> Mechanism:
        df = pd.read_csv(filepath, comment=self.config.comment_char, encoding=self.config.encoding)
        column = self.config.equation_column
        if column not in df.columns:
            raise ValueError(
                f"Column {column!r} not found in {filepath}. "
                f"Available columns: {list(df.columns)}"
            )
        return self._build_mechanism(df[column].dropna().tolist())
