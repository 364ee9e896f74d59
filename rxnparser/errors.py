"""Exceptions raised while parsing and validating reaction expressions."""

from enum import Enum

_HTML_CODE = '<span style="font-family: Courier New, consola">{}</span>'


def _code(text: str) -> str:
    return _HTML_CODE.format(text)


class ConservationKind(str, Enum):
    """Dimension along which a conservation check failed."""

    MASS = "mass"
    SITE = "site"


class RxnEquationError(ValueError):
    """Base class for all reaction expression errors.

    ``html_message`` renders the same message with the offending
    expression(s) in a monospace span, for display in web front ends.
    """

    def __init__(self, message: str, html_message: str | None = None):  # noqa
        super().__init__(message)
        self.message = message
        self.html_message = html_message or message


class InvalidFormulaError(RxnEquationError):
    """A species token does not match the formula grammar."""

    def __init__(self, text: str):  # noqa
        self.text = text
        super().__init__(
            f"Invalid chemical formula {text}",
            f"Invalid chemical formula {_code(text)}",
        )


class InvalidEquationError(RxnEquationError):
    """A reaction string cannot be split into 2 or 3 states."""

    def __init__(self, text: str):  # noqa
        self.text = text
        super().__init__(
            f"Invalid reaction equation: {text}",
            f"Invalid reaction equation: {_code(text)}",
        )


class ConservationError(RxnEquationError):
    """Element or site counts differ between two formulas or states."""

    def __init__(  # noqa
        self,
        kind: ConservationKind,
        left: str,
        right: str,
        level: str = "state",
    ):
        self.kind = ConservationKind(kind)
        self.left = left
        self.right = right
        self.level = level
        label = "Mass" if self.kind is ConservationKind.MASS else "Site"
        super().__init__(
            f"{label} of chemical {level} {left} and {right} are not conservative",
            f"{label} of chemical {level} {_code(left)} and {_code(right)} "
            "are not conservative",
        )


class ConservationTypeError(RxnEquationError, TypeError):
    """A conservation check was given an operand of a different kind."""

    def __init__(self, expected: type, got: object):  # noqa
        self.expected = expected
        self.got = got
        super().__init__(
            f"Parameter another must be an instance of {expected.__name__}, "
            f"got {type(got).__name__}"
        )
