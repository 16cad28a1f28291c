"""Exceptions raised by sweepdedupe.

Every failure aborts the whole run; nothing is retried and no partial
result is returned. Parser errors (``sweepdedupe.parse.ParseError``) are
raised by the parser and propagate unchanged.
"""

__all__ = [
    "DedupeError",
    "InvalidInputError",
    "InvalidSettingError",
    "StrategyValidationError",
    "UnknownStrategyError",
]


class DedupeError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(DedupeError):
    """Raised when the input is not a sequence of records."""


class UnknownStrategyError(DedupeError):
    """Raised when a strategy is not in the catalog or its descriptor is malformed."""


class InvalidSettingError(DedupeError):
    """Raised when a setting name or value is not recognized."""


class StrategyValidationError(DedupeError):
    """Raised when a strategy fails validation.

    Attributes
    ----------
    errors : list[str]
        Every violation found, in the order they were detected.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the list of violations.

        Parameters
        ----------
        errors : list[str]
            Violation messages.
        """
        super().__init__("Invalid strategy - " + ", ".join(errors))
        self.errors = list(errors)
