"""Errors raised by the seller report engine.

All of them derive from ``ValueError`` so callers that already guard the
engine with ``except ValueError`` keep working.
"""


class SalesReportError(ValueError):
    """Base class for report engine failures."""


class InvalidInputData(SalesReportError):
    """Dataset is missing, malformed, or has an empty collection."""

    def __init__(self, message: str = "Invalid input data") -> None:
        super().__init__(message)


class MissingStrategyFunctions(SalesReportError):
    """Options are missing, or a required calculation function is absent or not callable."""

    def __init__(self, message: str = "Missing strategy functions") -> None:
        super().__init__(message)


class UnknownReference(SalesReportError):
    """A purchase record points at a seller id or SKU that is not in the dataset."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown {kind} '{key}' referenced by purchase records")
