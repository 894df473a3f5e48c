"""
Common exceptions for budget-constrained item selection.
"""


class InvalidItem(ValueError):
    """Raised when an Item is built with an empty label, cost <= 0 or benefit < 0."""


class InputTooLarge(ValueError):
    """Raised when a collection is too large for exhaustive subset enumeration."""


class CatalogLoadError(ValueError):
    """Raised when a catalog file is structurally malformed (wrong field count)."""
