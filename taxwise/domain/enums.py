"""Domain enumerations for the TaxWise application.

Enums represent fixed sets of domain values (export categories, currencies).
"""

from enum import Enum


class ExportCategory(str, Enum):
    """Tax deduction category a document package is exported for.

    Each category except GENERAL bundles one reference (sample) document
    from shared storage; see taxwise.application.services.reference_documents.
    """

    MEDICAL = "medical"
    EDUCATIONAL = "educational"
    PROPERTY = "property"
    SOCIAL = "social"
    INVESTMENTS = "investments"
    GENERAL = "general"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid category values as strings."""
        return [category.value for category in cls]


class Currency(str, Enum):
    """Currencies a monetary amount can be entered in."""

    USD = "USD"
    EUR = "EUR"
    RUB = "RUB"
