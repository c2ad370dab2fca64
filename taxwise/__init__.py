"""TaxWise backend: document export packages, deduction suggestions and audit log."""

__version__ = "1.0.0"
