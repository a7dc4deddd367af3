"""Portfolio site content catalog and filtering."""

__version__ = "0.1.0"
