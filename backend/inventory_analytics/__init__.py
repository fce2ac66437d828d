"""Inventory Analytics - stock health classification, depletion projection and alerting."""

__version__ = "1.0.0"
