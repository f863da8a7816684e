"""Papergraph - catalog, tagging and evaluation service for academic papers."""

__version__ = "1.0.0"
