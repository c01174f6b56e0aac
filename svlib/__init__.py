"""Semantic version parsing, comparison, comparator and range matching, and sortable version lists."""

__version__ = "1.0.0"
__all__ = ["numbers", "identifiers", "version", "operators", "comparator", "range", "collection"]