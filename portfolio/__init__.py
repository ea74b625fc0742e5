"""
Learning Portfolio.

Aggregates learning moments into per-category depth scores and selects the
categories surfaced on the portfolio home page.
"""

__version__ = "1.0.0"
