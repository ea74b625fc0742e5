"""
Storage module.

Handles persistence and retrieval of categories, learning moments and podcast data.
"""

from portfolio.storage.base import Storage
from portfolio.storage.memory import InMemoryStorage

__all__ = [
    "Storage",
    "InMemoryStorage",
]
