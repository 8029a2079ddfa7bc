"""
Storage backends for Knowledge Analysis.

Provides the repository interface and concrete implementations
for in-memory and JSON file persistence.
"""

from .base import Repository
from .memory import InMemoryRepository
from .json_file import JsonFileRepository

__all__ = [
    "Repository",
    "InMemoryRepository",
    "JsonFileRepository",
]
