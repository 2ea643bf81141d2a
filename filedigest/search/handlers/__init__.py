"""
Search handlers - Pluggable query processors.

Each handler checks if it can handle a query and returns typed results.
"""

from .file_hash import FileHashHandler
from .usage_hint import UsageHintHandler

__all__ = [
    "FileHashHandler",
    "UsageHintHandler",
]
