# File Digest Services Package
"""
Backend services for the file digest plugin.

Services handle file access and digest computation.
"""

from .digest import (
    DigestOutcome,
    DigestService,
    Empty,
    FileMissing,
    ReadFailed,
    Success,
    TooLarge,
)

__all__ = [
    "DigestOutcome",
    "DigestService",
    "Empty",
    "FileMissing",
    "ReadFailed",
    "Success",
    "TooLarge",
]
