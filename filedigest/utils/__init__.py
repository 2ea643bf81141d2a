# File Digest Utilities Package
"""
Shared utility functions and helpers for the file digest plugin.
"""

from .helpers import copy_to_clipboard, format_size, load_settings

__all__ = ["copy_to_clipboard", "format_size", "load_settings"]
