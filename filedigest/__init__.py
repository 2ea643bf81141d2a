# File Digest Plugin Package
"""
Launcher plugin that computes the MD5 digest of a file.

Modules:
  - search: Query routing, handlers, context menus
  - services: Size-bounded digest computation
  - utils: Size formatting, settings, clipboard
"""

__version__ = "0.1.0-dev"
