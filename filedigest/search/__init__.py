"""
Search package - Query routing and handler framework.

Provides a pluggable search system where queries are dispatched to
priority-ordered handlers (file digest, usage hint).
"""

from .context_menu import ContextMenuEntry, project_context_menu
from .router import Query, QueryRouter, ResultItem, SearchHandler

__all__ = [
    "ContextMenuEntry",
    "Query",
    "QueryRouter",
    "ResultItem",
    "SearchHandler",
    "project_context_menu",
]
