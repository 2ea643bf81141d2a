"""
Query Router - Dispatches launcher queries to priority-ordered handlers.

Each handler declares a priority (lower = higher priority) and a matches()
method. The router finds the first matching handler and returns its results.
The usage hint handler is always the fallback (highest priority number), so
every query produces at least one result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from loguru import logger


@dataclass(frozen=True)
class Query:
    """A single launcher query: raw text plus whitespace-split terms."""
    raw: str
    terms: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "Query":
        return cls(raw=raw, terms=tuple(raw.split()))


@dataclass
class ResultItem:
    """A single result record handed to the host."""
    title: str
    subtitle: str = ""
    icon: str = ""
    query_text: str = ""
    result_type: str = "hint"  # hint, digest, error
    copy_text: Optional[str] = None  # value copied when the result is activated
    context_data: Optional[str] = None  # payload for the context menu


class SearchHandler(ABC):
    """Base class for all search handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first. The usage hint should be ~1000."""
        ...

    @abstractmethod
    def matches(self, query: Query) -> bool:
        """Return True if this handler should process the query."""
        ...

    @abstractmethod
    def get_results(self, query: Query) -> list[ResultItem]:
        """Return results for the query."""
        ...


class QueryRouter:
    """Routes queries to the appropriate handler based on priority."""

    def __init__(self):
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: Query) -> tuple[str, list[ResultItem]]:
        """
        Find the first matching handler and return its results.

        Args:
            query: The parsed launcher query

        Returns:
            Tuple of (handler_name, results_list).
            Returns ("none", []) if no handler matches.
        """
        for handler in self._handlers:
            if handler.matches(query):
                logger.debug(f"Routing {query.raw!r} to {handler.name}")
                return handler.name, handler.get_results(query)

        return "none", []
