"""
Usage Hint Handler - Fallback result for anything that is not a command.

Matches every query so the launcher always has something to show.
"""

from filedigest.search.handlers.file_hash import DEFAULT_KEYWORD, get_messages, usage_hint
from filedigest.search.router import Query, ResultItem


class UsageHintHandler:
    """Explain how to use the plugin."""

    name = "usage_hint"
    priority = 1000

    def __init__(self, keyword: str = DEFAULT_KEYWORD, language: str = "en"):
        self.keyword = keyword
        self.messages = get_messages(language)

    def matches(self, query: Query) -> bool:
        return True

    def get_results(self, query: Query) -> list[ResultItem]:
        return [usage_hint(self.messages, self.keyword)]
