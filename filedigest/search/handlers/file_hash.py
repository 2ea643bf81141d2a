"""
File Hash Handler - MD5 of a file typed after the command keyword.

Triggers on the "md5f" keyword (case-sensitive, first term only):
  md5f                      → usage hint (waiting for a path)
  md5f /path/to/file        → digest of the file
  md5f "/path with spaces"  → quotes around the path are dropped

A successful digest produces two results: lowercase and uppercase hex.
"""

from typing import Optional

from loguru import logger

from filedigest.search.router import Query, ResultItem
from filedigest.services.digest import (
    DigestOutcome,
    DigestService,
    Empty,
    FileMissing,
    ReadFailed,
    Success,
    TooLarge,
)
from filedigest.utils.helpers import format_size

DEFAULT_KEYWORD = "md5f"

MESSAGES = {
    "en": {
        "hint_title": "Get file MD5",
        "hint_subtitle": "Example: {keyword} <file path>",
        "missing_title": "File does not exist",
        "path_subtitle": "File path: {path}",
        "too_large_title": "File too large, max: {limit}",
        "too_large_subtitle": "Current size: {size}",
        "read_failed_title": "File could not be read",
        "read_failed_subtitle": "File path: {path} ({reason})",
        "copy_title": "Copy to clipboard",
        "copy_upper_title": "Copy to clipboard (upper)",
        "digest_subtitle": "MD5: {digest}",
    },
    "zh": {
        "hint_title": "获取文件MD5值",
        "hint_subtitle": "示例：{keyword} <文件路径>",
        "missing_title": "文件不存在",
        "path_subtitle": "文件路径：{path}",
        "too_large_title": "文件过大，最大不能超过：{limit}",
        "too_large_subtitle": "当前文件大小：{size}",
        "read_failed_title": "文件无法读取",
        "read_failed_subtitle": "文件路径：{path}（{reason}）",
        "copy_title": "Copy to clipboard",
        "copy_upper_title": "Copy to clipboard (upper)",
        "digest_subtitle": "MD5: {digest}",
    },
}


def get_messages(language: str) -> dict:
    """Return the message table for language, falling back to English."""
    if language not in MESSAGES:
        logger.warning(f"Unknown language '{language}', using 'en'")
        return MESSAGES["en"]
    return MESSAGES[language]


def usage_hint(messages: dict = MESSAGES["en"], keyword: str = DEFAULT_KEYWORD) -> ResultItem:
    return ResultItem(
        title=messages["hint_title"],
        subtitle=messages["hint_subtitle"].format(keyword=keyword),
        result_type="hint",
    )


def extract_path(raw: str, keyword: str = DEFAULT_KEYWORD) -> str:
    """
    Pull the file path out of the raw query text.

    Drops the keyword, surrounding whitespace, and at most one quote
    character on each end (either end may be quoted on its own).
    """
    argument = raw.lstrip()[len(keyword):].strip()
    if argument.startswith('"'):
        argument = argument[1:]
    if argument.endswith('"'):
        argument = argument[:-1]
    return argument.strip()


def build_results(
    outcome: DigestOutcome,
    messages: dict = MESSAGES["en"],
    keyword: str = DEFAULT_KEYWORD,
) -> list[ResultItem]:
    """Convert a digest outcome into the results shown to the user."""
    if isinstance(outcome, Success):
        return [
            _digest_result(outcome.hex_digest, messages["copy_title"], messages),
            _digest_result(outcome.hex_digest.upper(), messages["copy_upper_title"], messages),
        ]

    if isinstance(outcome, FileMissing):
        return [ResultItem(
            title=messages["missing_title"],
            subtitle=messages["path_subtitle"].format(path=outcome.path),
            result_type="error",
        )]

    if isinstance(outcome, TooLarge):
        return [ResultItem(
            title=messages["too_large_title"].format(limit=format_size(outcome.limit)),
            subtitle=messages["too_large_subtitle"].format(size=format_size(outcome.actual_size)),
            result_type="error",
        )]

    if isinstance(outcome, ReadFailed):
        return [ResultItem(
            title=messages["read_failed_title"],
            subtitle=messages["read_failed_subtitle"].format(
                path=outcome.path, reason=outcome.reason
            ),
            result_type="error",
        )]

    if isinstance(outcome, Empty):
        return [usage_hint(messages, keyword)]

    raise TypeError(f"Unknown digest outcome: {outcome!r}")


def _digest_result(digest: str, title: str, messages: dict) -> ResultItem:
    return ResultItem(
        title=title,
        subtitle=messages["digest_subtitle"].format(digest=digest),
        result_type="digest",
        copy_text=digest,
        context_data=digest,
    )


class FileHashHandler:
    """Compute the MD5 of the file named after the keyword."""

    name = "file_hash"
    priority = 100

    def __init__(
        self,
        digest_service: Optional[DigestService] = None,
        keyword: str = DEFAULT_KEYWORD,
        language: str = "en",
    ):
        self.digest_service = digest_service or DigestService()
        self.keyword = keyword
        self.messages = get_messages(language)

    def matches(self, query: Query) -> bool:
        return bool(query.terms) and query.terms[0] == self.keyword

    def get_results(self, query: Query) -> list[ResultItem]:
        if len(query.terms) == 1:
            return [usage_hint(self.messages, self.keyword)]

        path = extract_path(query.raw, self.keyword)
        outcome = self.digest_service.compute(path)
        logger.debug(f"Digest of {path!r}: {type(outcome).__name__}")
        return build_results(outcome, self.messages, self.keyword)
