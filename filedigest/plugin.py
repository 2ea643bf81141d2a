"""
File Digest Plugin - Host-facing entry point.

Wires the query router to its handlers and talks to the launcher host
through two small capabilities handed in from outside:

  HostAPI        current theme plus theme-change subscription
  ClipboardSink  set_text(text) -> bool

Usage:
  plugin = DigestPlugin()
  plugin.init(host_api)
  results = plugin.query("md5f /home/user/Downloads/image.iso")
  plugin.activate(results[0])
"""

from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from loguru import logger

from filedigest.search.context_menu import ContextMenuEntry, project_context_menu
from filedigest.search.handlers import FileHashHandler, UsageHintHandler
from filedigest.search.router import Query, QueryRouter, ResultItem
from filedigest.services.digest import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_FILE_SIZE, DigestService
from filedigest.utils.helpers import copy_to_clipboard, load_settings

LIGHT_ICON = "Images/tools.light.png"
DARK_ICON = "Images/tools.dark.png"


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST_WHITE = "high_contrast_white"
    HIGH_CONTRAST_BLACK = "high_contrast_black"
    HIGH_CONTRAST_ONE = "high_contrast_one"
    HIGH_CONTRAST_TWO = "high_contrast_two"


class HostAPI(Protocol):
    def get_current_theme(self) -> Theme: ...

    def subscribe_theme_changed(self, callback: Callable[[Theme, Theme], None]) -> None: ...

    def unsubscribe_theme_changed(self, callback: Callable[[Theme, Theme], None]) -> None: ...


class ClipboardSink(Protocol):
    def set_text(self, text: str) -> bool: ...


class WlCopyClipboard:
    """Clipboard sink backed by wl-copy."""

    def set_text(self, text: str) -> bool:
        return copy_to_clipboard(text)


def _int_setting(section: dict, key: str, default: int, minimum: int) -> int:
    """Read an integer setting, falling back to default when it is unusable."""
    value = section.get(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid setting {key}={value!r}, using {default}")
        return default

    if number < minimum:
        logger.warning(f"Setting {key}={number} is below {minimum}, using {default}")
        return default
    return number


def icon_for_theme(theme: Theme) -> str:
    if theme in (Theme.LIGHT, Theme.HIGH_CONTRAST_WHITE):
        return LIGHT_ICON
    return DARK_ICON


class DigestPlugin:
    """
    Launcher plugin that shows the MD5 of a file.

    Lifecycle: init(host) → query()/load_context_menus()/activate() → dispose().
    """

    plugin_id = "ED86DFE645DC4D5EAA5BD68112F0CFF8"
    name = "Tools"
    description = "Compute the MD5 digest of a file"

    def __init__(
        self,
        settings: Optional[dict] = None,
        clipboard: Optional[ClipboardSink] = None,
        settings_path: Optional[Path] = None,
    ):
        self.settings = settings if settings is not None else load_settings(settings_path)
        self.clipboard = clipboard or WlCopyClipboard()
        self.icon_path = DARK_ICON
        self.host: Optional[HostAPI] = None
        self.disposed = False

        plugin_settings = self.settings["plugin"]
        digest_settings = self.settings["digest"]
        keyword = plugin_settings["keyword"]
        language = plugin_settings["language"]

        self.router = QueryRouter()
        self.router.register(FileHashHandler(
            digest_service=DigestService(
                max_file_size=_int_setting(digest_settings, "max_file_size", DEFAULT_MAX_FILE_SIZE, 0),
                chunk_size=_int_setting(digest_settings, "chunk_size", DEFAULT_CHUNK_SIZE, 1),
            ),
            keyword=keyword,
            language=language,
        ))
        self.router.register(UsageHintHandler(keyword=keyword, language=language))

    def init(self, host: HostAPI) -> None:
        """Attach to the host and pick the icon for its current theme."""
        if host is None:
            raise ValueError("host must not be None")
        self.host = host
        self.host.subscribe_theme_changed(self._on_theme_changed)
        self._update_icon_path(self.host.get_current_theme())
        logger.debug(f"{self.name} plugin initialized with icon {self.icon_path}")

    def query(self, query: Union[Query, str]) -> list[ResultItem]:
        """Route a query and stamp the icon and display text on each result."""
        if isinstance(query, str):
            query = Query.parse(query)

        _, results = self.router.route(query)
        return [
            replace(result, icon=self.icon_path, query_text=query.raw)
            for result in results
        ]

    def load_context_menus(self, record: ResultItem) -> list[ContextMenuEntry]:
        return project_context_menu(record)

    def activate(self, item: Union[ResultItem, ContextMenuEntry]) -> bool:
        """
        Run the action bound to a result or context menu entry.

        Returns:
            True if a value was copied, False if there was nothing to copy
            or the clipboard rejected it.
        """
        if not item.copy_text:
            return False

        try:
            return self.clipboard.set_text(item.copy_text)
        except Exception:
            logger.exception("Clipboard write failed")
            return False

    def dispose(self) -> None:
        """Detach from the host. Safe to call more than once."""
        if self.disposed:
            return

        if self.host is not None:
            self.host.unsubscribe_theme_changed(self._on_theme_changed)

        self.disposed = True

    def _update_icon_path(self, theme: Theme) -> None:
        self.icon_path = icon_for_theme(theme)

    def _on_theme_changed(self, current_theme: Theme, new_theme: Theme) -> None:
        self._update_icon_path(new_theme)
