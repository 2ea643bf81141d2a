"""
Shared test fixtures for the file digest test suite.

Provides temporary files and settings that use real file I/O
(no mocking of the filesystem).
"""

import pytest
import toml


@pytest.fixture
def empty_file(tmp_path):
    """Create a real zero-byte file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def hello_file(tmp_path):
    """Create a real file containing b'hello'."""
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    return path


@pytest.fixture
def spaced_file(tmp_path):
    """Create a real file whose path contains spaces."""
    directory = tmp_path / "with spaces"
    directory.mkdir()
    path = directory / "hello world.txt"
    path.write_bytes(b"hello")
    return path


@pytest.fixture
def big_file(tmp_path):
    """Create a real 2 KiB file (used with a small size limit)."""
    path = tmp_path / "big.bin"
    path.write_bytes(b"\x00" * 2048)
    return path


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "plugin": {"keyword": "md5f", "language": "en"},
        "digest": {"max_file_size": 1024, "chunk_size": 4},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


class FakeClipboard:
    """Clipboard sink that records what was copied."""

    def __init__(self, accept=True):
        self.accept = accept
        self.copied = []

    def set_text(self, text):
        self.copied.append(text)
        return self.accept


class FakeHost:
    """Host API with a settable theme and a callback list."""

    def __init__(self, theme):
        self.theme = theme
        self.callbacks = []

    def get_current_theme(self):
        return self.theme

    def subscribe_theme_changed(self, callback):
        self.callbacks.append(callback)

    def unsubscribe_theme_changed(self, callback):
        self.callbacks.remove(callback)

    def change_theme(self, new_theme):
        old, self.theme = self.theme, new_theme
        for callback in list(self.callbacks):
            callback(old, new_theme)


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def make_host():
    """Factory for FakeHost instances starting at a given theme."""
    return FakeHost
