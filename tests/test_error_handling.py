"""
Tests for error handling across services, handlers and the plugin.

Verifies graceful degradation when things go wrong:
- Unreadable files
- Files deleted between the existence check and the open
- Clipboard failures
"""

import errno

from filedigest.plugin import DigestPlugin
from filedigest.search.router import Query, ResultItem
from filedigest.services import digest as digest_module
from filedigest.services.digest import DigestService, FileMissing, ReadFailed
from filedigest.utils.helpers import load_settings


def _raising_open(exc):
    def fake_open(*args, **kwargs):
        raise exc
    return fake_open


class TestDigestErrorHandling:
    """Test DigestService maps OS errors to outcomes instead of raising."""

    def test_permission_denied_is_read_failure(self, hello_file, monkeypatch):
        monkeypatch.setattr(
            digest_module, "open",
            _raising_open(PermissionError(errno.EACCES, "Permission denied")),
            raising=False,
        )
        outcome = DigestService().compute(str(hello_file))
        assert outcome == ReadFailed(str(hello_file), "Permission denied")

    def test_io_error_is_read_failure(self, hello_file, monkeypatch):
        monkeypatch.setattr(
            digest_module, "open",
            _raising_open(OSError(errno.EIO, "Input/output error")),
            raising=False,
        )
        outcome = DigestService().compute(str(hello_file))
        assert isinstance(outcome, ReadFailed)

    def test_deleted_after_check_is_missing(self, hello_file, monkeypatch):
        monkeypatch.setattr(
            digest_module, "open",
            _raising_open(FileNotFoundError(errno.ENOENT, "No such file or directory")),
            raising=False,
        )
        outcome = DigestService().compute(str(hello_file))
        assert outcome == FileMissing(str(hello_file))


class FailingReadFile:
    """Real file handle whose read() fails partway through streaming."""

    def __init__(self, handle):
        self.handle = handle

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.handle.close()
        return False

    @property
    def closed(self):
        return self.handle.closed

    def fileno(self):
        return self.handle.fileno()

    def read(self, size=-1):
        raise OSError(errno.EIO, "Input/output error")


class TestStreamingErrorHandling:
    """Test errors raised while reading an already opened file."""

    def test_read_error_is_read_failure_and_handle_closed(self, hello_file, monkeypatch):
        wrappers = []

        def failing_open(*args, **kwargs):
            wrapper = FailingReadFile(open(*args, **kwargs))
            wrappers.append(wrapper)
            return wrapper

        monkeypatch.setattr(digest_module, "open", failing_open, raising=False)
        outcome = DigestService().compute(str(hello_file))

        assert outcome == ReadFailed(str(hello_file), "Input/output error")
        assert len(wrappers) == 1
        assert wrappers[0].closed


class TestPipelineAlwaysAnswers:
    """Every query produces at least one record."""

    def test_read_failure_becomes_single_record(self, hello_file, monkeypatch, fake_clipboard):
        monkeypatch.setattr(
            digest_module, "open",
            _raising_open(PermissionError(errno.EACCES, "Permission denied")),
            raising=False,
        )
        plugin = DigestPlugin(settings=load_settings(hello_file.parent / "none.toml"),
                              clipboard=fake_clipboard)
        results = plugin.query(f"md5f {hello_file}")
        assert len(results) == 1
        assert results[0].title == "File could not be read"

    def test_odd_queries(self, tmp_path, fake_clipboard):
        plugin = DigestPlugin(settings=load_settings(tmp_path / "none.toml"),
                              clipboard=fake_clipboard)
        for raw in ["", "   ", "md5f", "md5f   ", 'md5f "', "md5f \"\"", "MD5F x"]:
            assert len(plugin.query(Query.parse(raw))) >= 1


class TestClipboardErrorHandling:
    """Test that clipboard failures do not escape activate()."""

    def test_raising_clipboard_returns_false(self, tmp_path):
        class BrokenClipboard:
            def set_text(self, text):
                raise RuntimeError("clipboard locked")

        plugin = DigestPlugin(settings=load_settings(tmp_path / "none.toml"),
                              clipboard=BrokenClipboard())
        assert plugin.activate(ResultItem(title="t", copy_text="abc")) is False
