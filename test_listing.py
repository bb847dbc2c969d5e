import os
import sys
import threading
import pytest
from unittest.mock import MagicMock, Mock, patch

from explorer.errors import PathNotFound
from explorer.listing import list_entries, read_content
from explorer.paths import FileSystemEntry, resolve
from explorer.views import ItemView, ListingView, select_view


@pytest.fixture
def root(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "readme.txt").write_text("hello")
    (tmp_path / "image.bin").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00")
    return str(tmp_path)


class TestListEntries:
    """Test cases for directory enumeration."""

    def test_lists_immediate_children_with_types(self, root):
        """Test that every child is listed once with its actual type."""
        with open(os.path.join(root, "docs", "nested.txt"), "w") as f:
            f.write("not listed at top level")

        entries = list_entries(resolve("", root))

        assert {(e.name, e.is_dir) for e in entries} == {
            ("docs", True),
            ("src", True),
            ("readme.txt", False),
            ("image.bin", False),
        }
        assert all(e.path == os.path.join(root, e.name) for e in entries)

    def test_empty_directory(self, root):
        assert list_entries(resolve("src", root)) == []

    def test_file_entry_returns_none(self, root):
        """Test that listing a file is refused rather than raising."""
        assert list_entries(resolve("readme.txt", root)) is None

    def test_unreadable_directory_returns_none(self, root):
        """Test that a directory that cannot be opened yields None."""
        entry = resolve("docs", root)
        with patch("explorer.listing.os.scandir", side_effect=PermissionError("denied")):
            assert list_entries(entry) is None

    def test_failing_child_is_skipped(self, root):
        """Test that one child failing its type check does not abort the listing."""
        good = Mock()
        good.name = "good.txt"
        good.path = os.path.join(root, "good.txt")
        good.is_dir.return_value = False

        gone = Mock()
        gone.name = "gone"
        gone.path = os.path.join(root, "gone")
        gone.is_dir.side_effect = FileNotFoundError("vanished")

        scanner = MagicMock()
        scanner.__enter__.return_value = scanner
        scanner.__iter__.return_value = iter([gone, good])

        with patch("explorer.listing.os.scandir", return_value=scanner):
            entries = list_entries(resolve("", root))

        assert entries == [FileSystemEntry(name="good.txt", path=good.path, is_dir=False)]

    @pytest.mark.skipif(sys.platform != "linux", reason="needs byte file names")
    def test_undecodable_name_is_kept_losslessly(self, root):
        """Test that a non-UTF-8 name survives listing and resolves again."""
        raw = os.path.join(os.fsencode(root), b"bad\xff.txt")
        with open(raw, "wb") as f:
            f.write(b"data")

        entries = list_entries(resolve("", root))
        bad = [e for e in entries if os.fsencode(e.name) == b"bad\xff.txt"]

        assert len(bad) == 1
        assert resolve(bad[0].name, root).path == bad[0].path


class TestReadContent:
    """Test cases for decoding file content."""

    def test_reads_text(self, root):
        assert read_content(resolve("readme.txt", root)) == "hello"

    def test_reads_utf8(self, root):
        path = os.path.join(root, "unicode.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("café ✓")

        assert read_content(resolve("unicode.txt", root)) == "café ✓"

    def test_binary_returns_none(self, root):
        assert read_content(resolve("image.bin", root)) is None

    def test_directory_returns_none(self, root):
        assert read_content(resolve("docs", root)) is None

    def test_file_over_cap_returns_none(self, root):
        """Test that files larger than the cap are not decoded."""
        entry = resolve("readme.txt", root)

        assert read_content(entry, max_bytes=4) is None
        assert read_content(entry, max_bytes=5) == "hello"

    def test_unreadable_file_returns_none(self, root):
        """Test that I/O errors are absorbed instead of propagated."""
        entry = resolve("readme.txt", root)
        with patch("builtins.open", side_effect=PermissionError("denied")):
            assert read_content(entry) is None

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs named pipes")
    def test_named_pipe_returns_none_without_blocking(self, root):
        """Test that a FIFO with no writer is not opened."""
        os.mkfifo(os.path.join(root, "pipe"))
        entry = resolve("pipe", root)
        result = {}

        reader = threading.Thread(target=lambda: result.update(content=read_content(entry)))
        reader.daemon = True
        reader.start()
        reader.join(timeout=2)

        assert not reader.is_alive()
        assert result["content"] is None

    @pytest.mark.skipif(not os.path.exists("/dev/zero"), reason="needs /dev/zero")
    def test_character_device_returns_none(self):
        """Test that an endless device is not read."""
        entry = FileSystemEntry(name="zero", path="/dev/zero", is_dir=False)

        assert read_content(entry) is None

    def test_vanished_file_returns_none(self, root):
        entry = resolve("readme.txt", root)
        os.remove(entry.path)

        assert read_content(entry) is None


class TestSelectView:
    """Test cases for choosing between the listing and item views."""

    def test_directory_gives_listing(self, root):
        view = select_view("docs", root)

        assert isinstance(view, ListingView)
        assert view.path == "docs"
        assert view.entries == []

    def test_file_gives_item(self, root):
        view = select_view("readme.txt", root)

        assert isinstance(view, ItemView)
        assert view.entry.name == "readme.txt"

    def test_missing_path_raises(self, root):
        with pytest.raises(PathNotFound):
            select_view("missing", root)

    def test_unreadable_directory_raises_not_found(self, root):
        """Test that an unlistable directory is reported like a missing one."""
        with patch("explorer.views.list_entries", return_value=None):
            with pytest.raises(PathNotFound):
                select_view("docs", root)
