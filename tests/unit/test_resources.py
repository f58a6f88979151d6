"""Tests for resource file access."""

import base64
from pathlib import Path

import pytest

from chat_samples.core.errors import ResourceNotFoundError
from chat_samples.utils.resources import BUNDLED_RESOURCES_DIR, ResourceStore


class TestBundledResources:
    """Tests for the resources shipped with the package."""

    def test_default_root(self) -> None:
        """Test that the default store reads the bundled directory."""
        assert ResourceStore().root == BUNDLED_RESOURCES_DIR

    @pytest.mark.parametrize("name", ["GenerateStory.yaml", "Hamlet_full_play_summary.txt", "countries.json"])
    def test_bundled_files_exist(self, name: str) -> None:
        """Test the files the samples read."""
        assert ResourceStore().exists(name)


class TestResourceStore:
    """Tests for ResourceStore."""

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading a UTF-8 file."""
        (tmp_path / "notes.txt").write_text("café", encoding="utf-8")
        assert ResourceStore(tmp_path).read_text("notes.txt") == "café"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file names its path."""
        store = ResourceStore(tmp_path)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            store.read_text("missing.txt")

        assert exc_info.value.path == str(tmp_path / "missing.txt")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        """Test that directories do not count as resources."""
        (tmp_path / "folder").mkdir()
        assert ResourceStore(tmp_path).exists("folder") is False

    def test_open_stream(self, tmp_path: Path) -> None:
        """Test binary streaming."""
        (tmp_path / "blob.bin").write_bytes(b"\x00\x01")

        with ResourceStore(tmp_path).open_stream("blob.bin") as stream:
            assert stream.read() == b"\x00\x01"

    def test_data_uri_png(self, tmp_path: Path) -> None:
        """Test the media type follows the suffix."""
        (tmp_path / "dot.png").write_bytes(b"\x89PNG")
        uri = ResourceStore(tmp_path).data_uri("dot.png")

        assert uri.startswith("data:image/png;base64,")
        assert base64.b64decode(uri.split(",", 1)[1]) == b"\x89PNG"

    def test_data_uri_defaults_to_jpeg(self, tmp_path: Path) -> None:
        """Test unknown suffixes are sent as JPEG."""
        (tmp_path / "photo").write_bytes(b"abc")
        assert ResourceStore(tmp_path).data_uri("photo").startswith("data:image/jpeg;base64,")

    def test_data_uri_missing(self, tmp_path: Path) -> None:
        """Test that encoding a missing image fails."""
        with pytest.raises(ResourceNotFoundError):
            ResourceStore(tmp_path).data_uri("cat.jpg")
