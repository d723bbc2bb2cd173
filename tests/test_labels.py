"""Tests for label file loading."""
import pytest

from tfutils.domain.errors import InvalidArgument, NotFound
from tfutils.infrastructure.labels import LABELS_PADDING, read_labels_file


class TestReadLabelsFile:
    """Tests for read_labels_file function."""

    def test_pads_to_multiple_of_sixteen(self, write_labels):
        lines = ["background", "cat", "dog", "bird", "fish"]
        labels = read_labels_file(write_labels(lines))

        assert len(labels) == 16
        assert labels[:5] == lines
        assert labels[5:] == [""] * 11

    def test_exact_multiple_is_not_padded(self, write_labels):
        lines = [f"class_{i}" for i in range(LABELS_PADDING * 2)]
        assert read_labels_file(write_labels(lines)) == lines

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert read_labels_file(str(path)) == []

    def test_last_line_without_newline(self, tmp_path):
        path = tmp_path / "labels.txt"
        path.write_text("a\nb\r\nc", encoding="utf-8")
        labels = read_labels_file(str(path))
        assert labels[:3] == ["a", "b", "c"]
        assert len(labels) == 16

    def test_invalid_utf8_raises_invalid_argument(self, tmp_path, caplog):
        path = tmp_path / "latin1.txt"
        path.write_bytes("caf\u00e9\n".encode("latin-1"))
        with caplog.at_level("ERROR"):
            with pytest.raises(InvalidArgument) as excinfo:
                read_labels_file(str(path))
        assert str(path) in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert "not valid UTF-8" in caplog.text

    def test_utf8_labels(self, write_labels):
        labels = read_labels_file(write_labels(["café", "naïve"]))
        assert labels[:2] == ["café", "naïve"]

    def test_missing_file_raises_not_found(self, tmp_path):
        with pytest.raises(NotFound):
            read_labels_file(str(tmp_path / "missing.txt"))

    def test_not_found_is_a_file_not_found_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_labels_file(str(tmp_path / "missing.txt"))
