"""
Tests for readme_check.validation.document
"""

import pytest

from readme_check.errors import DocumentLoadError
from readme_check.validation.document import load_document


def test_loads_utf8_text(readme_file):
    path = readme_file("## Usage\n\nÜbersicht ✓\n")
    assert load_document(path) == "## Usage\n\nÜbersicht ✓\n"


def test_empty_file_loads_as_empty_string(readme_file):
    assert load_document(readme_file("")) == ""


def test_missing_file(tmp_path):
    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(str(tmp_path / "nope.md"))
    assert "File not found" in str(exc_info.value)


def test_directory_is_rejected(tmp_path):
    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(str(tmp_path))
    assert "not a file" in str(exc_info.value)


def test_empty_path():
    with pytest.raises(DocumentLoadError):
        load_document("")


def test_invalid_utf8(tmp_path):
    fp = tmp_path / "latin1.md"
    fp.write_bytes("## Caf\xe9".encode("latin-1"))
    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(str(fp))
    assert exc_info.value.path == str(fp)
