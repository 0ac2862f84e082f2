"""Shared fixtures."""

import pytest

from tags import TAG1, TAG2, TAG3


@pytest.fixture
def tag_file(tmp_path):
    path = tmp_path / "tags.txt"
    path.write_text(f"{TAG1}\n{TAG2}\n{TAG3}\n", encoding="utf-8")
    return path
