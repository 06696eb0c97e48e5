"""Root test configuration: shared markup fixtures"""

import pytest

from blockmark.core.sample import SAMPLE_DOCUMENT


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_DOCUMENT


@pytest.fixture(name="sample_file")
def sample_file_fixture(tmp_path):
    """SAMPLE_DOCUMENT written to a temporary .md file."""
    f = tmp_path / "guide.md"
    f.write_text(SAMPLE_DOCUMENT + "\n", encoding="utf-8")
    return f
