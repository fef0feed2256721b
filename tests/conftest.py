import pytest


@pytest.fixture
def syllables_path(tmp_path):
    path = tmp_path / "syllables.txt"
    path.write_text("ma3 zhuan4\nliu2\n\nzhang6\n", encoding="utf-8")
    return str(path)
