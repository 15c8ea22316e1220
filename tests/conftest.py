from pathlib import Path
import pytest

DATA_DIR = Path(__file__).parent / "data"

@pytest.fixture
def words_path() -> Path:
    return DATA_DIR / "words.txt"

@pytest.fixture
def words(words_path) -> list[str]:
    return words_path.read_text().splitlines()
