# tests/conftest.py
import pytest

from prefix_autocompleter.core.trie import Trie
from prefix_autocompleter.utils.config_manager import Config
from prefix_autocompleter.utils.logger_utils import Log


@pytest.fixture
def sample_trie():
    """The reference insertion history: 'tea' is inserted twice."""
    t = Trie()
    for w in ["a", "to", "tea", "apples", "an", "test", "tea"]:
        t.insert(w)
    return t


@pytest.fixture
def cfg(tmp_path):
    c = Config(path=None)
    c.data["log_path"] = str(tmp_path / "logs" / "test.log")
    return c


@pytest.fixture
def log(tmp_path):
    return Log(path=str(tmp_path / "logs" / "test.log"), echo=False, level="DEBUG")
