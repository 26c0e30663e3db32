from configparser import ConfigParser

import pytest

from utils.config import Config


@pytest.fixture
def config():
    return Config(ConfigParser())


@pytest.fixture
def text_file(tmp_path):
    def make(content, name="story.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return make


@pytest.fixture
def answers():
    """Build a read_line stand-in that replays lines, then acts like a closed stdin."""
    def make(*lines):
        pending = list(lines)

        def read_line():
            if not pending:
                raise EOFError
            return pending.pop(0)
        return read_line
    return make


@pytest.fixture(autouse=True)
def fresh_terminal(monkeypatch):
    """Each test starts as if nothing had been printed yet."""
    monkeypatch.setattr("counter.messages._after_blank_line", False)
