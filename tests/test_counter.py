"""Tests for the WordCounter pipeline."""

import logging

import pytest

from counter import WordCounter, validate_input_filename
from counter.errors import (
    ConfigError,
    FileOpenError,
    FileWriteError,
    InvalidExtensionError,
    PromptClosedError,
    UsageError,
)


def test_validate_input_filename():
    assert validate_input_filename("story.txt") == "story.txt"


def test_validate_missing_filename():
    with pytest.raises(UsageError):
        validate_input_filename(None)


def test_validate_empty_filename_is_present():
    with pytest.raises(InvalidExtensionError):
        validate_input_filename("")


def test_validate_wrong_extension():
    with pytest.raises(InvalidExtensionError) as info:
        validate_input_filename("story.md")
    assert info.value.filename == "story.md"
    assert '".txt"' in str(info.value)


def test_count(config, text_file):
    counter = WordCounter(config)
    assert counter.count(str(text_file("b a b\nc b"))) == {"a": 1, "b": 3, "c": 1}


def test_count_missing_file(config, tmp_path):
    with pytest.raises(FileOpenError):
        WordCounter(config).count(str(tmp_path / "missing.txt"))


def test_start_with_default_name(config, text_file, answers, capsys):
    path = text_file("the cat sat on the mat")
    counter = WordCounter(config, read_line=answers(""))
    output = counter.start(str(path))

    assert output == str(path.parent / "story - WordCounts.txt")
    with open(output, encoding="utf-8") as f:
        assert f.read() == "cat: 1\nmat: 1\non: 1\nsat: 1\nthe: 2\n"

    out = capsys.readouterr().out
    assert "\nThe word counts will be stored in a file.\n\n" in out
    assert f'The words from "{path}" were counted and written to "{output}"' in out
    assert out.endswith("\nThank you for using the Word Counter program!\nGoodbye.\n\n")


def test_start_with_chosen_name(config, text_file, answers, tmp_path):
    path = text_file("one two two")
    chosen = str(tmp_path / "chosen.txt")
    output = WordCounter(config, read_line=answers("bad", chosen)).start(str(path))
    assert output == chosen
    assert (tmp_path / "chosen.txt").read_text(encoding="utf-8") == "one: 1\ntwo: 2\n"


def test_start_uses_injected_prompt_and_writer(config, text_file):
    calls = {}

    def prompt(default_filename, cursor, read_line):
        calls["prompt"] = (default_filename, cursor)
        return "picked.txt"

    def writer(frequencies, output_path, encoding):
        calls["writer"] = (dict(frequencies), output_path, encoding)
        return len(frequencies)

    path = text_file("x y x")
    counter = WordCounter(config, prompt=prompt, writer=writer)
    assert counter.start(str(path)) == "picked.txt"
    assert calls["prompt"] == (str(path.parent / "story - WordCounts.txt"), ">")
    assert calls["writer"] == ({"x": 2, "y": 1}, "picked.txt", "utf-8")


def test_start_can_overwrite_its_own_input(config, text_file, answers):
    path = text_file("b a b")
    WordCounter(config, read_line=answers(str(path))).start(str(path))
    assert path.read_text(encoding="utf-8") == "a: 1\nb: 2\n"


def test_start_validates_before_reading(config, answers):
    with pytest.raises(InvalidExtensionError):
        WordCounter(config, read_line=answers("")).start("story.csv")


def test_start_prompt_closed_writes_nothing(config, text_file, answers):
    path = text_file("a b c")
    with pytest.raises(PromptClosedError):
        WordCounter(config, read_line=answers()).start(str(path))
    assert not (path.parent / "story - WordCounts.txt").exists()


def test_start_unwritable_output(config, text_file, answers, tmp_path):
    path = text_file("a b c")
    target = str(tmp_path / "missing dir" / "out.txt")
    with pytest.raises(FileWriteError):
        WordCounter(config, read_line=answers(target)).start(str(path))


def test_start_logs_progress(config, text_file, answers, tmp_path, caplog, monkeypatch):
    # Fresh handlers so nothing writes to a stream captured by an earlier test
    monkeypatch.setattr(logging.getLogger("COUNTER"), "handlers", [])
    config.log_level = "INFO"
    path = text_file("b a b\nc b")
    chosen = str(tmp_path / "out.txt")

    with caplog.at_level(logging.INFO, logger="COUNTER"):
        WordCounter(config, read_line=answers(chosen)).start(str(path))

    logged = [record.getMessage() for record in caplog.records
              if record.name == "COUNTER"]
    assert logged == [
        f"Counted 5 words, 3 distinct, in {path}.",
        f"Word counts will be written to {chosen}.",
        f"Wrote 3 lines to {chosen}.",
    ]


def test_default_level_keeps_info_quiet(config, text_file, answers, caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("COUNTER"), "handlers", [])
    path = text_file("a")
    WordCounter(config, read_line=answers("")).start(str(path))
    assert [r for r in caplog.records if r.name == "COUNTER"] == []


def test_unopenable_log_file(config, tmp_path, monkeypatch):
    monkeypatch.setattr(logging.getLogger("COUNTER"), "handlers", [])
    config.log_file = str(tmp_path / "missing dir" / "counter.log")
    with pytest.raises(ConfigError) as info:
        WordCounter(config)
    assert "counter.log" in str(info.value)
    assert logging.getLogger("COUNTER").handlers == []
