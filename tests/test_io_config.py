from __future__ import annotations

import stat
from pathlib import Path

import pytest

from tag_cloud.config import TagCloudConfig, parse_word_count
from tag_cloud.errors import InputNotFoundError, InvalidWordCountError, OutputWriteError
from tag_cloud.io import StagedOutputs, read_lines, write_staged_text


def test_read_lines(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("first line\nsecond\n", encoding="utf-8")
    assert read_lines(path) == ["first line\n", "second\n"]


def test_read_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError) as excinfo:
        read_lines(tmp_path / "missing.txt")
    assert isinstance(excinfo.value, FileNotFoundError)


def test_read_lines_undecodable(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(InputNotFoundError):
        read_lines(path, encoding="utf-8")
    assert read_lines(path, encoding="latin-1") == ["café\n"]


def test_read_lines_unknown_encoding(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("word\n", encoding="utf-8")
    with pytest.raises(InputNotFoundError, match="no-such-codec"):
        read_lines(path, encoding="no-such-codec")


def test_write_staged_text_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "out" / "cloud.html"
    with StagedOutputs() as outputs:
        write_staged_text(outputs, target, "<html></html>\n")
        assert not target.exists()
        outputs.commit()
    assert target.read_text(encoding="utf-8") == "<html></html>\n"
    assert [p.name for p in target.parent.iterdir()] == ["cloud.html"]


def test_write_staged_text_uses_default_file_mode(tmp_path: Path) -> None:
    reference = tmp_path / "reference.html"
    reference.write_text("data", encoding="utf-8")
    target = tmp_path / "cloud.html"
    with StagedOutputs() as outputs:
        write_staged_text(outputs, target, "data")
        outputs.commit()
    assert stat.S_IMODE(target.stat().st_mode) == stat.S_IMODE(reference.stat().st_mode)


def test_write_staged_text_keeps_existing_mode(tmp_path: Path) -> None:
    target = tmp_path / "cloud.html"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o640)
    with StagedOutputs() as outputs:
        write_staged_text(outputs, target, "new")
        outputs.commit()
    assert target.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_staged_outputs_directory_target_leaves_no_file(tmp_path: Path) -> None:
    target = tmp_path / "cloud.html"
    target.mkdir()
    with pytest.raises(OutputWriteError), StagedOutputs() as outputs:
        write_staged_text(outputs, target, "data")
    assert target.is_dir()
    assert [p.name for p in tmp_path.iterdir()] == ["cloud.html"]


def test_staged_outputs_discards_without_commit(tmp_path: Path) -> None:
    html = tmp_path / "cloud.html"
    frequency = tmp_path / "freq.parquet"
    frequency.mkdir()
    with pytest.raises(OutputWriteError), StagedOutputs() as outputs:
        write_staged_text(outputs, html, "data")
        outputs.stage(frequency)
        outputs.commit()
    assert not html.exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["freq.parquet"]


@pytest.mark.parametrize("value, expected", [("1", 1), (" 25 ", 25), ("100", 100)])
def test_parse_word_count(value: str, expected: int) -> None:
    assert parse_word_count(value) == expected


@pytest.mark.parametrize("value", ["0", "-3", "ten", "", "2.5"])
def test_parse_word_count_invalid(value: str) -> None:
    with pytest.raises(InvalidWordCountError):
        parse_word_count(value)


def test_config_validate(tmp_path: Path) -> None:
    config = TagCloudConfig(tmp_path / "in.txt", tmp_path / "out.html", num_words=5, separators=" .")
    config.validate()
    assert config.separator_set == frozenset({" ", "."})


@pytest.mark.parametrize("num_words", [0, -1, True])
def test_config_validate_rejects_word_count(tmp_path: Path, num_words: int) -> None:
    config = TagCloudConfig(tmp_path / "in.txt", tmp_path / "out.html", num_words=num_words)
    with pytest.raises(InvalidWordCountError):
        config.validate()


def test_config_validate_rejects_empty_separators(tmp_path: Path) -> None:
    config = TagCloudConfig(tmp_path / "in.txt", tmp_path / "out.html", num_words=5, separators="")
    with pytest.raises(ValueError):
        config.validate()
