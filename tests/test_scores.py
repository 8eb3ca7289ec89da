import pytest

from arcadebox.scores import HighScore, read_highscore, write_highscore


def test_round_trip(tmp_path):
    path = tmp_path / "hs.txt"
    write_highscore(path, 1234)
    assert read_highscore(path) == 1234


def test_write_truncates(tmp_path):
    path = tmp_path / "hs.txt"
    write_highscore(path, 99999)
    write_highscore(path, 7)
    assert read_highscore(path) == 7


def test_only_first_line_is_read(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("42\nrubbish\n", encoding="utf-8")
    assert read_highscore(path) == 42


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_highscore(tmp_path / "absent.txt")


def test_empty_file_raises(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        read_highscore(path)


def test_highscore_loads_and_persists_higher(tmp_path):
    path = tmp_path / "hs.txt"
    write_highscore(path, 50)
    best = HighScore(path)
    assert best.value == 50
    assert best.update(80) is True
    assert best.value == 80
    assert read_highscore(path) == 80


def test_highscore_ignores_lower(tmp_path):
    path = tmp_path / "hs.txt"
    write_highscore(path, 50)
    best = HighScore(path)
    assert best.update(50) is False
    assert best.update(10) is False
    assert read_highscore(path) == 50


def test_in_memory_highscore():
    best = HighScore()
    assert best.value == 0
    assert best.update(5) is True
    assert best.value == 5