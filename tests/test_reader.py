import pytest

from cubparse.errors import MapError
from cubparse.reader import is_blank_line, is_map_content, read_map_lines


def _write(tmp_path, text, name="scene.cub"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "line, expected",
    [
        ("\n", True),
        ("    \n", True),
        ("  x\n", False),
        ("   ", False),
        ("\t\n", False),
    ],
)
def test_is_blank_line(line, expected):
    assert is_blank_line(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("111\n", True),
        ("  1 1", True),
        ("NO ./a.xpm\n", False),
        ("  F 1,2,3\n", False),
        ("\n", False),
        ("   ", False),
    ],
)
def test_is_map_content(line, expected):
    assert is_map_content(line) is expected


def test_blank_lines_before_map_are_skipped(tmp_path):
    path = _write(tmp_path, "\nNO ./n.xpm\n\n   \nF 1,2,3\n\n111\n101\n111\n")
    assert read_map_lines(path) == ["NO ./n.xpm", "F 1,2,3", "111", "101", "111"]


def test_blank_line_after_map_ends_reading(tmp_path):
    path = _write(tmp_path, "C 1,2,3\n111\n1N1\n\n999\nrest\n")
    assert read_map_lines(path) == ["C 1,2,3", "111", "1N1"]


def test_last_line_without_newline_is_kept(tmp_path):
    path = _write(tmp_path, "111\n1N1\n111")
    assert read_map_lines(path) == ["111", "1N1", "111"]


def test_empty_file_is_rejected(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(MapError, match="Map Empty!"):
        read_map_lines(path)


def test_only_blank_lines_is_rejected(tmp_path):
    path = _write(tmp_path, "\n   \n\n")
    with pytest.raises(MapError, match="Map Empty!"):
        read_map_lines(path)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(MapError, match="Error in Filemap"):
        read_map_lines(tmp_path / "absent.cub")