import pytest

from cubparse.cli import format_map, main
from cubparse.parser import CubMap, parse

HEADER = [
    "NO ./north.xpm",
    "SO ./south.xpm",
    "WE ./west.xpm",
    "EA ./east.xpm",
    "F 220,100,0",
    "C 225,30,0",
]
GRID = ["111111", "100001", "10N001", "111111"]


def _scene(tmp_path, lines, name="scene.cub"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_format_map_lists_lines_then_banner():
    cub = CubMap(lines=("NO a.xpm", "111"))
    assert format_map(cub) == "NO a.xpm\n111\n\n-- VALID MAP -- \n"


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""


def test_valid_scene_is_printed(tmp_path, capsys):
    path = _scene(tmp_path, HEADER + GRID)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == format_map(parse(path))
    assert out.startswith(HEADER[0] + "\n")
    assert out.endswith("\n-- VALID MAP -- \n")


def test_invalid_suffix_reports_error(tmp_path, capsys):
    path = _scene(tmp_path, HEADER + GRID, name="scene.map")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "filename must end with .cub" in captured.err
    assert captured.out == ""


def test_open_map_reports_error(tmp_path, capsys):
    grid = ["111111", "100001", "10N00 ", "111111"]
    path = _scene(tmp_path, HEADER + grid)
    assert main([str(path)]) == 1
    assert "Map not closed" in capsys.readouterr().err


def test_color_error_reports_surface(tmp_path, capsys):
    header = list(HEADER)
    header[4] = "F 300,0,0"
    path = _scene(tmp_path, header + GRID)
    assert main([str(path)]) == 1
    assert "Floor RGB colors !!" in capsys.readouterr().err