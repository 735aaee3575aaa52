import pytest

from cubcaster.mapfile import (
    CubMap,
    MapError,
    build_grid,
    check_contiguous,
    is_map_line,
    map_dimensions,
    read_config,
    read_lines,
)

CONFIG_LINES = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 255,0,0\n",
    "C 0,0,255\n",
    "\n",
]
MAP_ROWS = ["1111111", "1001", "10N0001", "1111111"]


def scene_lines():
    return CONFIG_LINES + [row + "\n" for row in MAP_ROWS]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("111\n", True),
        ("  0 1", True),
        ("\t1", True),
        ("NO ./a.xpm\n", False),
        ("\n", False),
        ("", False),
        ("   \n", False),
        ("N11\n", False),
    ],
)
def test_is_map_line(line, expected):
    assert is_map_line(line) is expected


def test_read_config_texture_paths():
    config = read_config(scene_lines())
    assert config.north == "./textures/north.xpm"
    assert config.south == "./textures/south.xpm"
    assert config.west == "./textures/west.xpm"
    assert config.east == "./textures/east.xpm"


def test_read_config_colors_pack_rgb():
    config = read_config(scene_lines())
    assert config.floor == 0xFF0000
    assert config.ceiling == 255


def test_color_without_commas_matches_with_commas():
    spaced = read_config(["F 1 2 3\n"]).floor
    commas = read_config(["F 1,2,3\n"]).floor
    assert spaced == commas


@pytest.mark.parametrize(
    "line",
    ["F 256,0,0\n", "F -1,0,0\n", "F a,b,c\n", "C 10,20\n", "FOO\n", "   C 1,2,999\n"],
)
def test_bad_color_raises(line):
    with pytest.raises(MapError):
        read_config([line])


def test_config_stops_at_first_map_line():
    lines = ["NO first.xpm\n", "111\n", "NO second.xpm\n", "F 999,0,0\n"]
    assert read_config(lines).north == "first.xpm"


def test_path_ends_at_space():
    assert read_config(["  NO   a.xpm extra\n"]).north == "a.xpm"


def test_unknown_lines_are_ignored():
    config = read_config(["R 1920 1080\n", "EA east.xpm\n"])
    assert config.east == "east.xpm"
    assert config.north is None


def test_check_contiguous_accepts_trailing_blank_lines():
    assert check_contiguous(scene_lines() + ["\n", "   \n"]) is True


def test_check_contiguous_rejects_gap():
    lines = ["111\n", "101\n", "\n", "111\n"]
    assert check_contiguous(lines) is False


def test_check_contiguous_ignores_config_after_map():
    lines = ["111\n", "  \n", "NO x.xpm\n"]
    assert check_contiguous(lines) is True


def test_map_dimensions():
    height, width = map_dimensions(scene_lines())
    assert height == len(MAP_ROWS)
    assert width == len("10N0001")


def test_build_grid_pads_rows():
    lines = scene_lines()
    height, width = map_dimensions(lines)
    grid = build_grid(lines, height, width)
    assert len(grid) == height
    assert all(len(row) == width for row in grid)
    assert [row.rstrip(" ") for row in grid] == MAP_ROWS


def test_build_grid_fills_missing_rows_with_spaces():
    grid = build_grid(["11\n"], 2, 3)
    assert grid[0].rstrip() == "11"
    assert grid[1] == "   "


def test_read_lines_round_trip(tmp_path):
    text = "NO a.xpm\n\n111\n101\n111"
    path = tmp_path / "scene.cub"
    path.write_text(text)
    lines = read_lines(path)
    assert "".join(lines) == text
    assert lines[-1] == "111"
    assert all(line.endswith("\n") for line in lines[:-1])


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_lines(tmp_path / "missing.cub")


def test_is_wall():
    cub_map = CubMap(["111", "101", "111"], 3, 3)
    assert cub_map.is_wall(0.5, 0.5) is True
    assert cub_map.is_wall(1.5, 1.5) is False
    assert cub_map.is_wall(3.2, 1.5) is True
    assert cub_map.is_wall(1.5, 7.0) is True
    assert cub_map.is_wall(-1.5, 1.5) is True