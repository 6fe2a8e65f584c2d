import pytest

from cubmap.parser import (
    MapData,
    MapError,
    Textures,
    check_characters,
    check_map_name,
    find_player,
    is_closed,
    map_limits,
    parse_coordinates,
    parse_map,
)

HEADER = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]

GRID = [
    "111111\n",
    "100101\n",
    "1000N1\n",
    "111111\n",
]


def test_check_map_name_accepts_cub():
    assert check_map_name("maps/level.cub") == "maps/level.cub"
    assert check_map_name("a.cub") == "a.cub"


@pytest.mark.parametrize("name", [".cub", "map.txt", "a.cu", "level.cub.bak", "cub"])
def test_check_map_name_rejects(name):
    with pytest.raises(MapError):
        check_map_name(name)


def test_parse_coordinates_extracts_textures():
    textures, rest = parse_coordinates(HEADER + GRID)
    assert textures == Textures(
        "./textures/north.xpm",
        "./textures/south.xpm",
        "./textures/west.xpm",
        "./textures/east.xpm",
        "220,100,0",
        "225,30,0",
    )
    assert rest == GRID


def test_parse_coordinates_does_not_modify_input():
    lines = HEADER + GRID
    copy = list(lines)
    parse_coordinates(lines)
    assert lines == copy


def test_parse_coordinates_keeps_leading_blank_lines():
    _, rest = parse_coordinates(["\n"] + HEADER + GRID)
    assert rest == ["\n"] + GRID


def test_parse_coordinates_removes_only_one_following_blank():
    lines = HEADER[:-1] + ["\n", "\n"] + GRID
    _, rest = parse_coordinates(lines)
    assert rest == ["\n"] + GRID


def test_parse_coordinates_trims_spaces_and_tabs():
    lines = list(HEADER)
    lines[5] = "F\t 1,2,3 \t\n"
    lines[0] = "NO./north.xpm\n"
    textures, _ = parse_coordinates(lines)
    assert textures.floor == "1,2,3"
    assert textures.north == "./north.xpm"


def test_parse_coordinates_wrong_order():
    lines = [HEADER[1], HEADER[0]] + HEADER[2:] + GRID
    with pytest.raises(MapError):
        parse_coordinates(lines)


def test_parse_coordinates_missing_definition():
    with pytest.raises(MapError):
        parse_coordinates(HEADER[:6])


def test_parse_coordinates_header_only_leaves_nothing():
    textures, rest = parse_coordinates(HEADER[:7])
    assert rest == []
    assert textures.ceiling == "225,30,0"


def test_check_characters_rejects_invalid():
    with pytest.raises(MapError):
        check_characters(["111\n", "121\n", "111\n"])


def test_check_characters_rejects_tab():
    with pytest.raises(MapError):
        check_characters(["\n", "1\t1\n"])


def test_check_characters_requires_grid():
    with pytest.raises(MapError):
        check_characters(["\n", "\n"])
    with pytest.raises(MapError):
        check_characters([])


def test_find_player():
    x, y, direction = find_player(GRID)
    assert direction == "N"
    assert GRID[y][x] == direction


def test_find_player_absent():
    assert find_player(["111\n", "101\n", "111\n"]) is None


def test_map_limits():
    assert map_limits(GRID) == (len(GRID[0]), len(GRID))
    assert map_limits(["\n"] + GRID) == (1, len(GRID) + 1)


def test_is_closed_for_walled_grid():
    x, y, _ = find_player(GRID)
    assert is_closed(GRID, x, y, len(GRID))


def test_is_closed_detects_gap_at_row_end():
    grid = ["111111\n", "100101\n", "1000N0\n", "111111\n"]
    x, y, _ = find_player(grid)
    assert not is_closed(grid, x, y, len(grid))


def test_is_closed_detects_space():
    grid = ["111111\n", "10 101\n", "1000N1\n", "111111\n"]
    x, y, _ = find_player(grid)
    assert not is_closed(grid, x, y, len(grid))


def test_is_closed_outside_start():
    assert not is_closed(GRID, 0, len(GRID), len(GRID))
    assert not is_closed(GRID, -1, 0, len(GRID))


def test_parse_map_valid():
    data = parse_map(HEADER + GRID)
    assert isinstance(data, MapData)
    assert data.lines == GRID
    assert data.direction == "N"
    assert data.lines[data.y][data.x] == "N"
    assert (data.x_limit, data.y_limit) == map_limits(GRID)
    assert data.textures.south == "./textures/south.xpm"


def test_parse_map_open():
    grid = ["111111\n", "100001\n", "1000N1\n", "1111 1\n", "1111\n"]
    with pytest.raises(MapError):
        parse_map(HEADER + ["11111\n", "10N0\n", "11111\n"])
    with pytest.raises(MapError):
        parse_map(HEADER + grid[:1] + ["1000N\n"] + grid[3:])


def test_parse_map_without_player():
    with pytest.raises(MapError):
        parse_map(HEADER + ["111\n", "101\n", "111\n"])


def test_parse_map_without_grid():
    with pytest.raises(MapError):
        parse_map(HEADER[:7])