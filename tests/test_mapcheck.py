import pytest

from raycub.lines import map_start_index
from raycub.mapcheck import (
    check_blank_lines,
    check_players,
    check_spaces,
    is_double_id,
    map_closed,
    valid_area,
)
from raycub.model import CubError

GOOD_TEXT = "NO ./north.xpm\n111\n1N1\n111\n"


def test_map_closed_simple_box():
    assert map_closed(["NO a", "111", "1N1", "111"], 1)


def test_map_closed_open_side():
    assert not map_closed(["NO a", "111", "1N0", "111"], 1)


def test_map_closed_ignores_surrounding_spaces():
    assert map_closed(["  111", "  1N1 ", "  111"], 0)


def test_map_closed_bad_last_row():
    assert not map_closed(["111", "1N1", "101"], 0)


def test_map_closed_last_char_of_last_row_not_checked():
    assert map_closed(["111", "1N1", "110"], 0)


def test_map_closed_blank_row_fails():
    assert not map_closed(["111", "   ", "111"], 0)


def test_map_closed_nothing_after_start():
    assert not map_closed(["NO a"], 1)


def test_check_players_single():
    assert check_players(GOOD_TEXT) == 1


def test_check_players_ignores_header_letters():
    assert check_players("NO ./SEWN.xpm\n111\n1N1\n111\n") == 1


def test_check_players_double():
    with pytest.raises(CubError, match="Double player found!"):
        check_players("NO x\n1111\n1NS1\n1111\n")


def test_check_players_none():
    with pytest.raises(CubError, match="No player found"):
        check_players("NO x\n111\n101\n111\n")


def test_check_blank_lines_returns_map_start():
    assert check_blank_lines(GOOD_TEXT) == map_start_index(GOOD_TEXT)


def test_check_blank_lines_allows_blank_lines_before_map():
    text = "NO x\n\n\n111\n1N1\n111\n"
    assert check_blank_lines(text) == map_start_index(text)


def test_check_blank_lines_inside_map():
    with pytest.raises(CubError, match="Multiples lines in map"):
        check_blank_lines("NO x\n111\n\n1N1\n111\n")


def test_check_blank_lines_spaces_only_line():
    with pytest.raises(CubError, match="Multiples lines in map"):
        check_blank_lines("NO x\n111\n   \n1N1\n111\n")


def test_check_blank_lines_trailing_blank_line():
    with pytest.raises(CubError, match="Multiples lines in map"):
        check_blank_lines("NO x\n111\n1N1\n111\n\n")


def test_check_blank_lines_missing_map():
    with pytest.raises(CubError, match="The map is missing or invalid"):
        check_blank_lines("NO x\nC 1,2,3\n")


def test_is_double_id_found():
    lines = ["NO a", "SO b", "NO c"]
    assert is_double_id(lines, 3, "NO", 0)


def test_is_double_id_unique():
    lines = ["NO a", "SO b", "NO c"]
    assert not is_double_id(lines, 3, "SO", 1)


def test_is_double_id_only_looks_at_count_lines():
    lines = ["NO a", "SO b", "NO c"]
    assert not is_double_id(lines, 2, "NO", 0)


def test_valid_area_enclosed_player():
    assert valid_area(["x", "111", "1N1", "111"], 1, 2, "01NSEW")


def test_valid_area_touching_space():
    assert not valid_area(["x", "1111", "10 1", "1111"], 1, 2, "01NSEW")


def test_check_spaces_closed_box():
    assert check_spaces(["NO a", "111", "1N1", "111"], 1)


def test_check_spaces_hole_in_map():
    assert not check_spaces(["NO a", "1111", "10 1", "1111"], 1)


def test_check_spaces_open_below():
    assert not check_spaces(["NO a", "111", "101", "1 1"], 1)


def test_check_spaces_ragged_row_below():
    assert not check_spaces(["NO a", "1111", "1001", "11"], 1)