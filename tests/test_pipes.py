import pytest

from algokit.pipes import count_components


def test_empty_grid_has_no_networks():
    assert count_components([]) == 0


def test_only_empty_tiles():
    assert count_components(["AAA", "AAA"]) == 0


def test_unjoined_tiles_each_form_a_network():
    grid = ["ZAZ", "AZA", "ZZA"]
    tiles = sum(row.count("Z") for row in grid)
    assert count_components(grid) == tiles


def test_joined_pair_downwards():
    assert count_components(["B", "C"]) == 1


def test_join_is_directional():
    assert count_components(["C", "B"]) == 2


def test_count_never_exceeds_tile_count():
    grid = ["BEC", "DFB", "CAF"]
    tiles = sum(1 for row in grid for tile in row if tile != "A")
    assert 1 <= count_components(grid) <= tiles


def test_adding_empty_border_changes_nothing():
    grid = ["BEC", "DFB", "CAF"]
    padded = ["A" * 5] + ["A" + row + "A" for row in grid] + ["A" * 5]
    assert count_components(padded) == count_components(grid)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        count_components(["BC", "D"])