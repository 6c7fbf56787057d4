"""Tests for the grid renderer."""

import pytest

from ghdash.grid import Cell, Direction, Filling, Grid, bold


def _grid(cells, **kwargs):
    grid = Grid(**kwargs)
    for c in cells:
        grid.add(c)
    return grid


class TestCell:
    def test_width_defaults_to_text_width(self):
        assert Cell("alpha").width == 5

    def test_wide_characters_count_double(self):
        assert Cell("日本").width == 4

    def test_explicit_width(self):
        assert Cell("x", width=3).width == 3


class TestBold:
    def test_wraps_in_ansi_bold(self):
        assert bold("Repository") == "\x1b[1mRepository\x1b[0m"


class TestFitIntoColumns:
    def test_single_column_one_cell_per_line(self):
        grid = _grid(["alpha", "beta", "gamma"])
        assert grid.fit_into_columns(1) == "alpha\nbeta\ngamma\n"

    def test_empty_grid(self):
        assert Grid().fit_into_columns(1) == ""

    def test_zero_columns_rejected(self):
        with pytest.raises(ValueError):
            _grid(["a"]).fit_into_columns(0)

    def test_left_to_right_pads_columns(self):
        grid = _grid(["a", "bbb", "cc", "d"])
        assert grid.fit_into_columns(2) == "a  bbb\ncc d\n"

    def test_top_to_bottom(self):
        grid = _grid(["a", "bbb", "cc", "d"], direction=Direction.TOP_TO_BOTTOM)
        # columns: [a, bbb] and [cc, d]
        assert grid.fit_into_columns(2) == "a   cc\nbbb d\n"

    def test_short_last_row(self):
        grid = _grid(["one", "two", "three"])
        assert grid.fit_into_columns(2) == "one   two\nthree\n"

    def test_text_filling(self):
        grid = _grid(["a", "b", "c"], filling=Filling.text(" | "))
        assert grid.fit_into_columns(3) == "a | b | c\n"

    def test_negative_spaces_rejected(self):
        with pytest.raises(ValueError):
            Filling.spaces(-1)

    def test_zero_spaces(self):
        assert Filling.spaces(0).separator == ""

    def test_spaces_filling(self):
        grid = _grid(["a", "b"], filling=Filling.spaces(3))
        assert grid.fit_into_columns(2) == "a   b\n"

    def test_add_accepts_cells_and_chains(self):
        grid = Grid().add(Cell("x")).add("y")
        assert grid.fit_into_columns(2) == "x y\n"

    def test_styled_cell_passes_through(self):
        grid = _grid([bold("Repository"), "alpha"])
        out = grid.fit_into_columns(1)
        assert out == "\x1b[1mRepository\x1b[0m\nalpha\n"
