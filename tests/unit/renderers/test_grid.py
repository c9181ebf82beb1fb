#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the plain-text table grid."""
import pytest

from md2nexus.renderers._grid import render_grid


@pytest.mark.unit
class TestRenderGrid:
    """Test boxed ASCII grid drawing."""

    def test_no_rows(self):
        assert render_grid([]) == ""

    def test_rows_without_cells(self):
        assert render_grid([[], []]) == ""

    def test_single_cell(self):
        assert render_grid([["a"]]) == "+---+\n| a |\n+---+\n"

    def test_columns_take_widest_cell(self):
        expected = (
            "+------+---+\n"
            "| name | x |\n"
            "+------+---+\n"
            "| ab   | y |\n"
            "+------+---+\n"
        )
        assert render_grid([["name", "x"], ["ab", "y"]]) == expected

    def test_ragged_rows(self):
        expected = (
            "+---+---+\n"
            "| a |   |\n"
            "+---+---+\n"
            "| b | c |\n"
            "+---+---+\n"
        )
        assert render_grid([["a"], ["b", "c"]]) == expected

    def test_multiline_cell_grows_row(self):
        expected = (
            "+-----+---+\n"
            "| one | x |\n"
            "| two |   |\n"
            "+-----+---+\n"
        )
        assert render_grid([["one\ntwo", "x"]]) == expected

    def test_empty_cell(self):
        assert render_grid([["", "a"]]) == "+--+---+\n|  | a |\n+--+---+\n"

    def test_wide_characters_are_measured_in_cells(self):
        expected = (
            "+------+\n"
            "| 日本 |\n"
            "+------+\n"
            "| ab   |\n"
            "+------+\n"
        )
        assert render_grid([["日本"], ["ab"]]) == expected

    def test_ends_with_newline(self):
        assert render_grid([["a", "b"], ["c", "d"]]).endswith("+\n")
