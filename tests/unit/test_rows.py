"""Unit tests for row rendering."""

import pytest

from metro import rows


class TestRailsAndStations:
    """Test plain rails and station rows."""

    @pytest.mark.parametrize("width,expected", [
        (0, ""),
        (1, "|"),
        (3, "| | |"),
    ])
    def test_rails_row(self, width, expected):
        """Test plain rails are space separated."""
        assert rows.rails_row(width) == expected

    def test_station_marks_column(self):
        """Test the station glyph replaces the rail at its column."""
        assert rows.station_rows(3, 1, "Hello World") == ["| * | Hello World"]

    def test_detached_station(self):
        """Test no rail is marked without a column."""
        assert rows.station_rows(3, None, "Hello World") == ["| | | Hello World"]

    def test_multiline_station(self):
        """Test only the first line carries the marker."""
        assert rows.station_rows(2, 0, "first\nsecond\nthird") == [
            "* | first",
            "| | second",
            "| | third",
        ]

    def test_station_crlf_and_trailing_break(self):
        """Test CRLF splits once and a final line break adds no row."""
        assert rows.station_rows(1, 0, "first\r\nsecond\n") == ["* first", "| second"]

    @pytest.mark.parametrize("separator", ["\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_station_only_splits_on_line_breaks(self, separator):
        """Test other Unicode separators stay inside the label."""
        text = f"a{separator}b"
        assert rows.station_rows(1, 0, text) == [f"* {text}"]

    def test_empty_station_text(self):
        """Test empty text still renders one row."""
        assert rows.station_rows(2, 1, "") == ["| * "]


class TestSplitRow:
    """Test branch rows."""

    def test_split_middle(self):
        """Test rails right of the split are pushed."""
        assert rows.split_row(3, 1) == "| |\\ \\"

    def test_split_rightmost(self):
        """Test splitting the rightmost rail."""
        assert rows.split_row(1, 0) == "|\\"


class TestStopRows:
    """Test termination rows."""

    def test_stop_leftmost(self):
        """Test rails right of the stop are pulled left."""
        assert rows.stop_rows(3, 0) == ['" | |', " / /"]

    def test_stop_middle(self):
        """Test the stopped column collapses to nothing."""
        assert rows.stop_rows(4, 1) == ['| " | |', "|  / /"]

    def test_stop_rightmost_single_row(self):
        """Test nothing is pulled when the rightmost rail stops."""
        assert rows.stop_rows(3, 2) == ['| | "']

    def test_stop_only_rail(self):
        """Test stopping the only rail."""
        assert rows.stop_rows(1, 0) == ['"']


class TestJoinRows:
    """Test merge rows."""

    def test_adjacent_join(self):
        """Test adjacent rails merge in a single row."""
        assert rows.join_rows(3, 0, 1) == ["|/ /"]

    def test_adjacent_join_rightmost(self):
        """Test adjacent merge with nothing to the right."""
        assert rows.join_rows(3, 1, 2) == ["| |/"]

    def test_distant_join(self):
        """Test rails in between show the joining rail sliding under them."""
        assert rows.join_rows(6, 0, 4) == ["| |_|_|/ /", "|/| | | |"]

    def test_distant_join_without_right_rails(self):
        """Test the merge row carries no trailing separator."""
        assert rows.join_rows(3, 0, 2) == ["| |/", "|/|"]

    def test_distant_join_offset(self):
        """Test rails left of the merge stay plain."""
        assert rows.join_rows(5, 1, 3) == ["| | |/ /", "| |/| |"]

    @pytest.mark.parametrize("left,right", [(1, 1), (2, 1), (0, 3), (-1, 1)])
    def test_invalid_columns(self, left, right):
        """Test merge columns must be ordered and in range."""
        with pytest.raises(ValueError):
            rows.join_rows(3, left, right)
