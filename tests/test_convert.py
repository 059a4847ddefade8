# -*- coding: utf-8 -*-
"""
Conversion Tests - Record parsing, formatting and the streaming pipeline.

Dependencies
------------
pytest

Author
------
geoidconv contributors

License
-------
MIT License
Copyright (c) 2026 geoidconv contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import io

import numpy as np
import pytest
from affine import Affine

from geoidconv.convert import (
    CoordinateRecord,
    convert,
    correction_at,
    format_record,
    parse_record,
)
from geoidconv.exceptions import (
    GeoidConvError,
    InvalidRecordError,
    NoGeoidDataError,
)
from geoidconv.grid.model import Grid
from geoidconv.vocabulary import Direction


def run(grid, text, direction=Direction.GEOID_TO_ELLIPSOID, **kwargs):
    sink = io.StringIO()
    count = convert(grid, io.StringIO(text), sink, direction=direction,
                    **kwargs)
    return count, sink.getvalue()


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class TestParseRecord:
    """Test line parsing and validation."""

    def test_valid(self):
        """Test a plain record."""
        record = parse_record("59.9 10.7 100.0\n", 1)
        assert record == CoordinateRecord(59.9, 10.7, 100.0, "59.9", "10.7")

    def test_keeps_original_text(self):
        """Test that lat/lon tokens are kept exactly as written."""
        record = parse_record("  59.90000\t+010.70 1e2\r\n", 1)
        assert record.latitude_text == "59.90000"
        assert record.longitude_text == "+010.70"
        assert record.elevation == 100.0

    @pytest.mark.parametrize('text, value', [
        (".5", 0.5),
        ("-1.", -1.0),
        ("+2e-3", 0.002),
        ("7E+1", 70.0),
    ])
    def test_decimal_forms(self, text, value):
        """Test the accepted spellings of a decimal."""
        assert parse_record(f"1 2 {text}", 1).elevation == value

    def test_extra_tokens_ignored(self):
        """Test that tokens after the third are ignored."""
        record = parse_record("1 2 3 extra stuff", 1)
        assert record.elevation == 3.0

    @pytest.mark.parametrize('line', [
        "",
        "\n",
        "59.9 10.7",
        "59.9 10.7 abc",
        "north 10.7 100",
        "59.9 10.7 nan",
        "59.9 inf 100",
        "59,9 10,7 100,0",
        "59.9 10.7 1_00",
        "\u0665\u0669 10.7 100",
        "59.9 10.7 1e999",
        "0x3b 10.7 100",
        "59.9 \udcff 100",
    ])
    def test_invalid(self, line):
        """Test lines that are not three finite decimals."""
        with pytest.raises(InvalidRecordError) as excinfo:
            parse_record(line, 7)
        assert excinfo.value.line_number == 7
        assert str(excinfo.value) == "Invalid input format on line 7."
        assert isinstance(excinfo.value, ValueError)


class TestFormatRecord:
    """Test output line rendering."""

    def test_format(self):
        """Test lat/lon echo and default elevation formatting."""
        record = parse_record("59.90 010.7 100", 1)
        assert format_record(record, 100.0 + 41.3) == "59.90 010.7 141.3\n"

    def test_precision(self):
        """Test the significant digit setting."""
        record = parse_record("1 2 3", 1)
        assert format_record(record, 123.456789, precision=4) == "1 2 123.5\n"


class TestDirection:
    """Test the sign convention of each direction."""

    def test_geoid_to_ellipsoid_adds(self):
        assert Direction.GEOID_TO_ELLIPSOID.apply(100.0, 40.0) == 140.0

    def test_ellipsoid_to_geoid_subtracts(self):
        assert Direction.ELLIPSOID_TO_GEOID.apply(140.0, 40.0) == 100.0


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class TestConvert:
    """Test the streaming conversion."""

    def test_concrete_scenario(self, constant_grid):
        """Test 59.9 10.7 100.0 with a 41.3 m correction."""
        count, output = run(constant_grid, "59.9 10.7 100.0\n")
        assert count == 1
        assert output == "59.9 10.7 141.3\n"

    def test_correction_at(self, constant_grid):
        """Test the correction lookup by lon/lat."""
        assert correction_at(constant_grid, 10.7, 59.9) == pytest.approx(41.3)

    def test_subtract(self, constant_grid):
        """Test ellipsoid to geoid conversion."""
        _, output = run(constant_grid, "59.9 10.7 141.3\n",
                        Direction.ELLIPSOID_TO_GEOID)
        assert output == "59.9 10.7 100\n"

    def test_round_trip(self, constant_grid):
        """Test that add then subtract restores the elevations."""
        text = "59.9 10.7 100.0\n58.1 8.2 -3.25\n61.99 11.99 2469.12\n"
        _, there = run(constant_grid, text)
        _, back = run(constant_grid, there, Direction.ELLIPSOID_TO_GEOID)

        original = [line.split() for line in text.splitlines()]
        restored = [line.split() for line in back.splitlines()]
        assert len(restored) == len(original)
        for orig, rest in zip(original, restored):
            assert rest[:2] == orig[:2]
            assert float(rest[2]) == pytest.approx(float(orig[2]), abs=1e-6)

    def test_one_output_line_per_input_line(self, constant_grid):
        """Test ordering and count on a larger input."""
        lats = np.linspace(58.1, 61.9, 50)
        text = "".join(f"{lat:.4f} 10.0 {i}\n" for i, lat in enumerate(lats))
        count, output = run(constant_grid, text)
        lines = output.splitlines()
        assert count == 50
        assert len(lines) == 50
        for i, (line, lat) in enumerate(zip(lines, lats)):
            lat_text, lon_text, elev = line.split()
            assert lat_text == f"{lat:.4f}"
            assert lon_text == "10.0"
            assert float(elev) == pytest.approx(i + 41.3)

    def test_empty_input(self, constant_grid):
        """Test that empty input produces no output."""
        assert run(constant_grid, "") == (0, "")

    def test_last_line_without_newline(self, constant_grid):
        """Test a final record without a trailing newline."""
        _, output = run(constant_grid, "59.9 10.7 100.0\n60 11 0")
        assert output == "59.9 10.7 141.3\n60 11 41.3\n"

    @pytest.mark.parametrize('n_valid', [0, 1, 2, 5])
    def test_fail_fast_on_malformed_line(self, constant_grid, n_valid):
        """Test that N valid lines are written before the error."""
        text = ("59.9 10.7 100.0\n" * n_valid
                + "59.9 10.7 oops\n"
                + "59.9 10.7 100.0\n")
        sink = io.StringIO()
        with pytest.raises(InvalidRecordError) as excinfo:
            convert(constant_grid, io.StringIO(text), sink)
        assert excinfo.value.line_number == n_valid + 1
        assert sink.getvalue() == "59.9 10.7 141.3\n" * n_valid

    def test_coverage_miss(self, constant_grid):
        """Test that a point outside the grid aborts with its line number."""
        text = "59.9 10.7 100.0\n60.0 11.0 5.0\n10.0 10.0 5.0\n59.9 10.7 1\n"
        sink = io.StringIO()
        with pytest.raises(NoGeoidDataError) as excinfo:
            convert(constant_grid, io.StringIO(text), sink)
        assert excinfo.value.line_number == 3
        assert str(excinfo.value) == "No geoid data for point on line 3."
        assert len(sink.getvalue().splitlines()) == 2

    def test_nodata_cell(self):
        """Test that a NaN sample is treated as a coverage miss."""
        data = np.full((2, 2), 30.0)
        data[1, 1] = np.nan
        # Two degree cells over 8..12E, 58..62N
        grid = Grid(data, Affine(2.0, 0.0, 8.0, 0.0, -2.0, 62.0))
        with pytest.raises(NoGeoidDataError, match="line 2"):
            run(grid, "61.5 8.5 0\n60.5 9.5 0\n")

    def test_errors_share_base(self, constant_grid):
        """Test that pipeline errors derive from GeoidConvError."""
        with pytest.raises(GeoidConvError):
            run(constant_grid, "bad\n")

    def test_reads_lazily(self, constant_grid):
        """Test that lines after the failing one are never consumed."""
        consumed = []

        def lines():
            for line in ["59.9 10.7 1\n", "bad\n", "59.9 10.7 2\n"]:
                consumed.append(line)
                yield line

        with pytest.raises(InvalidRecordError):
            convert(constant_grid, lines(), io.StringIO())
        assert consumed == ["59.9 10.7 1\n", "bad\n"]
