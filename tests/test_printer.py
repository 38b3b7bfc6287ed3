# tests/test_printer.py

import io
from datetime import date

import pytest

from calprint import CalendarPrinter, Config, DateRangeError
from calprint.months import month_info
from calprint.printer import GRID_W, dow_header, month_lines, month_weeks


def printer(y, m, columns, count, **kw):
    return CalendarPrinter(Config(start=date(y, m, 1), column_num=columns, month_num=count), **kw)


def test_month_lines_shape():
    lines = month_lines(month_info(2024, 11))
    assert len(lines) == 8
    assert all(len(line) == GRID_W for line in lines)
    assert lines[0].strip() == "November 2024"
    assert lines[1] == dow_header()
    assert lines[2] == " " * 13 + "1  2  3"
    assert lines[6] == "25 26 27 28 29 30   "
    assert lines[7] == " " * GRID_W


def test_month_weeks_sunday_start():
    weeks = month_weeks(month_info(2024, 12))  # starts on a Sunday
    assert len(weeks) == 6
    assert weeks[0] == [None] * 6 + [1]
    assert weeks[-1] == [30, 31] + [None] * 5


def test_four_months_two_columns():
    lines = printer(2024, 11, 2, 4).render_lines()
    assert len(lines) == 8 + 1 + 8
    assert "November 2024" in lines[0] and "December 2024" in lines[0]
    assert lines[8] == ""
    assert "January 2025" in lines[9] and "February 2025" in lines[9]
    assert sum(line.count(dow_header()) for line in lines) == 4
    # sixth week: November is done, December has 30 and 31
    assert lines[7] == " " * (GRID_W + 3) + "30 31"
    assert lines[11] == "       1  2  3  4  5" + "   " + " " * 15 + " 1  2"
    assert lines[16] == ""


def test_last_row_may_be_short():
    lines = printer(2024, 1, 3, 4).render_lines()
    assert len(lines) == 17
    assert "April 2024" in lines[9]
    assert all(len(line) <= GRID_W for line in lines[9:])


def test_more_columns_than_months():
    lines = printer(2024, 1, 12, 2).render_lines()
    assert len(lines) == 8
    assert "January 2024" in lines[0] and "February 2024" in lines[0]


def test_zero_months_prints_nothing():
    out = io.StringIO()
    p = printer(2024, 1, 3, 0, out=out)
    assert p.render_lines() == []
    p.print()
    assert out.getvalue() == ""


def test_gap():
    lines = printer(2024, 11, 2, 2, gap=1).render_lines()
    assert lines[1] == dow_header() + " " + dow_header()
    with pytest.raises(ValueError):
        printer(2024, 11, 2, 2, gap=-1)


def test_print_writes_render():
    out = io.StringIO()
    p = printer(2024, 11, 2, 4, out=out)
    p.print()
    assert out.getvalue() == p.render()
    assert out.getvalue().endswith("\n")


def test_print_defaults_to_stdout(capsys):
    printer(2025, 2, 1, 1).print()
    assert "February 2025" in capsys.readouterr().out


def test_overflow_writes_nothing():
    out = io.StringIO()
    with pytest.raises(DateRangeError):
        printer(9999, 12, 3, 2, out=out).print()
    assert out.getvalue() == ""


def test_deterministic():
    assert printer(2023, 5, 4, 13).render() == printer(2023, 5, 4, 13).render()
