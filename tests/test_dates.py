from pathlib import Path

from rotatelog.archive.dates import ParsedDate, Unparseable, extract_date, is_parsed


def test_extracts_month_day_year_in_capture_order():
    d = extract_date("6-27-2005.log")
    assert d == ParsedDate(6, 27, 2005)
    assert (d.month, d.day, d.year) == (6, 27, 2005)
    assert d.sort_key == (2005, 6, 27)


def test_triple_anywhere_in_name():
    assert extract_date("app-12-1-2024.tar.gz") == ParsedDate(12, 1, 2024)


def test_first_triple_wins():
    assert extract_date("1-2-3-4-5-6.log") == ParsedDate(1, 2, 3)


def test_no_calendar_validation():
    assert extract_date("99-88-7.log") == ParsedDate(99, 88, 7)


def test_missing_triple_is_unparseable():
    r = extract_date("current.log")
    assert isinstance(r, Unparseable)
    assert r.name == "current.log"
    assert not is_parsed(r)


def test_partial_date_is_unparseable():
    assert isinstance(extract_date("6-2005.log"), Unparseable)


def test_only_basename_is_searched():
    r = extract_date(Path("/srv/1-2-2020/current.log"))
    assert isinstance(r, Unparseable)


def test_large_numbers_kept_as_ints():
    assert extract_date("001-002-20240.log") == ParsedDate(1, 2, 20240)
