from datetime import date, datetime

from exercise_tracker_api.app.core.dates import (
    INVALID_DATE,
    format_date,
    parse_date,
    to_date_string,
)


def test_iso_date_renders_display_form():
    assert to_date_string("1990-01-01") == "Mon Jan 01 1990"


def test_missing_date_uses_today():
    assert to_date_string(None, today=date(2024, 2, 29)) == "Thu Feb 29 2024"
    assert to_date_string("   ", today=date(2024, 2, 29)) == "Thu Feb 29 2024"


def test_missing_date_defaults_to_current_day():
    assert to_date_string() == format_date(date.today())


def test_display_form_is_stable():
    assert to_date_string("Mon Jan 01 1990") == "Mon Jan 01 1990"
    assert to_date_string(to_date_string("2021-07-04")) == "Sun Jul 04 2021"


def test_datetime_keeps_written_calendar_date():
    assert to_date_string("2020-05-17T23:30:00-08:00") == "Sun May 17 2020"
    assert to_date_string(datetime(2020, 5, 17, 23, 30)) == "Sun May 17 2020"


def test_other_accepted_formats():
    assert to_date_string("January 5, 2021") == "Tue Jan 05 2021"
    assert to_date_string("1990/1/2") == "Tue Jan 02 1990"


def test_unparseable_input_gives_marker():
    assert to_date_string("yesterday") == INVALID_DATE
    assert to_date_string("1990-02-30") == INVALID_DATE
    assert parse_date(INVALID_DATE) is None


def test_parse_date_passthrough():
    assert parse_date(date(1999, 12, 31)) == date(1999, 12, 31)
    assert parse_date("") is None
    assert parse_date(None) is None


def test_iso_time_and_offset_accepted():
    assert to_date_string("1990-01-01T12:30:00Z") == "Mon Jan 01 1990"
    assert to_date_string("1990-01-01 08:15") == "Mon Jan 01 1990"
    assert to_date_string("1990-01-01T08:15:30.250+0530") == "Mon Jan 01 1990"


def test_trailing_text_after_iso_date_is_invalid():
    assert to_date_string("1990-01-01 garbage") == INVALID_DATE
    assert to_date_string("1990-01-01T") == INVALID_DATE
    assert parse_date("1990-01-01 garbage") is None


def test_out_of_range_time_is_invalid():
    assert to_date_string("1990-01-01T99:99") == INVALID_DATE
    assert to_date_string("1990-01-01T23:60:00") == INVALID_DATE
    assert to_date_string("1990-01-01T10:00:00+25:00") == INVALID_DATE
