from datetime import date

from tixhub.core.date_ranges import DateFilter, DateRange

# 2026-10-14 is a Wednesday
WEDNESDAY = date(2026, 10, 14)


def test_all_has_no_window_and_matches_everything():
    assert DateFilter.ALL.resolve(WEDNESDAY) is None
    assert DateFilter.ALL.matches(date(1999, 1, 1), WEDNESDAY)


def test_today_is_a_single_day():
    assert DateFilter.TODAY.resolve(WEDNESDAY) == DateRange(WEDNESDAY, WEDNESDAY)
    assert not DateFilter.TODAY.matches(date(2026, 10, 15), WEDNESDAY)


def test_this_weekend_runs_from_upcoming_friday_through_sunday():
    window = DateFilter.THIS_WEEKEND.resolve(WEDNESDAY)

    assert window == DateRange(date(2026, 10, 16), date(2026, 10, 18))
    assert not DateFilter.THIS_WEEKEND.matches(WEDNESDAY, WEDNESDAY)


def test_this_weekend_starts_today_on_a_friday():
    friday = date(2026, 10, 16)

    assert DateFilter.THIS_WEEKEND.resolve(friday) == DateRange(friday, date(2026, 10, 18))


def test_this_weekend_on_saturday_points_at_next_friday():
    saturday = date(2026, 10, 17)

    assert DateFilter.THIS_WEEKEND.resolve(saturday) == DateRange(date(2026, 10, 23), date(2026, 10, 25))


def test_this_week_ends_on_saturday_inclusive():
    assert DateFilter.THIS_WEEK.resolve(WEDNESDAY) == DateRange(WEDNESDAY, date(2026, 10, 17))
    assert DateFilter.THIS_WEEK.matches(date(2026, 10, 17), WEDNESDAY)
    assert not DateFilter.THIS_WEEK.matches(date(2026, 10, 18), WEDNESDAY)
    assert not DateFilter.THIS_WEEK.matches(date(2026, 10, 13), WEDNESDAY)


def test_this_week_from_sunday_covers_seven_days():
    sunday = date(2026, 10, 11)

    assert DateFilter.THIS_WEEK.resolve(sunday) == DateRange(sunday, date(2026, 10, 17))


def test_this_month_ends_on_last_calendar_day():
    assert DateFilter.THIS_MONTH.resolve(WEDNESDAY) == DateRange(WEDNESDAY, date(2026, 10, 31))
    assert DateFilter.THIS_MONTH.resolve(date(2028, 2, 10)).end == date(2028, 2, 29)
    assert DateFilter.THIS_MONTH.resolve(date(2026, 12, 31)) == DateRange(date(2026, 12, 31), date(2026, 12, 31))


def test_filters_parse_from_their_string_tokens():
    assert DateFilter("this-weekend") is DateFilter.THIS_WEEKEND
    assert [f.value for f in DateFilter] == ["all", "today", "this-weekend", "this-week", "this-month"]
