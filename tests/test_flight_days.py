from datetime import date

import pandas as pd
import pytest

from flight_core.analysis.flight_days import (
    analyze_daily_frame,
    analyze_buckets,
    analyze_flight_days,
    count_flight_days,
    group_by_year,
    is_flight_day,
    yearly_statistic,
)
from flight_core.analysis.models import DailyRecord, Location, Thresholds
from flight_core.errors import InvalidInput, NoData


def _day(rain, wind, gust, d=date(2024, 1, 1)):
    return DailyRecord(date=d, precipitation=rain, wind_speed=wind, wind_gusts=gust)


TH = Thresholds(max_rain=2, max_wind=10, max_wind_gusts=15)


def _series(years_days: dict):
    """Build parallel arrays: {year: n_days} with calm days (all flyable)."""
    times, rain, wind, gust = [], [], [], []
    for y, n in years_days.items():
        for t in pd.date_range(f"{y}-01-01", periods=n, freq="D"):
            times.append(t.strftime("%Y-%m-%d"))
            rain.append(0.0)
            wind.append(3.6)
            gust.append(7.2)
    return times, rain, wind, gust


def test_scenario_only_dry_day_qualifies():
    bucket = [_day(0, 1, 2), _day(5, 1, 2)]
    assert count_flight_days(bucket, TH) == 1


def test_thresholds_are_inclusive():
    assert is_flight_day(_day(2, 10, 15), TH)
    assert not is_flight_day(_day(2.01, 10, 15), TH)
    assert not is_flight_day(_day(2, 10.01, 15), TH)
    assert not is_flight_day(_day(2, 10, 15.01), TH)


def test_flight_days_bounded_and_monotone_in_each_threshold():
    bucket = [_day(r, w, g) for r, w, g in [(0, 1, 2), (1, 5, 9), (3, 8, 12), (0.5, 12, 14), (0, 2, 20)]]
    base = count_flight_days(bucket, TH)
    assert 0 <= base <= len(bucket)

    relaxed = [
        Thresholds(5, 10, 15),
        Thresholds(2, 20, 15),
        Thresholds(2, 10, 30),
    ]
    for th in relaxed:
        assert count_flight_days(bucket, th) >= base
    assert count_flight_days(bucket, Thresholds(100, 100, 100)) == len(bucket)
    assert count_flight_days(bucket, Thresholds(0, 0, 0)) == 0


def test_group_by_year_orders_years_and_converts_units():
    times = ["2021-12-31", "2022-01-01", "2022-01-02"]
    buckets = group_by_year(times, [1.0, None, 2.0], [36.0, None, 18.0], [72.0, 36.0, None])

    assert list(buckets) == [2021, 2022]
    assert len(buckets[2021]) == 1
    assert len(buckets[2022]) == 2
    assert all(d.date.year == 2022 for d in buckets[2022])

    d0 = buckets[2021][0]
    assert d0.wind_speed == 10.0
    assert d0.wind_gusts == 20.0

    # missing values become zero, the day is kept
    d1 = buckets[2022][0]
    assert (d1.precipitation, d1.wind_speed) == (0.0, 0.0)
    assert buckets[2022][1].wind_gusts == 0.0


def test_group_by_year_sorts_years_numerically_even_if_input_unsorted():
    buckets = group_by_year(["2023-05-01", "2021-05-01"], [0, 0], [0, 0], [0, 0])
    assert list(buckets) == [2021, 2023]


def test_group_by_year_does_not_shift_timezones():
    buckets = group_by_year(["2021-12-31T23:30"], [0], [0], [0])
    assert list(buckets) == [2021]


def test_group_by_year_mismatched_lengths():
    with pytest.raises(InvalidInput):
        group_by_year(["2024-01-01", "2024-01-02"], [0], [0, 0], [0, 0])


def test_group_by_year_bad_date():
    with pytest.raises(InvalidInput):
        group_by_year(["not-a-date"], [0], [0], [0])


def test_group_by_year_empty_gives_no_buckets():
    assert group_by_year([], [], [], []) == {}


def test_yearly_statistic_rounding_and_mean_from_unrounded_sum():
    bucket = [_day(0.04, 1.0, 2.0), _day(0.04, 2.0, 4.0), _day(0.04, 3.0, 6.5)]
    s = yearly_statistic(2024, bucket, TH)

    assert s.year == 2024
    assert s.flight_days == 3
    assert s.total_days == 3
    assert s.total_rain == 0.1        # 0.12 -> 0.1
    assert s.mean_daily_rain == 0.04  # 0.12 / 3, not 0.1 / 3
    assert s.mean_wind_speed == 2.0
    assert s.mean_wind_gusts == 4.2   # 12.5 / 3 = 4.1666...


def test_yearly_statistic_empty_bucket_raises():
    with pytest.raises(NoData):
        yearly_statistic(2024, [], TH)


def test_missing_reading_still_counted_in_total_days():
    res = analyze_flight_days(["2024-03-01"], [3.0], [None], [None], TH)
    s = res.yearly_statistics[0]
    assert s.total_days == 1
    assert s.mean_wind_speed == 0.0
    assert s.flight_days == 0  # 3 mm > 2 mm


def test_analyze_totals_and_lengths_are_consistent():
    times, rain, wind, gust = _series({2021: 365, 2022: 365, 2023: 100})
    res = analyze_flight_days(times, rain, wind, gust, {"maxRain": 2, "maxWind": 10, "maxWindGusts": 15})

    assert res.years_analyzed == len(res.yearly_data) == len(res.yearly_statistics) == 3
    assert [s.year for s in res.yearly_statistics] == [2021, 2022, 2023]
    assert res.yearly_data == (365, 365, 100)
    assert res.total_days_analyzed == sum(s.total_days for s in res.yearly_statistics) == 830
    assert res.average_flight_days == 277
    assert res.standard_deviation >= 0


def test_analyze_identical_years_zero_std():
    times, rain, wind, gust = _series({2021: 10, 2022: 10})
    res = analyze_flight_days(times, rain, wind, gust, TH)
    assert res.standard_deviation == 0.0
    assert res.average_flight_days == 10


def test_analyze_empty_input_raises_no_data():
    with pytest.raises(NoData):
        analyze_flight_days([], [], [], [], TH)


def test_analyze_rejects_bad_thresholds():
    with pytest.raises(InvalidInput):
        analyze_flight_days(["2024-01-01"], [0], [0], [0], {"maxRain": 2, "maxWind": 10})
    with pytest.raises(InvalidInput):
        analyze_flight_days(["2024-01-01"], [0], [0], [0], "strict")


def test_analyze_daily_frame_matches_array_entry_point():
    times, rain, wind, gust = _series({2022: 5, 2023: 3})
    df = pd.DataFrame({
        "time": pd.to_datetime(times),
        "precipitation_sum": rain,
        "wind_speed_10m_mean": wind,
        "wind_gusts_10m_max": gust,
    })
    df.loc[0, "wind_speed_10m_mean"] = float("nan")

    loc = Location(60.39, 5.32, "Bergen")
    res = analyze_daily_frame(df, TH, location=loc)
    ref = analyze_flight_days(times, rain, wind, gust, TH, location=loc)

    assert res.yearly_data == ref.yearly_data
    assert res.total_days_analyzed == 8
    assert res.location == loc


def test_analyze_daily_frame_missing_columns():
    df = pd.DataFrame({"time": ["2024-01-01"], "precipitation_sum": [0.0]})
    with pytest.raises(InvalidInput):
        analyze_daily_frame(df, TH)


def test_analyze_buckets_zero_buckets_raises_no_data():
    with pytest.raises(NoData):
        analyze_buckets({}, TH)
