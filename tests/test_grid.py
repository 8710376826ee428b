"""Tests for bucketing evaluated hours into a local-date x hour grid."""

import pandas as pd
import pytest

from rxburnlogic import canon, classify, exceptions, grid, normalize

GOOD = {"temperature": 50, "humidity": 30, "wind_speed": 6, "wind_direction": 200}


def _evaluated(make_frame, prescription, rows, start, tz):
    # classify before unit conversion so the statuses follow the raw values
    df = classify.classify(make_frame(rows, start=start), prescription)
    return normalize.normalize(df, tz)


def test_single_day_utc(make_frame, prescription):
    rows = [GOOD, {"temperature": 50}, dict(GOOD, temperature=90)]
    df = _evaluated(make_frame, prescription, rows, "2024-06-01T00:00Z", "UTC")
    days = grid.build_calendar(df, "UTC")
    assert len(days) == 1
    day = days[0]
    assert str(day.date) == "2024-06-01"
    assert len(day.slots) == 24
    assert [s.status for s in day.slots[:4]] == [
        "preferred",
        "insufficient_data",
        "unsuitable",
        canon.NO_DATA,
    ]
    assert day.slot(3).record is None
    assert day.slot(1).record is not None
    assert day.slot(1).record["humidity"] is None
    assert day.slot(0).record["wind_octants"] == ["S"]


def test_no_data_is_distinct_from_insufficient(make_frame, prescription):
    df = _evaluated(make_frame, prescription, [{"temperature": 50}], "2024-06-01T05:00Z", "UTC")
    day = grid.build_calendar(df, "UTC")[0]
    assert day.slot(5).status == "insufficient_data"
    assert day.slot(5).record is not None
    assert all(day.slot(h).status == "no_data" for h in range(24) if h != 5)


def test_dates_follow_local_timezone(make_frame, prescription):
    # 04Z..09Z on Jan 1 is 22:00 Dec 31 .. 03:00 Jan 1 in Chicago (UTC-6)
    df = _evaluated(make_frame, prescription, [GOOD] * 6, "2024-01-01T04:00Z", "America/Chicago")
    days = grid.build_calendar(df, "America/Chicago")
    assert [str(d.date) for d in days] == ["2023-12-31", "2024-01-01"]
    assert [s.hour for s in days[0].slots if s.record] == [22, 23]
    assert [s.hour for s in days[1].slots if s.record] == [0, 1, 2, 3]


def test_fall_back_hour_collision_last_wins(make_frame, prescription):
    # 06Z and 07Z on 2024-11-03 are both 01:00 local in Chicago
    rows = [GOOD, dict(GOOD, temperature=90)]
    df = _evaluated(make_frame, prescription, rows, "2024-11-03T06:00Z", "America/Chicago")
    day = grid.build_calendar(df, "America/Chicago")[0]
    slot = day.slot(1)
    assert slot.status == "unsuitable"
    assert slot.record[canon.INDEX_NAME] == pd.Timestamp("2024-11-03T07:00Z")


def test_tz_defaults_to_frame_attrs(make_frame, prescription):
    df = _evaluated(make_frame, prescription, [GOOD], "2024-01-01T04:00Z", "America/Chicago")
    days = grid.build_calendar(df)
    assert days[0].slot(22).status == "preferred"


def test_status_table(make_frame, prescription):
    df = _evaluated(make_frame, prescription, [GOOD] * 30, "2024-06-01T00:00Z", "UTC")
    table = grid.status_table(grid.build_calendar(df, "UTC"))
    assert table.shape == (2, 24)
    assert table.loc[table.index[1], 5] == "preferred"
    assert table.loc[table.index[1], 6] == "no_data"


def test_requires_status(make_frame):
    df = normalize.normalize(make_frame([GOOD]), "UTC")
    with pytest.raises(exceptions.FrameError):
        grid.build_calendar(df, "UTC")


def test_empty_input_gives_no_days(make_frame, prescription):
    df = classify.classify(normalize.normalize(make_frame([]), "UTC"), prescription)
    assert grid.build_calendar(df, "UTC") == []
