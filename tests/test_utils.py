"""Unit tests for timezone and hour helpers in utils."""

import numpy as np
import pandas as pd

from rxburnlogic import utils


def test_resolve_tz():
    assert utils.resolve_tz("America/Denver") == "America/Denver"
    assert utils.resolve_tz(None) == "UTC"
    assert utils.resolve_tz("") == "UTC"
    assert utils.resolve_tz("Nowhere/Special", default="America/Boise") == "America/Boise"


def test_to_utc_hour_truncates_and_converts():
    assert utils.to_utc_hour("2024-06-01T06:45:00-06:00") == pd.Timestamp("2024-06-01T12:00Z")
    # naive input is taken as UTC
    assert utils.to_utc_hour("2024-06-01 03:10") == pd.Timestamp("2024-06-01T03:00Z")


def test_floor_nullable():
    out = utils.floor_nullable(pd.Series([68.9, np.nan, -0.5]))
    assert str(out.dtype) == "Int64"
    assert out.iloc[0] == 68
    assert out.isna().iloc[1]
    assert out.iloc[2] == -1


def test_hour_in_range_inclusive_and_wrapping():
    hours = pd.Series(range(24))
    assert hours[utils.hour_in_range(hours, 8, 20)].tolist() == list(range(8, 21))
    assert hours[utils.hour_in_range(hours, 22, 1)].tolist() == [0, 1, 22, 23]
