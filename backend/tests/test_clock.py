from __future__ import annotations

import logging
from datetime import date, datetime

import pytest
import pytz

from app.config import get_settings
from app.services.clock import app_timezone, days_between, local_today


@pytest.fixture()
def app_tz(monkeypatch):
    """Set APP_TIMEZONE for one test, clearing the cached settings around it."""

    def _set(name: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", name)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


def test_configured_timezone_is_used(app_tz) -> None:
    app_tz("Pacific/Auckland")
    assert app_timezone().zone == "Pacific/Auckland"
    assert local_today() == datetime.now(pytz.timezone("Pacific/Auckland")).date()


def test_unknown_timezone_falls_back_to_utc(app_tz, caplog) -> None:
    app_tz("Mars/Olympus_Mons")

    with caplog.at_level(logging.WARNING, logger="app.services.clock"):
        tz = app_timezone()

    assert tz is pytz.UTC
    assert "Mars/Olympus_Mons" in caplog.text
    assert local_today() == datetime.now(pytz.UTC).date()


def test_days_between_ignores_time_of_day() -> None:
    assert days_between(None, date(2024, 3, 15)) is None
    assert days_between(datetime(2024, 3, 14, 23, 59), datetime(2024, 3, 15, 0, 1)) == 1
    assert days_between(date(2024, 3, 8), date(2024, 3, 15)) == 7
