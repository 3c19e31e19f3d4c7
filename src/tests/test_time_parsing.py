from datetime import date

from npm_connector.utils.time import latest_completed_day, to_date_key


def test_to_date_key_strips_every_dash() -> None:
    assert to_date_key("2023-01-05") == "20230105"
    assert to_date_key("20230105") == "20230105"


def test_latest_completed_day() -> None:
    assert latest_completed_day(reference=date(2026, 2, 22)).isoformat() == "2026-02-21"
