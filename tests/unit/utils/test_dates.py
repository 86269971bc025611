from datetime import datetime

from opoopress.utils.dates import add_date_params, format_date


def test_format_date_uses_minutes_precision():
    assert format_date(datetime(2025, 12, 31, 23, 59, 59)) == "2025-12-31 23:59"


def test_add_date_params_padding():
    context = {}

    add_date_params(context, datetime(2024, 1, 2, 3, 4, 5))

    assert context == {
        "year": "2024",
        "short_year": "24",
        "month": "01",
        "i_month": 1,
        "day": "02",
        "i_day": 2,
        "hour": "03",
        "minute": "04",
        "second": "05",
    }
