import datetime

import pytest

from rooivalk.clients import yr


def _entry(time, temp, wind, direction, humidity, rain=None):
    data = {
        "instant": {
            "details": {
                "air_temperature": temp,
                "wind_speed": wind,
                "wind_from_direction": direction,
                "relative_humidity": humidity,
            }
        }
    }
    if rain is not None:
        data["next_1_hours"] = {"details": {"precipitation_amount": rain}}
    return {"time": time, "data": data}


PAYLOAD = {
    "properties": {
        "timeseries": [
            _entry("2024-05-01T06:00:00Z", 10.0, 2.0, 90.0, 80.0, rain=0.5),
            _entry("2024-05-01T12:00:00Z", 20.0, 4.0, 90.0, 60.0, rain=1.0),
            _entry("2024-05-02T06:00:00Z", 30.0, 9.0, 270.0, 10.0, rain=5.0),
        ]
    }
}


@pytest.mark.parametrize(
    "degrees, expected",
    [(0, "N"), (11, "N"), (12, "NNE"), (90, "E"), (180, "S"), (270, "W"), (350, "N")],
)
def test_degrees_to_compass(degrees, expected):
    assert yr.degrees_to_compass(degrees) == expected


def test_parse_forecast_summarises_today_only():
    forecast = yr.parse_forecast("CAPE_TOWN", PAYLOAD, today=datetime.date(2024, 5, 1))

    assert forecast.friendly_name == "Cape Town, South Africa"
    assert forecast.min_temp == 10.0
    assert forecast.max_temp == 20.0
    assert forecast.avg_wind_speed == 3.0
    assert forecast.avg_wind_direction == "E"
    assert forecast.avg_humidity == 70.0
    assert forecast.total_precipitation == 1.5


def test_parse_forecast_without_entries_raises():
    with pytest.raises(ValueError):
        yr.parse_forecast("DUBAI", PAYLOAD, today=datetime.date(2024, 6, 1))


def test_format_forecasts():
    forecast = yr.parse_forecast("CAPE_TOWN", PAYLOAD, today=datetime.date(2024, 5, 1))
    text = yr.format_forecasts([forecast])
    assert text == (
        "- Cape Town, South Africa: min 10°C, max 20°C, wind 3.0 m/s E, "
        "humidity 70%, precipitation 1.5 mm"
    )
