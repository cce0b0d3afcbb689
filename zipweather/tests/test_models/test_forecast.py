"""Tests for raw forecast ingestion: zipping parallel series and validation."""

import copy
import json

import pytest

from zipweather.models.errors import MalformedForecast, MalformedSeries, TransformError
from zipweather.models.forecast import DailySample, HourlySample, RawForecast


class TestFromPayload:
    def test_springfield(self, springfield_payload: dict):
        raw = RawForecast.from_payload(springfield_payload)
        assert raw.utc_offset_seconds == -21600
        assert raw.current.epoch_time == 1705353300
        assert raw.current.condition_code == 3
        assert len(raw.hourly) == 144
        assert len(raw.daily) == 6

    def test_rows_keep_index_alignment(self, springfield_payload: dict):
        raw = RawForecast.from_payload(springfield_payload)
        assert raw.hourly[39] == HourlySample(
            epoch_time=1705352400, temperature=-1.7, condition_code=3, is_day=1
        )
        assert raw.daily[3] == DailySample(
            epoch_time=1705557600, temp_max=-3.7, temp_min=-12.8, condition_code=0
        )

    def test_integer_temperatures_become_floats(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["temperature_2m"][0] = 12
        raw = RawForecast.from_payload(payload)
        assert raw.hourly[0].temperature == 12.0
        assert isinstance(raw.hourly[0].temperature, float)


class TestMalformedPayloads:
    def test_hourly_length_mismatch(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["is_day"].pop()

        with pytest.raises(MalformedSeries) as exc_info:
            RawForecast.from_payload(payload)
        assert exc_info.value.group == "hourly"
        assert exc_info.value.lengths["time"] == 144
        assert exc_info.value.lengths["is_day"] == 143

    def test_daily_length_mismatch(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["daily"]["weather_code"].append(3)

        with pytest.raises(MalformedSeries) as exc_info:
            RawForecast.from_payload(payload)
        assert exc_info.value.group == "daily"

    @pytest.mark.parametrize(
        "section,key",
        [
            ("", "utc_offset_seconds"),
            ("", "current"),
            ("current", "time"),
            ("hourly", "is_day"),
            ("daily", "temperature_2m_min"),
        ],
    )
    def test_missing_field(self, springfield_payload: dict, section: str, key: str):
        payload = copy.deepcopy(springfield_payload)
        target = payload[section] if section else payload
        del target[key]

        with pytest.raises(MalformedForecast, match=key):
            RawForecast.from_payload(payload)

    def test_null_temperature(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["temperature_2m"][10] = None

        with pytest.raises(MalformedForecast, match="hourly.temperature_2m"):
            RawForecast.from_payload(payload)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_temperature(self, springfield_payload: dict, value: float):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["temperature_2m"][10] = value

        with pytest.raises(MalformedForecast, match="finite"):
            RawForecast.from_payload(payload)

    def test_nan_literal_from_json_body(self, springfield_payload: dict):
        body = json.dumps(springfield_payload).replace(
            '"temperature_2m_max": [', '"temperature_2m_max": [NaN, ', 1
        )
        payload = json.loads(body)
        payload["daily"]["temperature_2m_max"].pop()

        with pytest.raises(MalformedForecast, match="daily.temperature_2m_max"):
            RawForecast.from_payload(payload)

    def test_fractional_weather_code(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["weather_code"][0] = 1.7

        with pytest.raises(MalformedForecast, match="integer"):
            RawForecast.from_payload(payload)

    def test_whole_float_weather_code_accepted(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["hourly"]["weather_code"][0] = 2.0
        raw = RawForecast.from_payload(payload)
        assert raw.hourly[0].condition_code == 2
        assert isinstance(raw.hourly[0].condition_code, int)

    def test_huge_epoch(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["current"]["time"] = 10**400

        with pytest.raises(MalformedForecast, match="current.time"):
            RawForecast.from_payload(payload)

    def test_series_must_be_arrays(self, springfield_payload: dict):
        payload = copy.deepcopy(springfield_payload)
        payload["daily"]["time"] = "1705298400"

        with pytest.raises(MalformedForecast):
            RawForecast.from_payload(payload)

    def test_not_an_object(self):
        with pytest.raises(MalformedForecast):
            RawForecast.from_payload([])

    def test_malformed_is_a_transform_error(self):
        assert issubclass(MalformedSeries, TransformError)
