from __future__ import annotations

import pytest
import requests

from conftest import NOW, FakeResponse
from solardash.client import is_valid_timestamp, parse_records
from solardash.models import NetworkError, ParseError


def test_energy_data_is_parsed_into_records(make_client, energy_body):
    client, session = make_client({"getdata": FakeResponse(energy_body)})

    result = client.get_energy_data()

    assert result.ok
    assert [r.time for r in result.records] == [NOW, NOW - 8 * 86400]
    assert result.records[0]["energy"] == 5
    assert session.calls[0][0] == "http://dashboard.test/alpha/getdata"


def test_consumption_request_sends_fixed_window(make_client, config, consumption_body):
    client, session = make_client({"getconsumptiondata": FakeResponse(consumption_body)})

    result = client.get_consumption_data()

    assert result.ok
    assert len(result.records) == 2
    url, params, timeout = session.calls[0]
    assert url == "http://dashboard.test/alpha/getconsumptiondata"
    assert params == {"start": 1692316800, "end": 1692403200}
    assert timeout is None


def test_connection_error_becomes_network_error(make_client):
    client, _ = make_client({"getdata": requests.exceptions.ConnectionError("refused")})

    result = client.get_energy_data()

    assert not result.ok
    assert isinstance(result.error, NetworkError)
    assert result.records == ()


def test_non_200_status_becomes_network_error(make_client):
    client, _ = make_client({"getdata": FakeResponse([], status_code=502)})

    result = client.get_energy_data()

    assert isinstance(result.error, NetworkError)
    assert "502" in str(result.error)


def test_invalid_json_becomes_parse_error(make_client):
    client, _ = make_client({"getdata": FakeResponse(ValueError("Expecting value"))})

    result = client.get_energy_data()

    assert isinstance(result.error, ParseError)


def test_wrong_shape_becomes_parse_error(make_client):
    client, _ = make_client({"getdata": FakeResponse({"time": NOW, "energy": 1})})

    result = client.get_energy_data()

    assert isinstance(result.error, ParseError)


def test_parse_records_requires_numeric_time():
    assert parse_records([]) == ()
    with pytest.raises(ValueError, match="time"):
        parse_records([{"energy": 1}])


def test_close_closes_session(make_client):
    client, session = make_client({})
    client.close()
    assert session.closed


@pytest.mark.parametrize("bad_time", [1e15, float("inf"), float("nan"), True, "1692316800", None])
def test_unusable_time_becomes_parse_error(make_client, bad_time):
    client, _ = make_client({"getdata": FakeResponse([{"time": bad_time, "energy": 1}])})

    result = client.get_energy_data()

    assert isinstance(result.error, ParseError)
    assert result.records == ()


def test_is_valid_timestamp():
    assert is_valid_timestamp(NOW)
    assert is_valid_timestamp(NOW + 0.5)
    assert not is_valid_timestamp(False)
    assert not is_valid_timestamp(10 ** 400)
    assert not is_valid_timestamp(float("-inf"))
