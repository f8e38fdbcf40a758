"""Client for the dashboard data API."""

import math
from datetime import datetime

import requests

from .models import FetchResult, NetworkError, ParseError, TimedRecord


class DashboardClient:
    """Client for the energy and consumption endpoints.

    This class handles all direct interactions with the remote API:
    - Fetching energy readings
    - Fetching load/solar/grid consumption readings
    - Turning the JSON response into TimedRecord tuples

    Failures never raise. Every call returns a FetchResult whose error is
    a NetworkError or ParseError when something went wrong.
    """

    def __init__(self, config, debug=False, session=None):
        """Initialize dashboard client.

        Args:
            config: Configuration dictionary containing base_url,
                consumption_start, consumption_end and timeout
            debug: Enable debug logging
            session: Optional requests.Session to use
        """
        self.config = config
        self.debug_enabled = debug
        self.requests_session = session

    def debug(self, msg):
        """Log debug message if debug mode is enabled."""
        if self.debug_enabled:
            print(msg)

    def session(self):
        """Return the HTTP session, opening one on first use."""
        if self.requests_session is None:
            self.requests_session = requests.Session()
        return self.requests_session

    def url(self, path):
        return f"{self.config['base_url'].rstrip('/')}/{path}"

    def get_energy_data(self):
        """Get energy readings.

        Returns:
            FetchResult: Records with `energy` values, or the error
        """
        return self.get_records(self.url("getdata"))

    def get_consumption_data(self):
        """Get consumption readings for the configured start/end window.

        The endpoint only ever receives the fixed window from config; any
        narrower range selection happens client side.

        Returns:
            FetchResult: Records with `load` and optionally `solar`/`grid`
        """
        return self.get_records(
            self.url("getconsumptiondata"),
            params={
                "start": self.config["consumption_start"],
                "end": self.config["consumption_end"],
            },
        )

    def get_records(self, url, params=None):
        """GET a JSON array of records.

        Args:
            url: Endpoint URL
            params: Optional query parameters

        Returns:
            FetchResult: Parsed records or a NetworkError/ParseError
        """
        try:
            response = self.session().get(url, params=params, timeout=self.config.get("timeout"))
            self.debug(f"get_records: GET {response.url} -> {response.status_code}")

            if response.status_code != 200:
                return FetchResult(error=NetworkError(f"{url} returned status {response.status_code}"))

            records = parse_records(response.json())
            self.debug(f"get_records: {len(records)} records from {url}")
            return FetchResult(records=records)

        except requests.exceptions.RequestException as e:
            # JSONDecodeError subclasses RequestException, so check it first
            if isinstance(e, requests.exceptions.JSONDecodeError):
                return FetchResult(error=ParseError(f"{url}: {e}"))
            return FetchResult(error=NetworkError(f"{url}: {e}"))
        except ValueError as e:
            return FetchResult(error=ParseError(f"{url}: {e}"))

    def close(self):
        """Close the client session."""
        if self.requests_session is not None:
            self.requests_session.close()


def is_valid_timestamp(value):
    """Check if a decoded JSON value is a usable Unix timestamp.

    Booleans, non-finite numbers and values outside the range datetime can
    represent are rejected.

    Args:
        value: Decoded `time` field

    Returns:
        bool: True if the value can be filtered and labelled
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        if not math.isfinite(value):
            return False
        datetime.fromtimestamp(value)
    except (OverflowError, OSError, ValueError):
        return False
    return True


def parse_records(data):
    """Convert a decoded JSON array into TimedRecord instances.

    Args:
        data: Decoded JSON body

    Returns:
        tuple: TimedRecord per item, in response order

    Raises:
        ValueError: If the body is not a list of objects with a valid numeric time
    """
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")

    records = []
    for item in data:
        if not isinstance(item, dict) or not is_valid_timestamp(item.get("time")):
            raise ValueError(f"record without a valid numeric time: {item!r}")
        values = {key: value for key, value in item.items() if key != "time"}
        records.append(TimedRecord(time=item["time"], values=values))
    return tuple(records)
