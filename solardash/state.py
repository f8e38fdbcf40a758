"""View state for the two dashboard pipelines."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

from .models import ALL_SERIES, DEFAULT_FILTER
from .series import build_energy_chart, build_load_chart, build_multi_series

LOADING = "loading"
READY = "ready"

MULTI_VARIANT = "multi"
MINIMAL_VARIANT = "minimal"
VARIANTS = (MULTI_VARIANT, MINIMAL_VARIANT)


class PipelineState:
    """State of one fetch -> filter -> build pipeline.

    Every fetch is tagged with a request token. Only the result carrying the
    latest token is applied; results from superseded requests are dropped
    so a slow response can't overwrite a newer one.
    """

    def __init__(self, name, debug=False):
        self.name = name
        self.debug_enabled = debug
        self.status = LOADING
        self.payload = None
        self.last_error = None
        self.latest_token = 0
        self._lock = threading.Lock()

    def debug(self, msg):
        """Log debug message if debug mode is enabled."""
        if self.debug_enabled:
            print(msg)

    def begin(self):
        """Issue a new request token and move to loading.

        The previous payload stays in place so the last chart remains
        visible while the new request is in flight.

        Returns:
            int: The new token
        """
        with self._lock:
            self.latest_token += 1
            self.status = LOADING
            self.debug(f"{self.name}: issued token {self.latest_token}")
            return self.latest_token

    def complete(self, token, result, build):
        """Apply a fetch result if it belongs to the latest request.

        Args:
            token: Token returned by begin() for this request
            result: FetchResult from the client
            build: Callable turning the fetched records into a ChartPayload

        Returns:
            bool: True if a new payload was stored
        """
        with self._lock:
            if token != self.latest_token:
                self.debug(f"{self.name}: discarding token {token}, latest is {self.latest_token}")
                return False

            if not result.ok:
                self.last_error = result.error
                print(f"Error fetching {self.name} data: {result.error}")
                return False

            self.payload = build(result.records)
            self.last_error = None
            self.status = READY
            self.debug(f"{self.name}: token {token} ready with {len(self.payload.labels)} labels")
            return True


class DashboardState:
    """Selections and chart payloads for the dashboard.

    This class owns the filter selections for both pipelines and the series
    selection for the consumption pipeline. Any selection change re-runs
    both pipelines.
    """

    def __init__(self, client, variant=MULTI_VARIANT, clock=time.time, debug=False):
        """Initialize dashboard state.

        Args:
            client: DashboardClient used for fetching
            variant: Consumption chart variant, "multi" or "minimal"
            clock: Callable returning the current Unix time in seconds
            debug: Enable debug logging
        """
        if variant not in VARIANTS:
            raise ValueError(f"Unknown consumption variant: {variant}")
        self.client = client
        self.variant = variant
        self.clock = clock
        self.debug_enabled = debug

        self.energy_filter = DEFAULT_FILTER
        self.consumption_filter = DEFAULT_FILTER
        self.series_selection = ALL_SERIES
        self._lock = threading.Lock()

        self.energy = PipelineState("energy", debug)
        self.consumption = PipelineState("consumption", debug)

    def debug(self, msg):
        """Log debug message if debug mode is enabled."""
        if self.debug_enabled:
            print(msg)

    def mount(self):
        """Run both pipelines for the initial selections."""
        self.refresh()

    def select(self, energy_filter=None, consumption_filter=None, series=None):
        """Update selections and re-run the pipelines if anything changed.

        Args:
            energy_filter: Optional FilterSelector for the energy chart
            consumption_filter: Optional FilterSelector for the consumption chart
            series: Optional iterable of SeriesKey for the consumption chart

        Returns:
            bool: True if a selection changed and the pipelines were re-run
        """
        changed = False
        with self._lock:
            if energy_filter is not None and energy_filter is not self.energy_filter:
                self.energy_filter = energy_filter
                changed = True
            if consumption_filter is not None and consumption_filter is not self.consumption_filter:
                self.consumption_filter = consumption_filter
                changed = True
            if series is not None and frozenset(series) != self.series_selection:
                self.series_selection = frozenset(series)
                changed = True
            if changed:
                self.debug(
                    f"select: energy={self.energy_filter.value} consumption={self.consumption_filter.value} "
                    f"series={sorted(key.value for key in self.series_selection)}"
                )

        if changed:
            self.refresh()
        return changed

    def refresh(self):
        """Fetch both datasets concurrently and wait for both to complete."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [
                executor.submit(self.load_energy),
                executor.submit(self.load_consumption),
            ]
            wait(futures)
        for future in futures:
            # Surface programming errors from the workers
            future.result()

    def load_energy(self):
        """Run the energy pipeline once."""
        token = self.energy.begin()
        with self._lock:
            selector = self.energy_filter
        result = self.client.get_energy_data()
        return self.energy.complete(
            token, result, lambda records: build_energy_chart(records, selector, self.clock())
        )

    def load_consumption(self):
        """Run the consumption pipeline once using the configured variant."""
        token = self.consumption.begin()
        with self._lock:
            selector = self.consumption_filter
            selection = self.series_selection
        result = self.client.get_consumption_data()

        if self.variant == MINIMAL_VARIANT:
            def build(records):
                return build_load_chart(records, selector, self.clock())
        else:
            def build(records):
                return build_multi_series(records, selection, self.clock(), selector)

        return self.consumption.complete(token, result, build)
