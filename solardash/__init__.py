"""Solar dashboard package.

This package fetches energy and consumption readings, filters them by a
trailing time window and renders them as bar charts.
"""

from .client import DashboardClient
from .state import DashboardState, PipelineState
from .utils import filter_by_time
from .series import build_series, build_multi_series
from .charts import init_chart_runtime

__all__ = [
    'DashboardClient',
    'DashboardState',
    'PipelineState',
    'filter_by_time',
    'build_series',
    'build_multi_series',
    'init_chart_runtime'
]
