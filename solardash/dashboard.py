"""Dash layout and callbacks for the energy and consumption charts."""

import dash
from dash import dcc, html
from dash.dependencies import Input, Output

from .charts import init_chart_runtime, payload_to_figure
from .models import DEFAULT_FILTER, FilterSelector, SeriesKey
from .state import MULTI_VARIANT

ENERGY_TITLE = "Energy"
CONSUMPTION_TITLE = "Consumption"

COLUMN_STYLE = {"width": "45%"}
FIRST_COLUMN_STYLE = {"width": "45%", "marginRight": "5%"}


def filter_dropdown(component_id):
    return dcc.Dropdown(
        id=component_id,
        options=[{"label": selector.label, "value": selector.value} for selector in FilterSelector],
        value=DEFAULT_FILTER.value,
        clearable=False,
    )


def series_checklist(component_id, selection):
    return dcc.Checklist(
        id=component_id,
        options=[{"label": key.title, "value": key.value} for key in SeriesKey],
        value=[key.value for key in SeriesKey if key in selection],
        inline=True,
    )


def chart_or_placeholder(pipeline, title):
    """Return the chart for a pipeline, or a loading message before its first payload."""
    if pipeline.payload is None:
        return html.P("Loading...")
    return dcc.Graph(figure=payload_to_figure(pipeline.payload, title))


def build_layout(state):
    consumption_controls = [filter_dropdown("consumption-filter")]
    if state.variant == MULTI_VARIANT:
        consumption_controls.append(series_checklist("consumption-series", state.series_selection))

    return html.Div([
        html.Div([
            filter_dropdown("energy-filter"),
            html.Div(id="energy-chart", children=html.P("Loading...")),
        ], style=FIRST_COLUMN_STYLE),
        html.Div(consumption_controls + [
            html.Div(id="consumption-chart", children=html.P("Loading...")),
        ], style=COLUMN_STYLE),
    ], style={"display": "flex", "justifyContent": "center"})


def render_charts(state, energy_filter, consumption_filter, series=None):
    """Apply the selections from the page and return both chart areas.

    Args:
        state: DashboardState
        energy_filter: Selector value from the energy dropdown
        consumption_filter: Selector value from the consumption dropdown
        series: Selected series values from the checklist, if shown

    Returns:
        tuple: (energy chart component, consumption chart component)
    """
    selection = None if series is None else [SeriesKey(value) for value in series]
    changed = state.select(
        energy_filter=FilterSelector(energy_filter),
        consumption_filter=FilterSelector(consumption_filter),
        series=selection,
    )
    # A page load arrives with unchanged selections and still mounts
    if not changed:
        state.mount()

    return (
        chart_or_placeholder(state.energy, ENERGY_TITLE),
        chart_or_placeholder(state.consumption, CONSUMPTION_TITLE),
    )


def create_app(state):
    """Create the Dash app wired to the given dashboard state.

    The state is shared by every browser session served by the app. A page
    load or selection change in one tab sets the selections, and re-fetches
    the charts, for all viewers. Run one process per viewer if independent
    selections are needed.
    """
    init_chart_runtime()

    app = dash.Dash(__name__, title="Solar Dashboard")
    app.layout = build_layout(state)

    if state.variant == MULTI_VARIANT:
        @app.callback(
            Output("energy-chart", "children"),
            Output("consumption-chart", "children"),
            Input("energy-filter", "value"),
            Input("consumption-filter", "value"),
            Input("consumption-series", "value"),
        )
        def update_charts(energy_filter, consumption_filter, series):
            return render_charts(state, energy_filter, consumption_filter, series or [])
    else:
        @app.callback(
            Output("energy-chart", "children"),
            Output("consumption-chart", "children"),
            Input("energy-filter", "value"),
            Input("consumption-filter", "value"),
        )
        def update_charts(energy_filter, consumption_filter):
            return render_charts(state, energy_filter, consumption_filter)

    return app
