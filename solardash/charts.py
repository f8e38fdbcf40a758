"""Plotly chart helpers for rendering chart payloads."""

import threading

import plotly.graph_objects as go
import plotly.io as pio

TEMPLATE_NAME = "solardash"
BASE_TEMPLATE = "plotly_white"
CHART_HEIGHT = 300

_chart_runtime_initialized = False
_chart_runtime_lock = threading.Lock()


def init_chart_runtime():
    """Register the dashboard bar chart template and make it the default.

    Safe to call more than once; only the first call registers anything.

    Returns:
        bool: True if this call performed the registration
    """
    global _chart_runtime_initialized
    with _chart_runtime_lock:
        if _chart_runtime_initialized:
            return False

        pio.templates[TEMPLATE_NAME] = go.layout.Template(
            layout={
                "barmode": "group",
                "showlegend": True,
                "legend": {"orientation": "h", "yanchor": "bottom", "y": 1.02, "xanchor": "center", "x": 0.5},
                "title": {"x": 0.5},
                "xaxis": {"type": "category"},
            }
        )
        pio.templates.default = f"{BASE_TEMPLATE}+{TEMPLATE_NAME}"
        _chart_runtime_initialized = True
        return True


def payload_to_figure(payload, title):
    """Convert a ChartPayload into a bar chart figure.

    Args:
        payload: ChartPayload to draw
        title: Chart title

    Returns:
        go.Figure: One bar trace per dataset, all sharing the payload labels
    """
    fig = go.Figure()
    labels = list(payload.labels)
    for dataset in payload.datasets:
        fig.add_trace(go.Bar(
            x=labels,
            y=list(dataset.values),
            name=dataset.name,
            marker_color=dataset.color,
        ))
    fig.update_layout(title_text=title, height=CHART_HEIGHT)
    return fig
