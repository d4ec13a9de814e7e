# Project: weather-explorer
# Owner: GreenUnicorn
"""
chart.py — Plotly chart and table helpers for the dashboard.

Kept out of the Streamlit script so the figure and table shapes can be
tested without a running app.
"""

import plotly.graph_objects as go

from weather_explorer.transform import DEFAULT_TEMPERATURE_UNIT
from weather_explorer.utils import fmt_day

MAX_COLOR = "#ff453a"
MIN_COLOR = "#0a84ff"

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'SF Pro Display', sans-serif",
              color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", font=dict(color="#8e8e93")),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)

# (row key, column title, daily_units key)
TABLE_COLUMNS = [
    ("date", "Date", None),
    ("maxTemp", "Max Temp", "temperature_2m_max"),
    ("minTemp", "Min Temp", "temperature_2m_min"),
    ("appMax", "Apparent Max", "apparent_temperature_max"),
    ("appMin", "Apparent Min", "apparent_temperature_min"),
]


def temperature_figure(points: list[dict], title: str, unit: str = DEFAULT_TEMPERATURE_UNIT) -> go.Figure:
    """Build the daily max/min temperature line chart.

    None temperatures stay None so Plotly leaves a gap for that day.

    Args:
        points: Chart points from to_chart_series.
        title: Chart title, usually including the file name.
        unit: Temperature unit label for the y axis.

    Returns:
        A Plotly Figure with two line traces, 'Max Temp' and 'Min Temp'.
    """
    dates = [p["date"] for p in points]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=dates, y=[p["maxTemp"] for p in points],
        name="Max Temp",
        mode="lines",
        line=dict(color=MAX_COLOR, width=2),
        connectgaps=False,
    ))
    fig.add_trace(go.Scatter(
        x=dates, y=[p["minTemp"] for p in points],
        name="Min Temp",
        mode="lines",
        line=dict(color=MIN_COLOR, width=2),
        connectgaps=False,
    ))
    layout = {
        **PLOTLY_LAYOUT,
        "yaxis": dict(**PLOTLY_LAYOUT["yaxis"], title=dict(text=unit)),
        "xaxis": dict(**PLOTLY_LAYOUT["xaxis"], tickformat="%b %d"),
    }
    fig.update_layout(
        **layout,
        title=dict(text=title, font=dict(color="#8e8e93", size=13)),
        height=300,
    )
    return fig


def column_labels(daily_units: dict) -> list[str]:
    """Table header labels with units, e.g. 'Max Temp (°C)'."""
    labels = []
    for _, title, unit_key in TABLE_COLUMNS:
        unit = daily_units.get(unit_key) if unit_key else None
        labels.append(f"{title} ({unit})" if unit else title)
    return labels


def fmt_cell(value) -> str:
    """Format a table cell; None renders as a dash."""
    if value is None:
        return "—"
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def fmt_date_cell(value) -> str:
    """Format the date column as 'Mon 01 Jan'; unparseable dates are shown as-is."""
    try:
        return fmt_day(value)
    except (TypeError, ValueError):
        return fmt_cell(value)


def table_records(rows: list[dict], daily_units: dict) -> list[dict]:
    """Rows keyed by their display column labels, ready for st.dataframe."""
    labels = column_labels(daily_units)
    records = []
    for row in rows:
        record = {}
        for label, (key, _, _) in zip(labels, TABLE_COLUMNS):
            record[label] = fmt_date_cell(row[key]) if key == "date" else fmt_cell(row[key])
        records.append(record)
    return records
