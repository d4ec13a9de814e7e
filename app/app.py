# Project: weather-explorer
# Owner: GreenUnicorn
"""
app.py — Streamlit dashboard for storing and browsing historical weather files.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from functools import partial
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import streamlit as st

from weather_explorer.api import get_weather_file_content, list_weather_files, store_weather_data
from weather_explorer.catalog import FileCatalog
from weather_explorer.chart import table_records, temperature_figure
from weather_explorer.config import DEFAULT_CONFIG, load_config
from weather_explorer.errors import TransportError, ValidationError
from weather_explorer.pagination import PAGE_SIZE_OPTIONS, total_pages
from weather_explorer.utils import fmt_size, fmt_timestamp, log_info, set_log_path
from weather_explorer.validation import max_allowed_date, validate_request
from weather_explorer.view import FAILED, IDLE, LOADED, LOADING, WeatherView


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Explorer",
    page_icon="🌤",
    layout="wide",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  #MainMenu, footer { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; }

  .section-label {
    font-size: 0.72rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    margin-bottom: 0.75rem;
  }
  .error-card {
    background: rgba(255, 69, 58, 0.1);
    border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px;
    color: #ff453a;
    padding: 12px 16px;
    margin: 0.5rem 0;
  }
  .success-card {
    background: rgba(48, 209, 88, 0.1);
    border: 1px solid rgba(48, 209, 88, 0.3);
    border-radius: 12px;
    color: #30d158;
    padding: 12px 16px;
    margin: 0.5rem 0;
  }
  .empty-state {
    color: #8e8e93;
    text-align: center;
    padding: 3rem 0;
    border: 1px dashed #3a3a3c;
    border-radius: 12px;
  }
  .file-meta { color: #8e8e93; font-size: 0.75rem; margin: -0.5rem 0 0.5rem 0.25rem; }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

def banner(kind: str, text: str) -> None:
    """Render an inline error or success card."""
    st.markdown(f'<div class="{kind}-card">{text}</div>', unsafe_allow_html=True)


def get_config() -> dict:
    """Load config.toml, falling back to built-in defaults when absent."""
    try:
        return load_config()
    except FileNotFoundError:
        return DEFAULT_CONFIG


# ─────────────────────────────────────────────────────────────
# Session state initialisation
# ─────────────────────────────────────────────────────────────

config = get_config()
backend = config["backend"]
BASE_URL = backend["base_url"]
TIMEOUT = backend["timeout_seconds"]
set_log_path(config["log"]["path"])

if "view" not in st.session_state:
    st.session_state.view = WeatherView(page_size=config["display"]["default_page_size"])
if "catalog" not in st.session_state:
    view: WeatherView = st.session_state.view
    st.session_state.catalog = FileCatalog(
        fetch=partial(list_weather_files, base_url=BASE_URL, timeout=TIMEOUT),
        on_select=view.select,
    )
    st.session_state.catalog.refresh()
if "store_error" not in st.session_state:
    st.session_state.store_error = None
if "store_message" not in st.session_state:
    st.session_state.store_message = None

catalog: FileCatalog = st.session_state.catalog
view: WeatherView = st.session_state.view


def submit_request(raw_lat: str, raw_lon: str, raw_start: str, raw_end: str) -> None:
    """Validate the form, store the data on the backend, refresh the file list."""
    st.session_state.store_error = None
    st.session_state.store_message = None

    try:
        request = validate_request(raw_lat, raw_lon, raw_start, raw_end)
    except ValidationError as e:
        st.session_state.store_error = str(e)
        return

    try:
        with st.spinner("Fetching..."):
            result = store_weather_data(request, base_url=BASE_URL, timeout=TIMEOUT)
    except TransportError as e:
        st.session_state.store_error = e.detail
        return

    log_info(f"Stored {result['file']}")
    st.session_state.store_message = f"Success! File stored: {result['file']}"
    catalog.refresh()


def change_page_size() -> None:
    view.pager.set_page_size(st.session_state.page_size_select)


# ─────────────────────────────────────────────────────────────
# Layout
# ─────────────────────────────────────────────────────────────

st.markdown("## 🌤 Weather Explorer")

side_col, main_col = st.columns([1, 2.5], gap="large")

# ─────────────────────────────────────────────────────────────
# SECTION 1: Fetch weather data
# ─────────────────────────────────────────────────────────────

with side_col:
    st.markdown('<div class="section-label">Fetch Weather Data</div>', unsafe_allow_html=True)
    latest = max_allowed_date()
    with st.form("fetch_form"):
        lat_col, lon_col = st.columns(2)
        raw_lat = lat_col.text_input("Latitude", placeholder="e.g. 52.52")
        raw_lon = lon_col.text_input("Longitude", placeholder="e.g. 13.41")
        start_col, end_col = st.columns(2)
        start = start_col.date_input("Start Date", value=None, max_value=latest)
        end = end_col.date_input("End Date", value=None, max_value=latest)
        submitted = st.form_submit_button("Fetch Data", use_container_width=True)

    if submitted:
        submit_request(
            raw_lat,
            raw_lon,
            start.isoformat() if start else "",
            end.isoformat() if end else "",
        )

    if st.session_state.store_error:
        banner("error", st.session_state.store_error)
    if st.session_state.store_message:
        banner("success", st.session_state.store_message)

    # ─────────────────────────────────────────────────────────
    # SECTION 2: Saved files
    # ─────────────────────────────────────────────────────────

    title_col, refresh_col = st.columns([3, 1])
    with title_col:
        st.markdown('<div class="section-label">Saved Files</div>', unsafe_allow_html=True)
    with refresh_col:
        if st.button("↻", key="refresh_files", help="Refresh file list"):
            with st.spinner("Loading..."):
                catalog.refresh()

    empty = catalog.empty_message()
    if empty:
        if catalog.error:
            banner("error", empty)
        else:
            st.markdown(f'<div class="empty-state">{empty}</div>', unsafe_allow_html=True)

    for f in catalog.files:
        name = f.get("name", "")
        st.button(
            f"📄 {name}",
            key=f"file_{name}",
            use_container_width=True,
            type="primary" if name == catalog.selected else "secondary",
            on_click=catalog.select,
            args=(name,),
        )
        st.markdown(
            f'<div class="file-meta">{fmt_timestamp(f.get("created_at", ""))}'
            f' &nbsp;·&nbsp; {fmt_size(f.get("size_bytes", 0) or 0)}</div>',
            unsafe_allow_html=True,
        )

# ─────────────────────────────────────────────────────────────
# SECTION 3: Dashboard for the selected file
# ─────────────────────────────────────────────────────────────

with main_col:
    if view.status == LOADING:
        with st.spinner(f"Loading {view.filename}..."):
            view.load(partial(get_weather_file_content, base_url=BASE_URL, timeout=TIMEOUT))

    if view.status == IDLE:
        st.markdown(
            '<div class="empty-state">Select a file to view data</div>',
            unsafe_allow_html=True,
        )
    elif view.status == FAILED:
        banner("error", view.error or "No data found")
    elif view.status == LOADED:
        units = view.data["daily_units"]
        points = view.chart_points()
        rows = view.table_rows()

        if not rows:
            st.markdown('<div class="empty-state">No data in this file</div>', unsafe_allow_html=True)
        else:
            fig = temperature_figure(
                points,
                title=f"Temperature Trends ({view.filename})",
                unit=units["temperature_2m_max"],
            )
            st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

            pager = view.pager
            head_col, size_col = st.columns([3, 1])
            with head_col:
                st.markdown('<div class="section-label">Daily Data</div>', unsafe_allow_html=True)
            with size_col:
                st.selectbox(
                    "Rows per page",
                    options=PAGE_SIZE_OPTIONS,
                    index=PAGE_SIZE_OPTIONS.index(pager.page_size),
                    format_func=lambda n: f"{n} per page",
                    key="page_size_select",
                    on_change=change_page_size,
                    label_visibility="collapsed",
                )

            st.dataframe(
                table_records(view.page_rows(), units),
                use_container_width=True,
                hide_index=True,
            )

            info_col, prev_col, next_col = st.columns([4, 1, 1])
            with info_col:
                st.caption(f"Page {pager.page} of {total_pages(rows, pager.page_size)}")
            with prev_col:
                st.button(
                    "Prev", key="prev_page", use_container_width=True,
                    disabled=not pager.has_prev(), on_click=pager.prev_page,
                )
            with next_col:
                st.button(
                    "Next", key="next_page", use_container_width=True,
                    disabled=not pager.has_next(rows), on_click=pager.next_page, args=(rows,),
                )
