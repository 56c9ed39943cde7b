"""Anywhere Solar System — Streamlit app for a scale Solar System centred anywhere on Earth."""

import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import get_geolocation, streamlit_js_eval

load_dotenv()

from anywheresolarsystem import config  # noqa: E402
from anywheresolarsystem.compute import (  # noqa: E402
    GeocodingError,
    ProjectionError,
    QueryValidationError,
    geocode_place,
    run,
)
from anywheresolarsystem.formatting import summary_rows  # noqa: E402
from anywheresolarsystem.i18n import t  # noqa: E402
from anywheresolarsystem.models import QueryInput  # noqa: E402
from anywheresolarsystem.renderers.kml import generate_kml  # noqa: E402
from anywheresolarsystem.renderers.plotly_map import render_map  # noqa: E402

logger = logging.getLogger(__name__)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☉",
    layout="centered",
)

# --- Session state initialization ---
if "sun_size" not in st.session_state:
    st.session_state.sun_size = config.DEFAULT_SUN_SIZE_M
if "latitude" not in st.session_state:
    st.session_state.latitude = config.INITIAL_COORDINATES[0]
if "longitude" not in st.session_state:
    st.session_state.longitude = config.INITIAL_COORDINATES[1]
if "pending_center" not in st.session_state:
    st.session_state.pending_center = None
if "geolocating" not in st.session_state:
    st.session_state.geolocating = False
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

# Centre updates from search/geolocation land here before the widgets are drawn;
# a widget's session_state key cannot change after the widget exists.
if st.session_state.pending_center is not None:
    st.session_state.latitude, st.session_state.longitude = st.session_state.pending_center
    st.session_state.pending_center = None

if st.session_state.geolocating:
    _location = get_geolocation()
    if _location is None:
        st.info(t("geolocate_waiting", _lang))
    else:
        st.session_state.geolocating = False
        coords = _location.get("coords") or {}
        if "latitude" in coords and "longitude" in coords:
            st.session_state.pending_center = (
                float(coords["latitude"]),
                float(coords["longitude"]),
            )
        st.rerun()

st.title(t("heading", _lang))
st.markdown(t("intro", _lang), unsafe_allow_html=True)

# --- Input form ---
with st.form("params"):
    st.number_input(
        t("label_sun_size", _lang),
        min_value=config.SUN_SIZE_RANGE[0],
        max_value=config.SUN_SIZE_RANGE[1],
        step=0.01,
        key="sun_size",
    )
    col1, col2 = st.columns(2)
    with col1:
        st.number_input(
            t("label_latitude", _lang),
            min_value=config.LATITUDE_RANGE[0],
            max_value=config.LATITUDE_RANGE[1],
            format="%.6f",
            key="latitude",
        )
    with col2:
        st.number_input(
            t("label_longitude", _lang),
            min_value=config.LONGITUDE_RANGE[0],
            max_value=config.LONGITUDE_RANGE[1],
            format="%.6f",
            key="longitude",
        )
    st.form_submit_button(t("btn_build", _lang), use_container_width=True)

pcol1, pcol2, pcol3 = st.columns([3, 1, 1.5])
with pcol1:
    place = st.text_input(t("label_place", _lang), label_visibility="collapsed")
with pcol2:
    if st.button(t("btn_search", _lang), use_container_width=True) and place:
        try:
            point = geocode_place(place)
            st.session_state.pending_center = (point.latitude, point.longitude)
            st.session_state.error_msg = None
        except GeocodingError as e:
            logger.warning("Geocoding failed for %r: %s", place, e)
            st.session_state.error_msg = t("error_place", _lang).format(error=e)
        st.rerun()
with pcol3:
    if st.button(t("btn_geolocate", _lang), use_container_width=True):
        st.session_state.geolocating = True
        st.rerun()

if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

# --- Computation and output ---
query = QueryInput(
    sun_size=st.session_state.sun_size,
    latitude=st.session_state.latitude,
    longitude=st.session_state.longitude,
)
try:
    data = run(query, points=config.get_ring_points())
except QueryValidationError as e:
    st.error(t("error_input", _lang).format(error=e))
    st.stop()
except ValueError as e:
    logger.error("Invalid ring configuration: %s", e)
    st.error(t("error_input", _lang).format(error=e))
    st.stop()
except ProjectionError as e:
    st.error(t("error_projection", _lang).format(error=e))
    st.stop()

st.plotly_chart(
    render_map(data),
    use_container_width=True,
    config={"scrollZoom": True, "displayModeBar": False},
)

st.table(
    [
        {
            t("col_body", _lang): name,
            t("col_size", _lang): size,
            t("col_distance", _lang): distance,
        }
        for name, size, distance in summary_rows(data.placemarks)
    ]
)

st.download_button(
    t("btn_kml", _lang),
    data=generate_kml(data),
    file_name=f"anywhere-solar-system-{data.query.sun_size_m}m.kml",
    mime="application/vnd.google-earth.kml+xml",
)

st.markdown(
    f"<small>{t('credits', _lang)}</small>",
    unsafe_allow_html=True,
)
