import time

import streamlit as st

from backend.catalog import Catalog, load_catalog
from backend.lifecycle import ScreenScope, get_lifecycle
from backend.navigation import Navigation, get_navigation


@st.cache_resource
def get_catalog() -> Catalog:
    return load_catalog()


def navigation() -> Navigation:
    return get_navigation(st.session_state)


def current_scope() -> ScreenScope:
    lifecycle = get_lifecycle(st.session_state)
    if lifecycle.scope is None:
        return lifecycle.enter(navigation().screen_key)
    return lifecycle.scope


def run_timed(action, message: str):
    """Start a timed action and hold the script until it has finished."""
    if action.start(time.monotonic()):
        with st.spinner(message):
            time.sleep(action.remaining(time.monotonic()))
        st.rerun()


def page_header(title: str, subtitle: str = ""):
    st.markdown(
        f"""
        <div class="nt-header">
            <h1>{title}</h1>
            <p>{subtitle}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def kpi_card(label: str, value: str, sub: str = "", color: str = "#22d3ee"):
    st.markdown(
        f"""
        <div class="nt-card">
            <div class="nt-kpi-label">{label}</div>
            <div class="nt-kpi-value">{value}</div>
            <div class="nt-kpi-sub" style="color:{color};">{sub}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def badge(text: str, color: str) -> str:
    return (
        f'<span class="nt-badge" style="color:{color};border-color:{color}55;background:{color}1a;">'
        f"{text}</span>"
    )


def inject_theme():
    st.markdown(
        """
        <style>
        .nt-header {
            background: linear-gradient(180deg, #13131a 0%, #0b0b0f 100%);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 16px;
            padding: 16px 18px;
            margin-bottom: 14px;
        }
        .nt-header h1 {
            margin: 0;
            font-size: 32px;
            background: linear-gradient(90deg, #ec4899, #22d3ee);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
        }
        .nt-header p {
            margin: 6px 0 0 0;
            color: #94a3b8;
        }
        .nt-card {
            background: rgba(19,19,26,0.7);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 14px;
            padding: 12px 14px;
            margin-bottom: 10px;
        }
        .nt-kpi-label { font-size: 12px; color: #94a3b8; }
        .nt-kpi-value { font-size: 28px; font-weight: 800; color: #f8fafc; line-height: 1.15; }
        .nt-kpi-sub { font-size: 12px; }
        .nt-badge {
            display: inline-block;
            border: 1px solid;
            border-radius: 999px;
            padding: 2px 10px;
            font-size: 12px;
            font-weight: 600;
        }
        .nt-row {
            display: flex;
            justify-content: space-between;
            align-items: center;
            gap: 10px;
        }
        .nt-muted { color: #94a3b8; font-size: 13px; }
        </style>
        """,
        unsafe_allow_html=True,
    )
