import importlib
import logging

import streamlit as st

from backend.lifecycle import get_lifecycle
from backend.navigation import AppState, Page, get_navigation
from views.common import inject_theme


st.set_page_config(
    page_title="Netra AI Traffic Control",
    page_icon="\U0001F6A6",
    layout="wide",
    initial_sidebar_state="expanded",
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

inject_theme()

nav = get_navigation(st.session_state)


def _load_view_module(module_name):
    try:
        return importlib.import_module(module_name)
    except Exception as exc:
        st.error(f"Failed to load module `{module_name}`.")
        st.exception(exc)
        return None


state_to_module = {
    AppState.LANDING: "views.landing",
    AppState.LOGIN: "views.login",
    AppState.DEMO: "views.demo_videos",
}

if nav.state is not AppState.ADMIN:
    get_lifecycle(st.session_state).enter(nav.screen_key)
    module = _load_view_module(state_to_module[nav.state])
    if module and hasattr(module, "show"):
        module.show()
    st.stop()

with st.sidebar:
    st.markdown(
        """
        <style>
        [data-testid="stSidebar"] {
            background: #0b0b0f;
            border-right: 1px solid rgba(255,255,255,0.08);
        }
        .sb-brand {
            display: flex;
            align-items: center;
            gap: 10px;
            padding: 8px 8px 14px 8px;
        }
        .sb-logo {
            width: 36px;
            height: 36px;
            border-radius: 10px;
            background: linear-gradient(135deg, #ec4899, #22d3ee);
            display: flex;
            align-items: center;
            justify-content: center;
            color: #ffffff;
            font-weight: 800;
        }
        .sb-title {
            font-size: 17px;
            font-weight: 800;
            background: linear-gradient(90deg, #ec4899, #22d3ee);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
        }
        .sb-sub {
            font-size: 12px;
            color: #94a3b8;
        }
        [data-testid="stSidebar"] div[role="radiogroup"] > label {
            border: 1px solid rgba(255,255,255,0.06);
            border-radius: 12px;
            padding: 10px 12px;
            margin: 0 0 6px 0;
            transition: all 0.2s ease;
        }
        [data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked) {
            background: linear-gradient(90deg, rgba(236,72,153,0.2), rgba(34,211,238,0.2));
            border-color: rgba(236,72,153,0.35);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown(
        """
        <div class="sb-brand">
            <div class="sb-logo">N</div>
            <div>
                <div class="sb-title">Netra</div>
                <div class="sb-sub">AI Traffic Control</div>
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    menu_items = [
        ("Dashboard", Page.DASHBOARD),
        ("AI Video Analysis", Page.LIVE_TRAFFIC),
        ("Live Map", Page.LIVE_MAP),
        ("Signal Control", Page.SIGNAL_CONTROL),
        ("Violations & E-Challan", Page.E_CHALLAN),
        ("Analytics", Page.ANALYTICS),
        ("Model Monitor", Page.MODEL_MONITORING),
        ("Settings", Page.SETTINGS),
    ]

    labels = [label for label, _ in menu_items]
    keys = [key for _, key in menu_items]
    default_index = keys.index(nav.page) if nav.page in keys else 0

    selection = st.radio("Navigation", labels, index=default_index, label_visibility="collapsed")
    nav.change_page(keys[labels.index(selection)])

    st.divider()
    if st.button("Sign Out", key="sign_out_btn", width="stretch"):
        nav.back_to_landing()
        st.rerun()

get_lifecycle(st.session_state).enter(nav.screen_key)

page_to_module = {
    Page.DASHBOARD: "views.dashboard",
    Page.LIVE_MAP: "views.live_map",
    Page.LIVE_TRAFFIC: "views.video_analysis",
    Page.SIGNAL_CONTROL: "views.signal_control",
    Page.E_CHALLAN: "views.e_challan",
    Page.ANALYTICS: "views.analytics",
    Page.MODEL_MONITORING: "views.model_monitoring",
    Page.SETTINGS: "views.settings",
}

module_name = page_to_module.get(nav.page, "views.dashboard")
page_module = _load_view_module(module_name)
if page_module and hasattr(page_module, "show"):
    page_module.show()
