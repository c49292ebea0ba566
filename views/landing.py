import streamlit as st

from backend import config
from backend.telemetry import camera_feed_ticker
from backend.video_analysis import CONGESTION_COLORS
from views.common import badge, current_scope, get_catalog, kpi_card, navigation


@st.fragment(run_every=config.CAMERA_FEED_TICK_SECONDS)
def _live_panel(cameras):
    scope = current_scope()
    camera_ids = [cam["id"] for cam in cameras]
    selected = st.selectbox(
        "Camera",
        camera_ids,
        format_func=lambda cid: next(f"{c['name']} ({c['location']})" for c in cameras if c["id"] == cid),
        key="landing_camera",
    )
    camera = next(c for c in cameras if c["id"] == selected)
    ticker = scope.ticker(f"feed:{selected}", lambda: camera_feed_ticker(camera))
    values = ticker.values

    level = camera.get("congestion_level", "low")
    st.markdown(
        f'<div class="nt-row"><b>Live AI Analysis Running</b>'
        f'{badge(camera["status"].upper(), "#4ade80")}{badge(level.title() + " congestion", CONGESTION_COLORS.get(level, "#94a3b8"))}</div>',
        unsafe_allow_html=True,
    )
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Cars", str(values["cars"]))
    with c2:
        kpi_card("Trucks", str(values["trucks"]))
    with c3:
        kpi_card("Bikes", str(values["bikes"]))
    with c4:
        kpi_card("Pedestrians", str(values["pedestrians"]))
    c5, c6, c7, c8 = st.columns(4)
    with c5:
        kpi_card("Queue Length", f"{values['queue_length']} m")
    with c6:
        kpi_card("Avg Wait", f"{values['avg_wait_time']}s", color="#facc15")
    with c7:
        kpi_card("Throughput", f"{values['throughput']}/hr", color="#4ade80")
    with c8:
        kpi_card("Violations", str(values["violations"]), color="#f472b6")


def show():
    nav = navigation()
    landing = get_catalog().section("landing")

    st.markdown(
        """
        <div style="text-align:center;padding:28px 0 8px 0;">
            <h1 style="font-size:56px;margin:0;background:linear-gradient(90deg,#ec4899,#22d3ee);
                -webkit-background-clip:text;-webkit-text-fill-color:transparent;">Netra</h1>
            <p style="color:#94a3b8;font-size:18px;margin:8px 0 0 0;">
                AI-powered traffic intelligence for Indian cities
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    _, b1, b2, _ = st.columns([2, 1, 1, 2])
    if b1.button("Admin Login", key="landing_login_btn", width="stretch"):
        nav.navigate_to_login()
        st.rerun()
    if b2.button("Watch Demo", key="landing_demo_btn", width="stretch"):
        nav.navigate_to_demo()
        st.rerun()

    stat_cols = st.columns(len(landing["stats"]))
    for col, stat in zip(stat_cols, landing["stats"]):
        with col:
            kpi_card(stat["label"], stat["value"])

    with st.container(border=True):
        _live_panel(get_catalog().records("live_cameras"))

    st.markdown("## Complete Traffic Intelligence Platform")
    st.caption("From computer vision to automated enforcement, Netra provides end-to-end traffic optimization.")
    features = landing["features"]
    for start in range(0, len(features), 3):
        cols = st.columns(3)
        for col, feature in zip(cols, features[start:start + 3]):
            with col:
                st.markdown(
                    f'<div class="nt-card"><b>{feature["title"]}</b><div class="nt-muted">{feature["description"]}</div></div>',
                    unsafe_allow_html=True,
                )

    st.markdown("### Advanced Capabilities")
    cap_cols = st.columns(len(landing["capabilities"]))
    for col, cap in zip(cap_cols, landing["capabilities"]):
        col.markdown(f"**{cap['title']}**  \n{cap['description']}")

    impact_cols = st.columns(len(landing["impact"]))
    for col, item in zip(impact_cols, landing["impact"]):
        with col:
            kpi_card(item["label"], item["value"], color="#ec4899")

    left, right = st.columns(2)
    with left:
        st.markdown("### The Problem")
        st.write(landing["problem"])
        st.markdown("### Our Solution")
        st.write(landing["solution"])
    with right:
        st.markdown("### Connect with the Team")
        for contact in landing["contacts"]:
            st.markdown(f"- {contact}")

    st.caption("Netra · Hackathon MVP")
