import streamlit as st

from backend import config
from backend.dashboard import ALERT_COLORS, TREND_COLORS, current_kpis, initial_pending, severity_color
from backend.telemetry import dashboard_ticker
from views.common import badge, current_scope, get_catalog, kpi_card, page_header, run_timed


@st.fragment(run_every=config.DASHBOARD_TICK_SECONDS)
def _kpi_row(section):
    scope = current_scope()
    ticker = scope.ticker("pending", lambda: dashboard_ticker(initial_pending(section["kpis"])))
    simulated = scope.action("simulation", config.OPTIMIZATION_SECONDS).is_complete()
    rows = current_kpis(
        section["kpis"],
        pending_violations=ticker["pending_violations"],
        overrides=section["optimized_kpis"] if simulated else None,
    )
    cols = st.columns(len(rows))
    for col, kpi in zip(cols, rows):
        with col:
            kpi_card(kpi["title"], kpi["value"], kpi["change"], TREND_COLORS.get(kpi["trend"], "#94a3b8"))


def show():
    scope = current_scope()
    section = get_catalog().section("dashboard")
    simulation = scope.action("simulation", config.OPTIMIZATION_SECONDS)

    head_left, head_right = st.columns([4, 1])
    with head_left:
        page_header("Traffic Control Dashboard", "Real-time overview of the city junction network")
    with head_right:
        st.write("")
        clicked = st.button(
            "Simulating..." if simulation.is_running() else "Run AI Simulation",
            key="dash_simulate_btn",
            width="stretch",
            disabled=simulation.is_running(),
        )
    if clicked:
        run_timed(simulation, "Running AI optimization across the network...")

    _kpi_row(section)

    if simulation.is_complete():
        st.success("AI optimization preview applied. Predicted values are shown for wait time and efficiency.")

    left, right = st.columns([3, 2])
    with left:
        st.markdown("### Top Congested Junctions")
        for junction in section["congested_junctions"]:
            color = severity_color(junction["severity"])
            st.markdown(
                f"""
                <div class="nt-card nt-row">
                    <div>
                        <b>{junction['name']}</b>
                        <div class="nt-muted">{junction['vehicles']} vehicles · wait {junction['wait_time']}</div>
                    </div>
                    <div>{badge(junction['severity'].upper(), color)} {badge(junction['improvement'], '#4ade80')}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
    with right:
        st.markdown("### Live Alerts")
        for alert in section["alerts"]:
            color = ALERT_COLORS.get(alert["type"], "#94a3b8")
            st.markdown(
                f"""
                <div class="nt-card" style="border-left:3px solid {color};">
                    <div>{alert['message']}</div>
                    <div class="nt-muted">{alert['time']}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
