import plotly.express as px
import streamlit as st

from backend import config
from backend.live_map import STATUS_COLORS, average_wait_reduction, junction_frame, live_junctions
from backend.telemetry import live_map_ticker
from views.common import badge, current_scope, get_catalog, kpi_card, page_header, run_timed


@st.fragment(run_every=config.LIVE_MAP_TICK_SECONDS)
def _map_panel(junctions, show_optimized):
    scope = current_scope()
    ticker = scope.ticker("junctions", lambda: live_map_ticker(junctions))
    rows = live_junctions(junctions, ticker, show_optimized=show_optimized)

    df = junction_frame(rows)
    fig = px.scatter(
        df,
        x="x",
        y="y",
        size="vehicles",
        color="status",
        color_discrete_map=STATUS_COLORS,
        hover_name="name",
        hover_data={"x": False, "y": False, "vehicles": True, "display_wait": True, "signal_phase": True},
        text="name",
        size_max=40,
    )
    fig.update_traces(textposition="top center")
    fig.update_layout(
        height=460,
        margin=dict(l=8, r=8, t=8, b=8),
        plot_bgcolor="#0b0b0f",
        paper_bgcolor="#0b0b0f",
        font_color="#e2e8f0",
        xaxis=dict(range=[0, 100], visible=False),
        yaxis=dict(range=[0, 100], visible=False),
        legend_title_text="Status",
    )
    st.plotly_chart(fig, width="stretch")

    selected_id = scope.state.get("selected_junction")
    names = {row["id"]: row["name"] for row in rows}
    ids = list(names)
    choice = st.selectbox(
        "Junction details",
        ids,
        index=ids.index(selected_id) if selected_id in ids else 0,
        format_func=lambda jid: names[jid],
        key="map_junction_select",
    )
    scope.state["selected_junction"] = choice
    row = next(r for r in rows if r["id"] == choice)

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Vehicles", str(row["vehicles"]), row["last_update"])
    with c2:
        kpi_card("Wait Time", row["display_wait"], "AI optimized" if show_optimized else "Current", "#facc15")
    with c3:
        kpi_card("Signal Phase", row["signal_phase"], "", row["phase_color"])
    with c4:
        kpi_card("Improvement", row["improvement"], "with AI timing", "#4ade80")
    st.markdown(
        f'<div class="nt-card"><b>AI Recommendation:</b> {row["ai_recommendation"]} '
        f'{badge(row["status"].upper(), row["color"])}</div>',
        unsafe_allow_html=True,
    )


def show():
    scope = current_scope()
    junctions = get_catalog().records("map_junctions")
    optimization = scope.action("optimization", config.OPTIMIZATION_SECONDS)

    head_left, head_right = st.columns([4, 1])
    with head_left:
        page_header("Live City Map", "Junction status across the network, updated every few seconds")
    with head_right:
        st.write("")
        clicked = st.button(
            "Optimizing..." if optimization.is_running() else "Run AI Optimization",
            key="map_optimize_btn",
            width="stretch",
            disabled=optimization.is_running(),
        )
    if clicked:
        run_timed(optimization, "Optimizing signal timings...")

    show_optimized = optimization.is_complete()
    if show_optimized:
        st.success(f"AI optimization applied. Average wait time down {average_wait_reduction(junctions):.1f}%.")

    legend = " ".join(badge(status.title(), color) for status, color in STATUS_COLORS.items())
    st.markdown(f"<div>{legend}</div>", unsafe_allow_html=True)

    _map_panel(junctions, show_optimized)
