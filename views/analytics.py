import pandas as pd
import plotly.express as px
import streamlit as st

from backend import analytics
from backend.reports import REPORT_FORMATS, analytics_report, report_filename
from views.common import get_catalog, kpi_card, page_header

SERIES_COLORS = {"Baseline": "#94a3b8", "AI Optimized": "#ec4899"}

REPORT_SECTIONS = ("traffic_data", "before_after_kpis", "violation_types", "junction_performance")


def _style(fig, height=320):
    fig.update_layout(
        height=height,
        margin=dict(l=8, r=8, t=8, b=8),
        plot_bgcolor="#0b0b0f",
        paper_bgcolor="#0b0b0f",
        font_color="#e2e8f0",
        xaxis_title="",
        legend_title_text="",
    )
    return fig


def show():
    catalog = get_catalog()
    traffic = catalog.records("traffic_data")

    page_header("Traffic Analytics & Impact", "Before and after comparison of AI signal optimization")

    f1, f2, f3, f4 = st.columns([2, 2, 1, 1])
    time_range = f1.selectbox(
        "Time range",
        list(analytics.TIME_RANGES),
        format_func=lambda key: analytics.TIME_RANGES[key],
        key="analytics_range",
    )
    view_mode = f2.segmented_control(
        "View",
        analytics.VIEW_MODES,
        default="comparison",
        format_func=str.title,
        key="analytics_view",
    ) or "comparison"
    fmt = f3.selectbox("Format", REPORT_FORMATS, format_func=str.upper, key="analytics_format")
    sections = {name: catalog.section(name) for name in REPORT_SECTIONS}
    f4.write("")
    f4.download_button(
        "Export Report",
        data=analytics_report(sections, time_range, view_mode, fmt),
        file_name=report_filename("analytics", fmt),
        mime="application/json" if fmt == "json" else "text/csv",
        width="stretch",
    )

    summary = analytics.traffic_summary(traffic)
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Baseline Throughput", f"{summary['baseline_total']:,}", "vehicles across the day", "#94a3b8")
    with c2:
        kpi_card("Optimized Throughput", f"{summary['optimized_total']:,}", "vehicles across the day", "#ec4899")
    with c3:
        kpi_card("Avg Wait Change", f"{summary['wait_change_pct']:.1f}%", f"{summary['optimized_avg_wait']:.0f}s vs {summary['baseline_avg_wait']:.0f}s", "#4ade80")
    with c4:
        kpi_card("Peak Hour", str(summary["peak_hour"]), f"up to {summary['peak_wait_saved']:.0f}s saved per vehicle", "#facc15")

    left, right = st.columns(2)
    with left:
        st.markdown("### Traffic Throughput")
        fig = px.area(
            analytics.throughput_long(traffic, view_mode),
            x="time",
            y="vehicles",
            color="series",
            color_discrete_map=SERIES_COLORS,
        )
        st.plotly_chart(_style(fig), width="stretch")
    with right:
        st.markdown("### Average Wait Time")
        fig = px.line(
            analytics.wait_long(traffic, view_mode),
            x="time",
            y="wait_seconds",
            color="series",
            color_discrete_map=SERIES_COLORS,
            markers=True,
        )
        st.plotly_chart(_style(fig), width="stretch")

    st.markdown("### Before vs After")
    st.dataframe(pd.DataFrame(catalog.records("before_after_kpis")), width="stretch", hide_index=True)

    left, right = st.columns(2)
    with left:
        st.markdown("### Violations by Type")
        breakdown = analytics.violation_breakdown(catalog.records("violation_types"))
        value_col = "baseline" if view_mode == "baseline" else "optimized"
        fig = px.pie(
            breakdown,
            names="name",
            values=value_col,
            color="name",
            color_discrete_map=dict(zip(breakdown["name"], breakdown["color"])),
            hole=0.45,
        )
        st.plotly_chart(_style(fig), width="stretch")
    with right:
        st.markdown("### Junction Performance")
        perf = analytics.junction_performance_frame(catalog.records("junction_performance"))
        fig = px.bar(
            perf.melt(id_vars=["name"], value_vars=["baseline", "optimized"], var_name="series", value_name="score")
            .assign(series=lambda d: d["series"].map(analytics.SERIES_LABELS)),
            x="name",
            y="score",
            color="series",
            barmode="group",
            color_discrete_map=SERIES_COLORS,
        )
        st.plotly_chart(_style(fig), width="stretch")

    st.caption(f"Showing {analytics.TIME_RANGES[time_range].lower()} · {view_mode} view")
