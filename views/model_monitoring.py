import pandas as pd
import plotly.express as px
import streamlit as st

from backend import config
from backend.model_monitor import RetrainQueue, drift_summary, fleet_summary, labeler_queue_sorted, status_color
from views.common import badge, current_scope, get_catalog, kpi_card, page_header

PRIORITY_COLORS = {"high": "#f87171", "medium": "#facc15", "low": "#4ade80"}


def _chart(fig, height=280):
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


@st.fragment(run_every=1)
def _model_cards(models, retrain: RetrainQueue):
    active = retrain.active()
    for model in models:
        with st.container(border=True):
            h1, h2 = st.columns([4, 1])
            h1.markdown(
                f"**{model['name']}** · {model['version']} "
                f"{badge(model['status'].upper(), status_color(model['status']))}",
                unsafe_allow_html=True,
            )
            retraining = active == model["id"]
            if h2.button(
                f"Retraining {retrain.remaining():.0f}s" if retraining else "Retrain",
                key=f"retrain_{model['id']}",
                width="stretch",
                disabled=active is not None,
            ):
                retrain.trigger(model["id"])
                st.rerun()
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Accuracy", f"{model['accuracy']}%")
            c2.metric("Latency", f"{model['latency']} ms")
            c3.metric("Throughput", f"{model['throughput']}/s")
            c4.metric("Confidence", f"{model['confidence']}%")
            st.caption(f"Deployed {model['deployed']} · updated {model['last_updated']}")


def show():
    scope = current_scope()
    catalog = get_catalog()
    models = catalog.records("models")
    retrain = scope.setdefault("retrain", RetrainQueue(config.RETRAIN_SECONDS))

    page_header("Model Monitoring", "Health, drift and retraining of the deployed AI models")

    fleet = fleet_summary(models)
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Active Models", str(fleet["active"]), f"{fleet['healthy']} healthy", "#4ade80")
    with c2:
        kpi_card("Needs Attention", str(fleet["needs_attention"]), "warning or drift", "#fb923c")
    with c3:
        kpi_card("Avg Accuracy", f"{fleet['avg_accuracy']:.1f}%")
    with c4:
        kpi_card("Avg Latency", f"{fleet['avg_latency']:.0f} ms", color="#facc15")

    tab_models, tab_perf, tab_drift, tab_labels = st.tabs(["Models", "Performance", "Drift", "Labeling Queue"])
    with tab_models:
        _model_cards(models, retrain)

    with tab_perf:
        perf = pd.DataFrame(catalog.records("model_performance"))
        left, right = st.columns(2)
        with left:
            st.markdown("### Accuracy")
            st.plotly_chart(_chart(px.line(perf, x="time", y="accuracy", markers=True)), width="stretch")
        with right:
            st.markdown("### Latency & Throughput")
            fig = px.bar(perf, x="time", y=["latency", "throughput"], barmode="group")
            st.plotly_chart(_chart(fig), width="stretch")

    with tab_drift:
        drift = catalog.records("model_drift")
        summary = drift_summary(drift)
        if summary["drifting"]:
            st.warning(
                f"Drift detected: accuracy down {summary['accuracy_drop']:.0f} points and confidence down "
                f"{summary['confidence_drop']:.0f} points since {drift[0]['date']}. Retraining is recommended."
            )
        else:
            st.success("No significant drift over the monitoring window.")
        fig = px.line(pd.DataFrame(drift), x="date", y=["accuracy", "confidence"], markers=True)
        st.plotly_chart(_chart(fig, height=320), width="stretch")

    with tab_labels:
        st.markdown("### Low-confidence samples awaiting review")
        for item in labeler_queue_sorted(catalog.records("labeler_queue")):
            st.markdown(
                f"""
                <div class="nt-card nt-row">
                    <div><b>{item['type']}</b><div class="nt-muted">{item['image']} · confidence {item['confidence']:.0%}</div></div>
                    <div>{badge(item['priority'].upper(), PRIORITY_COLORS.get(item['priority'], '#94a3b8'))}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
