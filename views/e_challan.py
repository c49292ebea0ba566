import pandas as pd
import streamlit as st

from backend import config
from backend.challans import (
    STATUS_FILTERS,
    ChallanDesk,
    challan_totals,
    confidence_band,
    filter_violations,
    pending_count,
    status_color,
)
from backend.reports import challans_csv, report_filename
from views.common import badge, current_scope, get_catalog, kpi_card, page_header, run_timed

BAND_COLORS = {"high": "#4ade80", "medium": "#facc15", "low": "#f87171"}


def _violation_card(desk: ChallanDesk, violation, issue_action):
    band = confidence_band(violation["confidence"])
    extra = ""
    if violation.get("speed"):
        extra = f" · {violation['speed']} in {violation.get('speed_limit', '-')} zone"
    st.markdown(
        f"""
        <div class="nt-card">
            <div class="nt-row">
                <div><b>{violation['id']} · {violation['type']}</b></div>
                <div>{badge(violation['status'].upper(), status_color(violation['status']))}
                     {badge(f"{violation['confidence']}% confidence", BAND_COLORS[band])}</div>
            </div>
            <div class="nt-muted">{violation['vehicle']} · {violation['junction']} · {violation['timestamp']}{extra}</div>
            <div class="nt-muted">Estimated fine: ₹{violation.get('estimated_fine', 0)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if violation["status"] != "pending":
        return
    issuing = desk.issuing == violation["id"]
    c1, c2, _ = st.columns([1, 1, 3])
    if c1.button(
        "Issuing..." if issuing else "Approve",
        key=f"challan_approve_{violation['id']}",
        width="stretch",
        disabled=desk.issuing is not None,
    ):
        if desk.begin_approval(violation["id"]):
            run_timed(issue_action, f"Issuing e-challan for {violation['vehicle']}...")
    if c2.button(
        "Reject",
        key=f"challan_reject_{violation['id']}",
        width="stretch",
        disabled=desk.issuing is not None,
    ):
        desk.reject(violation["id"])
        st.rerun()


def show():
    scope = current_scope()
    catalog = get_catalog()
    desk = scope.setdefault("challan_desk", ChallanDesk(catalog.records("violations"), catalog.records("challans")))
    issue_action = scope.action("issue", config.CHALLAN_ISSUE_SECONDS)

    if desk.issuing is not None and issue_action.is_complete():
        challan = desk.complete_approval()
        issue_action.reset()
        if challan is not None:
            st.toast(f"Challan {challan['id']} issued to {challan['vehicle']}")

    page_header("Violations & E-Challan", "Human-in-the-loop review of AI-detected traffic violations")

    totals = challan_totals(desk.challans)
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Pending Review", str(pending_count(desk.violations)), "awaiting decision", "#fb923c")
    with c2:
        kpi_card("Challans Issued", str(totals["issued"]), f"{totals['paid']} paid")
    with c3:
        kpi_card("Collected", f"₹{totals['collected']:,}", "payments received", "#4ade80")
    with c4:
        kpi_card("Outstanding", f"₹{totals['outstanding']:,}", f"{totals['pending']} unpaid", "#f87171")

    tab_review, tab_challans = st.tabs(["Violation Review", "Issued Challans"])
    with tab_review:
        f1, f2 = st.columns([3, 1])
        term = f1.text_input("Search", placeholder="Vehicle number, junction or violation type", key="challan_search")
        status = f2.selectbox("Status", STATUS_FILTERS, format_func=str.title, key="challan_status")
        rows = filter_violations(desk.violations, term, status)
        if not rows:
            st.info("No violations match the current filters.")
        for violation in rows:
            _violation_card(desk, violation, issue_action)

    with tab_challans:
        h1, h2 = st.columns([4, 1])
        h1.markdown("### Issued Challans")
        h2.download_button(
            "Export CSV",
            data=challans_csv(desk.challans),
            file_name=report_filename("challans", "csv"),
            mime="text/csv",
            width="stretch",
        )
        df = pd.DataFrame(desk.challans).fillna("")
        st.dataframe(df, width="stretch", hide_index=True)
