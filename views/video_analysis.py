import logging
import time

import streamlit as st

from backend import config
from backend.errors import InvalidUploadError
from backend.video_analysis import CONGESTION_COLORS, VideoAnalysis
from backend.video_loader import get_duration_seconds, get_first_frame, save_uploaded_video
from views.common import badge, current_scope, kpi_card, page_header

logger = logging.getLogger(__name__)


def _handle_upload(session: VideoAnalysis, uploaded_file):
    if not session.claim_upload(uploaded_file.name, uploaded_file.size):
        return
    try:
        path = save_uploaded_video(uploaded_file)
    except InvalidUploadError as exc:
        logger.warning("Rejected upload %s: %s", uploaded_file.name, exc)
        st.error(str(exc))
        return
    session.begin_upload(
        uploaded_file.name,
        uploaded_file.size,
        mime_type=uploaded_file.type,
        path=path,
        duration_seconds=get_duration_seconds(path),
    )
    bar = st.progress(0, text="Uploading...")
    while session.is_uploading():
        value = session.upload_progress()
        bar.progress(int(value), text=f"Uploading... {int(value)}%")
        time.sleep(config.UPLOAD_TICK_SECONDS)
    session.upload_progress()
    st.rerun()


@st.fragment(run_every=config.ANALYSIS_TICK_SECONDS)
def _detections_panel(session: VideoAnalysis):
    status = session.status()
    values = session.detections()
    if status == "running":
        analysis = session.analysis
        st.progress(analysis.progress(), text=f"AI analysis in progress... {analysis.remaining():.0f}s left")
    elif status == "complete":
        st.success("Analysis complete. Detection overlays enabled.")

    level = values["congestion_level"]
    st.markdown(
        f'<div class="nt-row"><b>Detection Results</b>{badge(level.title() + " congestion", CONGESTION_COLORS.get(level, "#94a3b8"))}</div>',
        unsafe_allow_html=True,
    )
    c1, c2, c3, c4, c5 = st.columns(5)
    with c1:
        kpi_card("Cars", str(values["cars"]))
    with c2:
        kpi_card("Trucks", str(values["trucks"]))
    with c3:
        kpi_card("Bikes", str(values["bikes"]))
    with c4:
        kpi_card("Pedestrians", str(values["pedestrians"]))
    with c5:
        kpi_card("Queue Length", f"{values['queue_length']} m", color="#facc15")
    if status == "complete":
        st.caption(f"Total vehicles detected: {values['total_vehicles']}")


def show():
    scope = current_scope()
    session = scope.setdefault("video_analysis", VideoAnalysis())

    page_header("AI Video Analysis", "Upload traffic footage for real-time AI vehicle detection")

    uploaded_file = st.file_uploader(
        "Upload a traffic video",
        type=list(config.VIDEO_EXTENSIONS),
        key=f"analysis_upload_{scope.state.get('uploader_round', 0)}",
    )
    if uploaded_file is None:
        session.release_upload()
    else:
        _handle_upload(session, uploaded_file)

    if not session.has_file():
        st.info("Select a video file (MP4, AVI, MKV, MOV, WMV) to begin.")
        return

    info = session.file
    left, right = st.columns([3, 2])
    with left:
        if info.get("path"):
            if session.show_overlays():
                frame = get_first_frame(info["path"])
                if frame is not None:
                    st.image(frame, caption="Detections overlay", width="stretch")
            st.video(info["path"])
    with right:
        st.markdown(
            f"""
            <div class="nt-card">
                <b>{info['name']}</b>
                <div class="nt-muted">Size: {info['size']} · Duration: {info['duration']}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )
        running = session.status() == "running"
        if st.button(
            "Analyzing..." if running else "Start AI Analysis",
            key="analysis_start_btn",
            width="stretch",
            disabled=running,
        ):
            session.start_analysis()
            st.rerun()
        if st.button("Remove Video", key="analysis_remove_btn", width="stretch"):
            session.remove()
            # A fresh widget key empties the uploader.
            scope.state["uploader_round"] = scope.state.get("uploader_round", 0) + 1
            st.rerun()

    _detections_panel(session)
