import pandas as pd
import streamlit as st

from backend.site_settings import (
    ALERT_THRESHOLDS,
    FPS_RANGE,
    PERFORMANCE_SETTINGS,
    RESOLUTIONS,
    RETENTION_SETTINGS,
    add_camera,
    camera_status_counts,
    default_values,
    save_settings,
)
from views.common import badge, current_scope, get_catalog, kpi_card, page_header


def _number_inputs(settings, values, prefix):
    for setting in settings:
        value = st.number_input(
            setting.label,
            min_value=setting.minimum,
            max_value=setting.maximum,
            value=values[setting.key],
            step=1,
            key=f"{prefix}_{setting.key}",
        )
        values[setting.key] = setting.clamp(value)


def _cameras_tab(scope, catalog):
    cameras = scope.setdefault("cameras", catalog.records("cameras"))
    counts = camera_status_counts(cameras)
    c1, c2, c3 = st.columns(3)
    with c1:
        kpi_card("Cameras", str(len(cameras)))
    with c2:
        kpi_card("Online", str(counts["online"]), color="#4ade80")
    with c3:
        kpi_card("Offline", str(counts["offline"]), color="#f87171")

    for cam in cameras:
        color = "#4ade80" if cam["status"] == "online" else "#f87171"
        st.markdown(
            f"""
            <div class="nt-card nt-row">
                <div><b>{cam['id']} · {cam['name']}</b>
                    <div class="nt-muted">{cam['junction']} · {cam['resolution']} @ {cam['fps']} fps · {cam['last_ping']}</div>
                </div>
                <div>{badge(cam['status'].upper(), color)}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )

    junction_names = [j["name"] for j in catalog.records("site_junctions")]
    with st.expander("Add Camera"):
        with st.form("settings_add_camera", clear_on_submit=True):
            name = st.text_input("Camera Name")
            junction = st.selectbox("Junction", junction_names)
            ip = st.text_input("IP Address", placeholder="192.168.1.100")
            r1, r2 = st.columns(2)
            resolution = r1.selectbox("Resolution", list(RESOLUTIONS), format_func=lambda r: RESOLUTIONS[r])
            fps = r2.number_input("FPS", min_value=FPS_RANGE[0], max_value=FPS_RANGE[1], value=30, step=1)
            submitted = st.form_submit_button("Add Camera")
        if submitted:
            form = {"name": name, "junction": junction, "ip": ip, "resolution": resolution, "fps": fps}
            updated, errors = add_camera(cameras, form, junction_names)
            if errors:
                for error in errors:
                    st.error(error)
            else:
                scope.state["cameras"] = updated
                st.toast(f"Camera {updated[-1]['id']} added.")
                st.rerun()


def show():
    scope = current_scope()
    catalog = get_catalog()
    values = scope.setdefault("settings_values", default_values())

    page_header("System Settings", "Cameras, junctions, users, alerts and system configuration")

    tabs = st.tabs(["Cameras", "Junctions", "Users", "Alerts", "System"])
    with tabs[0]:
        _cameras_tab(scope, catalog)

    with tabs[1]:
        st.dataframe(pd.DataFrame(catalog.records("site_junctions")), width="stretch", hide_index=True)

    with tabs[2]:
        for user in catalog.records("users"):
            color = "#4ade80" if user["status"] == "active" else "#94a3b8"
            st.markdown(
                f"""
                <div class="nt-card nt-row">
                    <div><b>{user['name']}</b><div class="nt-muted">{user['email']} · last login {user['last_login']}</div></div>
                    <div>{badge(user['role'], '#22d3ee')} {badge(user['status'].title(), color)}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )

    with tabs[3]:
        rules = scope.setdefault("alert_rules", {r["key"]: r["enabled"] for r in catalog.records("alert_rules")})
        for rule in catalog.records("alert_rules"):
            rules[rule["key"]] = st.toggle(
                rule["title"],
                value=rules[rule["key"]],
                help=rule["description"],
                key=f"settings_rule_{rule['key']}",
            )
        st.markdown("#### Thresholds")
        _number_inputs(ALERT_THRESHOLDS, values, "settings_alert")

    with tabs[4]:
        left, right = st.columns(2)
        with left:
            st.markdown("#### Data Retention")
            _number_inputs(RETENTION_SETTINGS, values, "settings_retention")
        with right:
            st.markdown("#### Performance")
            _number_inputs(PERFORMANCE_SETTINGS, values, "settings_perf")
        st.markdown("#### API Integrations")
        for api in catalog.records("api_integrations"):
            st.markdown(f"- **{api['name']}**: {api['description']}")
        if st.button("Save Settings", key="settings_save_btn"):
            scope.state["settings_values"] = save_settings(values)
            st.toast("Settings saved. They apply until you leave this screen.")
