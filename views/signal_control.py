import streamlit as st

from backend import config
from backend.signal_control import MODE_LABELS, PHASE_LIMITS, ControlMode, SignalPanel, mode_color
from views.common import badge, current_scope, get_catalog, kpi_card, page_header, run_timed

PHASE_LABELS = {
    "north_south": "North-South Green",
    "east_west": "East-West Green",
    "pedestrian": "Pedestrian Crossing",
}


def show():
    scope = current_scope()
    catalog = get_catalog()
    panel = scope.setdefault("signal_panel", SignalPanel(catalog.records("signal_junctions")))
    simulation = scope.action("simulation", config.OPTIMIZATION_SECONDS)

    head_left, head_right = st.columns([4, 1])
    with head_left:
        page_header("Signal Control Center", "AI-driven and manual control of junction signal timing")
    with head_right:
        st.write("")
        if panel.emergency:
            st.markdown(badge("EMERGENCY OVERRIDE", "#f87171"), unsafe_allow_html=True)

    modes = list(ControlMode)
    mode = st.radio(
        "Global control mode",
        modes,
        index=modes.index(panel.global_mode),
        format_func=lambda m: MODE_LABELS[m],
        horizontal=True,
        key="signal_global_mode",
    )
    if mode != panel.global_mode:
        panel.set_global_mode(mode)

    left, right = st.columns([2, 3])
    with left:
        st.markdown("### Junctions")
        for junction in panel.junctions:
            selected = junction["id"] == panel.selected_id
            label = f"{'▶ ' if selected else ''}{junction['name']}"
            if st.button(label, key=f"signal_junction_{junction['id']}", width="stretch"):
                panel.select(junction["id"])
                st.rerun()
            st.markdown(
                f"{badge(MODE_LABELS[ControlMode(junction['mode'])], mode_color(junction['mode']))} "
                f"{badge(junction['status'].title(), '#4ade80' if junction['status'] == 'active' else '#facc15')}",
                unsafe_allow_html=True,
            )

    with right:
        junction = panel.selected
        st.markdown(f"### Timing · {junction['name'] if junction else 'No junction'}")
        manual = panel.manual_enabled()
        if not manual:
            st.info("This junction is under AI control. Switch it to manual or scheduled mode to edit timings.")
        for name, limit in PHASE_LIMITS.items():
            value = st.slider(
                PHASE_LABELS[name],
                min_value=limit.minimum,
                max_value=limit.maximum,
                step=limit.step,
                value=panel.phases[name],
                disabled=not manual,
                key=f"signal_phase_{name}",
            )
            if value != panel.phases[name]:
                panel.set_phase(name, value)

        c1, c2 = st.columns(2)
        with c1:
            kpi_card("Cycle Length", f"{panel.cycle_length}s", "sum of all phases")
        with c2:
            kpi_card(
                "Emergency",
                "Active" if panel.emergency else "Standby",
                "all approaches held red" if panel.emergency else "preemption ready",
                "#f87171" if panel.emergency else "#4ade80",
            )

        b1, b2 = st.columns(2)
        if b1.button(
            "Deactivate Emergency" if panel.emergency else "Emergency Override",
            key="signal_emergency_btn",
            width="stretch",
        ):
            panel.toggle_emergency()
            st.rerun()
        if b2.button(
            "Simulating..." if simulation.is_running() else "Run AI Simulation",
            key="signal_simulate_btn",
            width="stretch",
            disabled=simulation.is_running(),
        ):
            run_timed(simulation, "Simulating timing plan...")
        if simulation.is_complete():
            st.success(f"Simulation complete: {panel.cycle_length}s cycle validated for {junction['name'] if junction else 'network'}.")

    st.markdown("### Corridor Coordination")
    for corridor in catalog.records("corridors"):
        c1, c2 = st.columns([4, 1])
        c1.markdown(f"**{corridor['name']}**  \n{corridor['junctions']} junctions")
        active = c2.toggle(
            "Green wave",
            value=panel.corridor_active(corridor),
            key=f"signal_corridor_{corridor['id']}",
        )
        if active != panel.corridor_active(corridor):
            panel.set_corridor(corridor, active)
