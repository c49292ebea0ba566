import streamlit as st

from views.common import current_scope, get_catalog, navigation, page_header


def show():
    nav = navigation()
    scope = current_scope()
    videos = get_catalog().records("demo_videos")

    if st.button("Back to Landing", key="demo_back_btn"):
        nav.back_to_landing()
        st.rerun()

    page_header("Netra AI Demo Videos", "Watch our AI traffic management system in action")

    selected = scope.state.get("selected_video")
    cols = st.columns(len(videos)) if videos else []
    for col, video in zip(cols, videos):
        with col:
            with st.container(border=True):
                st.image(video["thumbnail"], width="stretch")
                st.markdown(f"**{video['title']}**")
                st.caption(f"{video['description']} · {video['duration']}")
                label = "Playing" if selected == video["id"] else "Play Demo"
                if st.button(label, key=f"demo_play_{video['id']}", width="stretch"):
                    scope.state["selected_video"] = video["id"]
                    st.rerun()

    if selected:
        video = next((v for v in videos if v["id"] == selected), None)
        if video is not None:
            st.markdown(f"### Now playing: {video['title']}")
            st.info("Demo footage is not bundled with this build. Upload your own clip from the AI Video Analysis screen after signing in.")

    st.markdown("---")
    st.markdown("#### Want to try it with your own footage?")
    if st.button("Admin Login", key="demo_login_btn"):
        nav.navigate_to_login()
        st.rerun()
