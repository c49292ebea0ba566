import streamlit as st

from backend.login import CREDENTIALS, LoginFlow
from views.common import current_scope, navigation


def _styled_message(message: str, kind: str = "success"):
    css_class = "msg-success" if kind == "success" else "msg-error"
    st.markdown(f'<div class="{css_class}">{message}</div>', unsafe_allow_html=True)


def show():
    nav = navigation()
    flow = current_scope().setdefault("login_flow", LoginFlow())

    st.markdown(
        """
        <style>
        .login-wrap {
            text-align: center;
            margin: 2rem 0 1rem 0;
        }
        .login-logo {
            width: 56px;
            height: 56px;
            margin: 0 auto 12px auto;
            border-radius: 14px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 24px;
            font-weight: 800;
            color: #ffffff;
            background: linear-gradient(135deg, #ec4899, #22d3ee);
            box-shadow: 0 0 24px rgba(236, 72, 153, 0.35);
        }
        .login-title {
            margin: 0;
            font-size: 32px;
            background: linear-gradient(90deg, #ec4899, #22d3ee);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
        }
        .login-sub {
            color: #94a3b8;
            margin: 6px 0 0 0;
            font-size: 14px;
        }
        .msg-error, .msg-success {
            border-radius: 12px;
            padding: 11px 14px;
            font-weight: 600;
            margin-top: 10px;
            border: 1px solid;
        }
        .msg-error {
            color: #ffe2e2;
            background: rgba(143, 24, 24, 0.42);
            border-color: rgba(255, 120, 120, 0.6);
        }
        .msg-success {
            color: #dcffe9;
            background: rgba(17, 102, 62, 0.42);
            border-color: rgba(103, 255, 179, 0.55);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )

    subtitle = "AI Traffic Control System" if flow.step == CREDENTIALS else "Enter verification code"
    st.markdown(
        f"""
        <div class="login-wrap">
            <div class="login-logo">N</div>
            <h1 class="login-title">Netra Admin</h1>
            <p class="login-sub">{subtitle}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        if flow.step == CREDENTIALS:
            with st.form("login_credentials_form"):
                username = st.text_input("Username", placeholder="Enter your username")
                show_password = st.toggle("Show Password", key="login_pass_show")
                password = st.text_input(
                    "Password",
                    type="default" if show_password else "password",
                    placeholder="Enter your password",
                )
                submitted = st.form_submit_button("Continue", width="stretch")
            if submitted:
                if flow.submit_credentials(username, password):
                    st.rerun()
        else:
            st.caption(f"A verification code was sent to the registered device for **{flow.username}**.")
            with st.form("login_otp_form"):
                otp = st.text_input("Verification Code", placeholder="Enter 6-digit code", max_chars=6)
                submitted = st.form_submit_button("Verify & Sign In", width="stretch")
            if submitted:
                if flow.submit_otp(otp):
                    nav.login()
                    st.rerun()
            if st.button("Use different credentials", key="login_restart_btn", width="stretch"):
                flow.restart()
                st.rerun()

        if flow.error:
            _styled_message(flow.error, kind="error")

        if st.button("Back to Landing", key="login_back_btn", width="stretch"):
            nav.back_to_landing()
            st.rerun()
