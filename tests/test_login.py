from __future__ import annotations

from backend.login import CREDENTIALS, OTP, LoginFlow


def test_two_step_sign_in() -> None:
    flow = LoginFlow()
    assert flow.step == CREDENTIALS
    assert flow.submit_credentials("operator", "secret")
    assert flow.step == OTP
    assert flow.username == "operator"
    assert flow.submit_otp("123456")
    assert flow.error is None


def test_empty_credentials_show_error() -> None:
    flow = LoginFlow()
    assert not flow.submit_credentials("  ", "secret")
    assert flow.error
    assert not flow.submit_credentials("operator", "")
    assert flow.step == CREDENTIALS


def test_otp_requires_credentials_first() -> None:
    flow = LoginFlow()
    assert not flow.submit_otp("123456")
    assert flow.step == CREDENTIALS


def test_empty_otp_rejected() -> None:
    flow = LoginFlow()
    flow.submit_credentials("operator", "secret")
    assert not flow.submit_otp("   ")
    assert flow.error == "Enter the verification code"


def test_restart() -> None:
    flow = LoginFlow()
    flow.submit_credentials("operator", "secret")
    flow.restart()
    assert flow.step == CREDENTIALS
    assert flow.username is None
