"""Two-step admin sign-in.

Any non-empty username and password move the form to the verification step
and any non-empty code completes it. This is a demo gate, not a security
boundary: nothing is checked against a user store.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

CREDENTIALS = "credentials"
OTP = "otp"


class LoginFlow:
    def __init__(self):
        self.step = CREDENTIALS
        self.username: Optional[str] = None
        self.error: Optional[str] = None

    def submit_credentials(self, username: str, password: str) -> bool:
        username = (username or "").strip()
        if not username or not password:
            self.error = "Enter both username and password"
            return False
        self.username = username
        self.step = OTP
        self.error = None
        logger.info("Credentials accepted for %s, awaiting verification code", username)
        return True

    def submit_otp(self, otp: str) -> bool:
        if self.step != OTP:
            self.error = "Enter your credentials first"
            return False
        if not (otp or "").strip():
            self.error = "Enter the verification code"
            return False
        self.error = None
        logger.info("Verification code accepted for %s", self.username)
        return True

    def restart(self):
        self.step = CREDENTIALS
        self.username = None
        self.error = None
