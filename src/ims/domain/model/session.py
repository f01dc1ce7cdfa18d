"""Operator session.

The session is an explicit object handed to every mutating store
call, so the access requirement is visible at each call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionState(Enum):
    LOGGED_OUT = "LOGGED_OUT"
    LOGGED_IN = "LOGGED_IN"


@dataclass
class Session:
    state: SessionState = SessionState.LOGGED_OUT

    @property
    def authenticated(self) -> bool:
        return self.state == SessionState.LOGGED_IN

    def login(self) -> None:
        """Transition LOGGED_OUT|LOGGED_IN -> LOGGED_IN.

        Only the access gate should call this, after a successful
        credential check.
        """
        self.state = SessionState.LOGGED_IN

    def logout(self) -> None:
        self.state = SessionState.LOGGED_OUT
