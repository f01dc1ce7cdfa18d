"""Domain service: Access Gate.

A single-role gate in front of the store's mutating operations.  How a
submitted password is checked is injected as a plain callable, so the
plaintext comparison used today can be replaced without touching the
store or the shell.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ims.domain.model.session import Session

logger = logging.getLogger(__name__)

CredentialCheck = Callable[[str], bool]


def plaintext_credential(expected: str) -> CredentialCheck:
    """Return a check that compares the submission to *expected* verbatim."""

    def check(submitted: str) -> bool:
        return submitted == expected

    return check


class AccessGate:

    def __init__(self, credential_check: CredentialCheck) -> None:
        self._credential_check = credential_check

    def authenticate(self, session: Session, submitted_password: str) -> bool:
        """Log the session in if the password checks out.

        A failed attempt leaves the session exactly as it was.
        """
        if not self._credential_check(submitted_password):
            logger.info("Authentication failed")
            return False
        session.login()
        logger.info("Authentication succeeded")
        return True

    def logout(self, session: Session) -> None:
        session.logout()
        logger.info("Session logged out")
