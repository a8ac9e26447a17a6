"""
Placeholder login check against a single configured credential pair.

This is not an authentication boundary: there are no sessions, tokens,
lockout or rate limiting. A real deployment must replace it.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


def check_credentials(username: str, password: str, expected: Credentials) -> bool:
    user_ok = hmac.compare_digest(username.encode("utf-8"), expected.username.encode("utf-8"))
    pass_ok = hmac.compare_digest(password.encode("utf-8"), expected.password.encode("utf-8"))
    ok = user_ok and pass_ok
    if ok:
        logger.info("Login succeeded for %r", username)
    else:
        logger.info("Login failed for %r", username)
    return ok
