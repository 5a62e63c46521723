# src/ui/session.py
"""
Session guard.

The browser session holds two entries:
  - TOKEN_KEY: the bearer token returned by /auth/login
  - USER_KEY:  the JSON-serialized user record {email, role, ...}
Both are written at login and cleared together at logout (or on a 401).
Per-page state (lists, filters, pending actions, cached profile) lives under
"<page>.<part>" keys and belongs to the signed-in user: it is dropped at
login and at logout so the next user never sees it.

Pages never read these keys directly: they call require_session() /
optional_session() once when mounted and keep the returned SessionContext
for the rest of the run.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, MutableMapping, Optional

from pydantic import ValidationError

from src.schemas.entities import ROLES, SessionUser
from src.ui.routes import LOGIN

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"
PAGE_STATE_SUFFIXES = (".list", ".feed", ".reported", ".filters", ".actions", ".profile")


class AuthError(Exception):
    """Raised by the guard; carries the page the user must be sent to."""

    def __init__(self, redirect_to: str, reason: str = ""):
        super().__init__(reason or redirect_to)
        self.redirect_to = redirect_to


class AuthMissing(AuthError):
    pass


class AuthForbidden(AuthError):
    pass


@dataclass(frozen=True)
class SessionContext:
    user: SessionUser
    token: Optional[str] = None

    @property
    def role(self) -> str:
        return self.user.role


def store_session(store: MutableMapping, token: str, user: Dict[str, Any]):
    clear_page_state(store)
    store[TOKEN_KEY] = token
    store[USER_KEY] = json.dumps(user)


def clear_page_state(store: MutableMapping):
    """Drop every page-scoped entry (and pending confirmations)."""
    stale = [
        k
        for k in list(store.keys())
        if isinstance(k, str) and (k.endswith(PAGE_STATE_SUFFIXES) or k.startswith("confirm_"))
    ]
    for k in stale:
        store.pop(k, None)


def clear_session(store: MutableMapping):
    for k in (TOKEN_KEY, USER_KEY):
        store.pop(k, None)


def read_session(store: MutableMapping) -> SessionContext:
    """
    Parse the stored user record.
    Malformed JSON, a non-object record or a missing/unknown role are all
    treated the same as no session at all.
    """
    raw = store.get(USER_KEY)
    if not raw:
        raise AuthMissing(LOGIN, "no session")
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except ValueError:
        logger.warning("Discarding unparsable session record")
        raise AuthMissing(LOGIN, "malformed session")
    if not isinstance(data, dict) or data.get("role") not in ROLES:
        logger.warning("Discarding session record without a valid role")
        raise AuthMissing(LOGIN, "malformed session")
    try:
        user = SessionUser.model_validate(data)
    except ValidationError:
        raise AuthMissing(LOGIN, "malformed session")
    return SessionContext(user=user, token=store.get(TOKEN_KEY))


def require_session(
    store: MutableMapping, role: Optional[str] = None, *, forbidden_to: str = LOGIN
) -> SessionContext:
    ctx = read_session(store)
    if role and ctx.role != role:
        raise AuthForbidden(forbidden_to, f"role {ctx.role!r} is not {role!r}")
    return ctx


def optional_session(store: MutableMapping) -> Optional[SessionContext]:
    try:
        return read_session(store)
    except AuthMissing:
        return None
