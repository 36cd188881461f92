from __future__ import annotations

import json
import logging
from typing import Any, MutableMapping, Optional

from ..common.validators import require_non_empty
from ..core.constants import AUTH_TOKEN_KEY, USER_DATA_KEY
from ..core.enums import SubAdminRole
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from .model import AdminProfile, AuthSession, SubAdmin
from .repository import AuthRepository

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Login failed due to an unexpected error."


def store_session(session: MutableMapping[str, Any], auth: AuthSession) -> None:
    """Persist the login the same way the browser app used localStorage."""
    session[AUTH_TOKEN_KEY] = auth.token
    session[USER_DATA_KEY] = json.dumps(auth.profile.to_payload())


def clear_session(session: MutableMapping[str, Any]) -> None:
    session.pop(AUTH_TOKEN_KEY, None)
    session.pop(USER_DATA_KEY, None)


def load_session(session: MutableMapping[str, Any]) -> Optional[AuthSession]:
    """Rehydrate the login from the session; corrupt data counts as logged out."""
    token = session.get(AUTH_TOKEN_KEY)
    raw = session.get(USER_DATA_KEY)
    if not token or not raw:
        return None

    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Failed to parse admin data from session")
        return None
    if not isinstance(payload, dict):
        return None

    return AuthSession(token=str(token), profile=AdminProfile.from_payload(payload))


def current_admin_id(session: MutableMapping[str, Any]) -> Optional[str]:
    auth = load_session(session)
    if auth is None or auth.profile.id in (None, ""):
        return None
    return str(auth.profile.id)


class AuthService:
    """Use case: admin login/logout."""

    def __init__(self, repo: AuthRepository):
        self._repo = repo

    def login(self, email: str, password: str) -> AuthSession:
        email = (email or "").strip()
        if not email or not password:
            raise AuthenticationError("Email and password are required")

        try:
            data = self._repo.login(email=email, password=password)
        except ApiError as e:
            raise AuthenticationError(e.backend_message or LOGIN_FAILED) from e

        token = data.get("token")
        if not token:
            raise AuthenticationError(data.get("message") or LOGIN_FAILED)

        return AuthSession(token=str(token), profile=AdminProfile.from_payload(data.get("tokenPayload")))

    def logout(self, session: MutableMapping[str, Any]) -> None:
        clear_session(session)


class SubAdminService:
    """Use case: create sub-admin accounts (SHO / CO / ASP)."""

    def __init__(self, repo: AuthRepository):
        self._repo = repo

    def create(self, *, name: str, role: str, mobile_no: str, password: str, token: Optional[str] = None) -> bool:
        try:
            role_e = SubAdminRole(role)
        except ValueError:
            raise ValidationError("Please select a role")

        sub_admin = SubAdmin(
            name=require_non_empty(name, "Name"),
            role=role_e,
            mobile_no=require_non_empty(mobile_no, "Mobile No"),
            password=require_non_empty(password, "Password"),
        )
        data = self._repo.create_sub_admin(sub_admin.to_body(), token=token)
        return bool(data.get("success"))
