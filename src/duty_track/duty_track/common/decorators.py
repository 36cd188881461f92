from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, session, url_for

from ..auth.service import load_session


def login_required(view):
    """Rehydrate the admin login into ``g.auth`` or bounce to the login page."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = load_session(session)
        if auth is None:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        g.auth = auth
        return view(*args, **kwargs)

    return wrapper
