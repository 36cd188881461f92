from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.decorators import login_required
from ..core.enums import SubAdminRole
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from ..container import Container
from .service import load_session, store_session

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_admin():
        auth = load_session(session)
        return {"current_admin": auth.profile if auth else None}

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if load_session(session) is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                auth = container.auth_service.login(email, password)
                session.permanent = True
                store_session(session, auth)
                flash("Logged in successfully!", "success")
                return redirect(url_for("generate_qr"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Unexpected error during login")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error while logging in: {e}", "danger")
                else:
                    flash("System error while logging in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        container.auth_service.logout(session)
        flash("Logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/add-subadmin", methods=["GET", "POST"], endpoint="add_subadmin")
    @login_required
    def add_subadmin():
        form = {"name": "", "role": "", "mobile": ""}
        if request.method == "POST":
            form = {k: request.form.get(k, "") for k in form}
            try:
                created = container.sub_admin_service.create(
                    name=form["name"],
                    role=form["role"],
                    mobile_no=form["mobile"],
                    password=request.form.get("password", ""),
                    token=g.auth.token,
                )
                if created:
                    flash("subAdmin Created", "success")
                    return redirect(url_for("add_subadmin"))
                flash("Sub admin was not created", "warning")
            except (ValidationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error creating sub admin")
                flash("System error while creating sub admin", "danger")

        return render_template(
            "add_subadmin.html",
            form=form,
            roles=list(SubAdminRole),
            active_page="add_subadmin",
        )
