from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..auth.service import current_admin_id
from ..common.decorators import login_required
from ..core.constants import CO_OPTIONS, POLICE_STATIONS_BY_CO
from ..core.exceptions import ApiError, AuthorizationError, ValidationError
from ..container import Container
from .importer import read_person_rows

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _render(form: dict):
        return render_template(
            "add_users.html",
            form=form,
            co_options=CO_OPTIONS,
            stations_by_co=POLICE_STATIONS_BY_CO,
            active_page="add_users",
        )

    @app.route("/add-users", methods=["GET", "POST"], endpoint="add_users")
    @login_required
    def add_users():
        form = {"name": "", "pnoNo": "", "co": "", "policeStation": ""}
        if request.method == "GET":
            return _render(form)

        form = {k: request.form.get(k, "") for k in form}
        stations = {value for value, _ in POLICE_STATIONS_BY_CO.get(form["co"], [])}
        try:
            if form["policeStation"] and form["policeStation"] not in stations:
                raise ValidationError("Select a police station under the chosen CO.")

            outcome = container.person_service.create_person(
                current_admin_id(session),
                name=form["name"],
                pno_no=form["pnoNo"],
                password=request.form.get("password", ""),
                co=form["co"],
                police_station=form["policeStation"],
                token=g.auth.token,
            )
            flash(outcome.message, "success")
            return redirect(url_for("add_users"))
        except (ValidationError, AuthorizationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Unexpected error creating user")
            flash("Failed to create user.", "danger")

        return _render(form)

    @app.route("/add-users/upload", methods=["POST"], endpoint="upload_users")
    @login_required
    def upload_users():
        upload = request.files.get("file")
        if not upload or not upload.filename:
            flash("Please select a file first.", "warning")
            return redirect(url_for("add_users"))

        try:
            rows = read_person_rows(upload.stream, upload.filename)
            outcome = container.person_service.create_bulk(current_admin_id(session), rows, token=g.auth.token)
            flash(outcome.message, "success")
            if outcome.failed:
                flash(f"Failed to create {outcome.failed} user(s). Check the server log for details.", "danger")
        except (ValidationError, AuthorizationError) as e:
            flash(f"Error processing file: {e}", "danger")
        except ApiError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Bulk upload error")
            flash("Failed to perform bulk upload.", "danger")

        return redirect(url_for("add_users"))
