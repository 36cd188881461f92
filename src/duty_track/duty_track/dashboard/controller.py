from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.datetime_utils import parse_iso_date
from ..auth.service import current_admin_id
from ..common.decorators import login_required
from ..container import Container
from .filters import apply_filters, unique_police_stations
from .model import TIME_PHASES, ScanFilter, phase_by_label


def _date_arg(name: str) -> Optional[date]:
    value = request.args.get(name, "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        flash(f"Ignoring invalid date: {value}", "warning")
        return None


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        return redirect(url_for("dashboard_user"))

    @app.route("/dashboard/user", endpoint="dashboard_user")
    @login_required
    def dashboard_user():
        scan_filter = ScanFilter(
            start_date=_date_arg("start_date"),
            end_date=_date_arg("end_date"),
            time_phase=phase_by_label(request.args.get("time_phase")),
            police_station=request.args.get("police_station", ""),
            search=request.args.get("q", ""),
        )

        data = container.dashboard_service.load(current_admin_id(session), token=g.auth.token)
        if data.error:
            flash(data.error, "danger")

        persons = apply_filters(data.persons, data.qr_map, scan_filter)
        persons.reverse()
        rows = container.dashboard_service.build_rows(persons, data.qr_map, data.address_map)

        return render_template(
            "dashboard_user.html",
            rows=rows,
            stations=unique_police_stations(data.qr_map),
            time_phases=TIME_PHASES,
            args=request.args,
            active_page="dashboard",
        )

    @app.route("/users", endpoint="users")
    @login_required
    def users():
        data = container.dashboard_service.load(current_admin_id(session), token=g.auth.token)
        if data.error:
            flash(data.error, "danger")

        rows = container.dashboard_service.build_rows(data.persons, data.qr_map, data.address_map)
        return render_template("users.html", rows=rows, active_page="users")
