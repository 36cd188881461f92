from __future__ import annotations

import io
import logging

from flask import Flask, flash, g, redirect, render_template, request, send_file, url_for

from ..common.decorators import login_required
from ..common.validators import latitude_error, longitude_error
from ..core.exceptions import ApiError, ValidationError
from ..container import Container
from .importer import read_location_rows
from .model import QRLocation
from .render import pdf_with_qr_codes, qr_data_url, qr_png
from .service import build_location
from .table import format_value, row_key, to_title_case, visible_columns

logger = logging.getLogger(__name__)

EXCLUDED_COLUMNS = ["createdAt", "id"]


def register(app: Flask, container: Container) -> None:
    app.jinja_env.filters["title_case"] = to_title_case
    app.jinja_env.filters["cell"] = format_value

    @app.route("/generate-qr", methods=["GET", "POST"], endpoint="generate_qr")
    @login_required
    def generate_qr():
        form = {"lat": "", "long": "", "policeStation": "", "cug": "", "dutyPoint": ""}
        errors: dict[str, str] = {}
        url = None
        image_url = None
        address = None

        if request.method == "POST":
            form = {k: request.form.get(k, "").strip() for k in form}
            errors = {"lat": latitude_error(form["lat"]), "long": longitude_error(form["long"])}
            try:
                location = build_location(
                    latitude=form["lat"],
                    longitude=form["long"],
                    police_station=form["policeStation"],
                    duty_point=form["dutyPoint"],
                    cug=form["cug"],
                )
                address = container.geocoder.address_for(location.latitude, location.longitude)
                url = qr_data_url(location)
                image_url = url_for(
                    "qr_image", **{k: v for k, v in location.to_body().items() if v not in (None, "")}
                )
                container.qr_service.create(location, token=g.auth.token)
                flash("Single QR code generated successfully!", "success")
            except ValidationError as e:
                flash(str(e), "warning")
            except ApiError as e:
                flash(f"Failed to generate QR code: {e}", "danger")
            except Exception:
                logger.exception("Failed to generate QR code")
                flash("Failed to generate QR code.", "danger")

        return render_template(
            "generate_qr.html",
            form=form,
            errors=errors,
            url=url,
            image_url=image_url,
            address=address,
            active_page="generate_qr",
        )

    @app.route("/generate-qr/upload", methods=["POST"], endpoint="upload_qr")
    @login_required
    def upload_qr():
        upload = request.files.get("file")
        if not upload or not upload.filename:
            flash("Please select an Excel file.", "warning")
            return redirect(url_for("generate_qr"))

        try:
            rows = read_location_rows(upload.stream, upload.filename)
            container.qr_service.create_bulk(rows, token=g.auth.token)
            flash(f"Successfully processed {len(rows)} entries.", "success")
        except ValidationError as e:
            flash(f"Error: {e}", "danger")
        except ApiError as e:
            flash(f"Upload failed: {e}", "danger")
        except Exception:
            logger.exception("Excel processing error")
            flash("Error: An unknown error occurred during processing.", "danger")

        return redirect(url_for("generate_qr"))

    @app.route("/qr/image", endpoint="qr_image")
    @login_required
    def qr_image():
        location = QRLocation.from_item(request.args.to_dict())
        return send_file(io.BytesIO(qr_png(location)), mimetype="image/png")

    def _indexed_rows():
        # keys are computed against the unfiltered list so they stay stable across searches
        items = container.qr_service.cached_all
        return [(row_key(item, i), item) for i, item in enumerate(items)]

    @app.route("/dashboard/qr-code", endpoint="qr_codes")
    @login_required
    def qr_codes():
        term = request.args.get("q", "")
        if container.qr_service.get_all(token=g.auth.token) is None:
            flash("Error fetching QR codes", "danger")

        indexed = _indexed_rows()
        matching = {id(item) for item in container.qr_service.search_by_station([i for _, i in indexed], term)}
        rows = [(key, item) for key, item in indexed if id(item) in matching]
        rows.reverse()

        return render_template(
            "qr_codes.html",
            rows=rows,
            columns=visible_columns([item for _, item in rows], EXCLUDED_COLUMNS),
            total=len(indexed),
            term=term,
            active_page="qr_codes",
        )

    @app.route("/dashboard/qr-code/pdf", methods=["POST"], endpoint="qr_codes_pdf")
    @login_required
    def qr_codes_pdf():
        selected = request.form.getlist("selected")
        if not selected:
            flash("Please select at least one row to generate a QR code.", "warning")
            return redirect(url_for("qr_codes", q=request.form.get("q", "")))

        if container.qr_service.get_all(token=g.auth.token) is None:
            flash("Error fetching QR codes", "danger")
            return redirect(url_for("qr_codes", q=request.form.get("q", "")))

        locations = container.qr_service.locations_for(selected)
        try:
            pdf = pdf_with_qr_codes(locations)
        except Exception:
            logger.exception("PDF generation failed")
            flash("Could not generate PDF.", "danger")
            return redirect(url_for("qr_codes"))

        return send_file(
            io.BytesIO(pdf),
            mimetype="application/pdf",
            as_attachment=True,
            download_name="selected-qr-codes.pdf",
        )

    @app.route("/dashboard/qr-code/delete", methods=["POST"], endpoint="qr_codes_delete")
    @login_required
    def qr_codes_delete():
        selected = request.form.getlist("selected")
        if not selected:
            flash("Please select at least one row to delete.", "warning")
        elif container.qr_service.get_all(token=g.auth.token) is None:
            flash("Error fetching QR codes", "danger")
        else:
            summary = container.qr_service.delete_many(selected, token=g.auth.token)
            flash(summary.message, "danger" if summary.failed else "success")
        return redirect(url_for("qr_codes", q=request.form.get("q", "")))
