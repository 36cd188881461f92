"""QR image and printable PDF rendering."""
from __future__ import annotations

import base64
import io
import logging
from typing import Iterable

import qrcode
from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..core.constants import QR_IMAGE_WIDTH, QR_MARGIN
from .model import QRLocation

logger = logging.getLogger(__name__)

PDF_COLUMNS = 3
PDF_ROWS = 4
PDF_MARGIN = 12 * mm
PDF_LABEL_HEIGHT = 16 * mm


def qr_image(location: QRLocation, *, width: int = QR_IMAGE_WIDTH) -> Image.Image:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=10,
        border=QR_MARGIN,
    )
    qr.add_data(location.to_json())
    qr.make(fit=True)

    buf = io.BytesIO()
    qr.make_image(fill_color="black", back_color="white").save(buf)
    buf.seek(0)
    return Image.open(buf).convert("RGB").resize((width, width), Image.NEAREST)


def qr_png(location: QRLocation) -> bytes:
    buf = io.BytesIO()
    qr_image(location).save(buf, format="PNG")
    return buf.getvalue()


def qr_data_url(location: QRLocation) -> str:
    encoded = base64.b64encode(qr_png(location)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def pdf_with_qr_codes(locations: Iterable[QRLocation], *, title: str = "Duty Point QR Codes") -> bytes:
    """Lay the QR codes out on A4 pages, three across and four down.

    Each code is captioned with its police station, duty point and coordinates.
    """
    locations = list(locations)
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=A4)
    pdf.setTitle(title)

    page_w, page_h = A4
    cell_w = (page_w - 2 * PDF_MARGIN) / PDF_COLUMNS
    cell_h = (page_h - 2 * PDF_MARGIN) / PDF_ROWS
    size = min(cell_w, cell_h - PDF_LABEL_HEIGHT) - 4 * mm
    per_page = PDF_COLUMNS * PDF_ROWS

    for index, location in enumerate(locations):
        slot = index % per_page
        if index and slot == 0:
            pdf.showPage()

        col, row = slot % PDF_COLUMNS, slot // PDF_COLUMNS
        x = PDF_MARGIN + col * cell_w
        top = page_h - PDF_MARGIN - row * cell_h
        img_x = x + (cell_w - size) / 2
        img_y = top - size

        pdf.drawImage(ImageReader(qr_image(location)), img_x, img_y, width=size, height=size)

        center = x + cell_w / 2
        pdf.setFont("Helvetica-Bold", 9)
        pdf.drawCentredString(center, img_y - 4 * mm, location.police_station or "-")
        pdf.setFont("Helvetica", 8)
        pdf.drawCentredString(center, img_y - 8 * mm, location.duty_point or "-")
        pdf.drawCentredString(center, img_y - 12 * mm, f"{location.latitude}, {location.longitude}")

    if not locations:
        pdf.setFont("Helvetica", 10)
        pdf.drawString(PDF_MARGIN, page_h - PDF_MARGIN, "No QR codes selected.")

    pdf.save()
    logger.info("Rendered PDF with %d QR code(s)", len(locations))
    return buf.getvalue()
