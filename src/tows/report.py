"""PDF report with both exported images, built with reportlab."""

from io import BytesIO

from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

MARGIN = 40


def _draw_page(c: canvas.Canvas, heading: str, png: bytes) -> None:
    width, height = landscape(A4)
    c.setFont("Helvetica-Bold", 14)
    c.drawString(MARGIN, height - MARGIN, heading[:120])

    img = ImageReader(BytesIO(png))
    iw, ih = img.getSize()
    max_w = width - 2 * MARGIN
    max_h = height - 3 * MARGIN
    scale = min(max_w / iw, max_h / ih)
    c.drawImage(img, MARGIN, MARGIN, width=iw * scale, height=ih * scale)
    c.showPage()


def build_pdf_report(title: str, swot_png: bytes, matrix_png: bytes = b"") -> bytes:
    """
    One landscape A4 page per image. The matrix page is skipped when
    ``matrix_png`` is empty.
    """
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=landscape(A4))
    c.setTitle(title or "SWOT")

    _draw_page(c, f"SWOT – {title or 'Analysis'}", swot_png)
    if matrix_png:
        _draw_page(c, "Confrontation Matrix (TOWS)", matrix_png)

    c.save()
    return buf.getvalue()
