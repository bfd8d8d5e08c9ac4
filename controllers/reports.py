# controllers/reports.py
# ════════════════════════════════════════════════════════════════════════════
#  PDF documents built from the read shapes of the core:
#  StatsAggregator.overview() and QuoteEngine.get(id).
# ════════════════════════════════════════════════════════════════════════════
import io
from datetime import datetime

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

MARGIN = 50


class _Writer:
    """Top-down text cursor over a reportlab canvas."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.width, self.height = A4
        self.y = self.height - MARGIN

    def text(self, value, size=12, font="Helvetica", align="left", gap=1.4):
        self.c.setFont(font, size)
        value = "" if value is None else str(value)
        if align == "center":
            self.c.drawCentredString(self.width / 2, self.y, value)
        else:
            self.c.drawString(MARGIN, self.y, value)
        self.y -= size * gap

    def heading(self, value, size=12):
        self.text(value, size=size, font="Helvetica-Bold")

    def move_down(self, lines=1):
        self.y -= 14 * lines


def _render(draw) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    draw(_Writer(c))
    c.showPage()
    c.save()
    return buf.getvalue()


def _euro(amount) -> str:
    return f"€ {float(amount or 0):.2f}"


# ── STATS OVERVIEW ────────────────────────────────────────────────────
def render_stats_pdf(stats: dict) -> bytes:
    def draw(w: _Writer):
        w.text("Report Statistiche FixPoint", size=20, font="Helvetica-Bold", align="center")
        w.move_down(2)
        w.text(f"Totale preventivi: {stats['total']}")
        w.text(f"Nuovi: {stats['new_count']}")
        w.text(f"Assegnati: {stats['assigned_count']}")
        w.text(f"Completati: {stats['done_count']}")
        w.move_down()
        w.text(f"Incasso totale: {_euro(stats['total_amount'])}", size=14)
        w.move_down(2)
        w.text(f"Generato il: {datetime.now().strftime('%d/%m/%Y %H:%M:%S')}", size=10)

    return _render(draw)


# ── SINGLE QUOTE ──────────────────────────────────────────────────────
def render_quote_pdf(quote: dict) -> bytes:
    def draw(w: _Writer):
        # header: the assigned fixpoint, if any
        w.heading(quote.get("fixpoint_name") or "FixPoint", size=18)
        for line in ("fixpoint_city", "fixpoint_address", "fixpoint_phone"):
            w.text(quote.get(line) or "", size=10)
        w.move_down()

        w.text(f"Preventivo #{quote['id']}", size=16, font="Helvetica-Bold", align="center")
        w.move_down(2)

        w.heading("Dati Cliente")
        w.text(f"Nome: {quote.get('customer_name') or ''}", size=10)
        w.text(f"Email: {quote.get('customer_email') or ''}", size=10)
        w.text(f"Città: {quote.get('city') or ''}", size=10)
        w.move_down()

        w.heading("Dispositivo")
        w.text(f"Modello: {quote.get('model') or ''}", size=10)
        w.text(f"Riparazioni: {quote.get('repair') or ''}", size=10)
        w.move_down()

        w.heading("Totale")
        w.text(_euro(quote.get("price")), size=14, font="Helvetica-Bold")
        w.move_down(2)

        w.text(f"Creato il: {quote.get('created_at') or ''}", size=9)
        w.move_down(3)
        w.text("Firma cliente: ____________________________", size=9)

    return _render(draw)
