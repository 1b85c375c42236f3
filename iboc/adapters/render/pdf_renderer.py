"""
PDF reports: the volunteer roster of an event and the reconciled
transactions report. Both are A4 documents with a navy header band drawn on
the canvas and platypus flowables for the body.
"""

from datetime import date, datetime
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor, white
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from iboc.domain.defaults import ROSTER_QUOTE, ROSTER_QUOTE_AUTHOR
from iboc.domain.entities import ChurchEvent, Transaction
from iboc.domain.formatting import format_date, format_datetime, format_money, safe_file_stem

# ---------------------------------------------------------------------------
# Palette and fonts
# ---------------------------------------------------------------------------
NAVY = HexColor("#0a1827")
GOLD = HexColor("#c5a059")
BODY_COLOR = HexColor("#000000")
MUTED = HexColor("#505050")
RULE_COLOR = HexColor("#dcdcdc")
FOOTER_COLOR = HexColor("#969696")
INCOME_COLOR = HexColor("#008000")
EXPENSE_COLOR = HexColor("#c80000")

BODY_FONT = "Helvetica"
BODY_FONT_BOLD = "Helvetica-Bold"
QUOTE_FONT = "Helvetica-Oblique"

PAGE_W, PAGE_H = A4
MARGIN = 14 * mm
USABLE_WIDTH = PAGE_W - 2 * MARGIN

EMPTY_ROSTER = "Nenhum voluntário escalado para este evento até o momento."


def _style(name, **kw):
    defaults = dict(fontName=BODY_FONT, fontSize=11, leading=15, textColor=BODY_COLOR)
    defaults.update(kw)
    return ParagraphStyle(name, **defaults)


INFO_STYLE = _style("Info")
CELL_STYLE = _style("Cell", fontSize=8, leading=10)
EMPTY_STYLE = _style("Empty", fontName=QUOTE_FONT, textColor=MUTED, alignment=TA_CENTER)
TOTALS_STYLE = _style("Totals", fontSize=10, leading=14)


def roster_filename(event: ChurchEvent) -> str:
    return f"Escala_{safe_file_stem(event.title)}.pdf"


def report_filename(start: date, end: date) -> str:
    return f"Conferidos_{start.isoformat()}_{end.isoformat()}.pdf"


class PdfReportRenderer:
    def __init__(self, church_name: str):
        self.church_name = church_name

    # --- Roster ---

    def render_roster(self, event: ChurchEvent, generated_at: datetime) -> bytes:
        buf = BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=55 * mm,
            bottomMargin=45 * mm,
            title=f"Escala - {event.title}",
        )

        story = [
            Paragraph(f"<b>Evento:</b> {escape(event.title)}", INFO_STYLE),
            Paragraph(f"<b>Data:</b> {format_datetime(event.start)}", INFO_STYLE),
            Paragraph(f"<b>Local:</b> {escape(event.location or '-')}", INFO_STYLE),
            Spacer(1, 8 * mm),
        ]

        if event.roster:
            rows = [["Função / Ministério", "Voluntário Responsável"]]
            rows += [[r.role.upper(), r.member_name] for r in event.roster]
            table = Table(rows, colWidths=[USABLE_WIDTH * 0.45, USABLE_WIDTH * 0.55], repeatRows=1)
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, 0), NAVY),
                        ("TEXTCOLOR", (0, 0), (-1, 0), white),
                        ("FONTNAME", (0, 0), (-1, 0), BODY_FONT_BOLD),
                        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                        ("FONTNAME", (0, 1), (0, -1), BODY_FONT_BOLD),
                        ("TEXTCOLOR", (0, 1), (0, -1), MUTED),
                        ("FONTSIZE", (0, 0), (-1, -1), 11),
                        ("TOPPADDING", (0, 0), (-1, -1), 6),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                        ("GRID", (0, 0), (-1, -1), 0.25, RULE_COLOR),
                    ]
                )
            )
            story.append(table)
        else:
            story.append(Paragraph(EMPTY_ROSTER, EMPTY_STYLE))

        def draw_page(canvas, _doc):
            self._draw_roster_page(canvas, generated_at)

        doc.build(story, onFirstPage=draw_page, onLaterPages=draw_page)
        return buf.getvalue()

    def _draw_roster_page(self, canvas, generated_at: datetime) -> None:
        canvas.saveState()
        band_h = 45 * mm
        canvas.setFillColor(NAVY)
        canvas.rect(0, PAGE_H - band_h, PAGE_W, band_h, fill=1, stroke=0)

        cx = PAGE_W / 2
        canvas.setFillColor(white)
        canvas.setFont(BODY_FONT_BOLD, 24)
        canvas.drawCentredString(cx, PAGE_H - 20 * mm, self.church_name)
        canvas.setFillColor(GOLD)
        canvas.setFont(BODY_FONT, 10)
        canvas.drawCentredString(cx, PAGE_H - 28 * mm, "LITURGIA & SERVIÇO")
        canvas.setFillColor(white)
        canvas.setFont(BODY_FONT, 16)
        canvas.drawCentredString(cx, PAGE_H - 38 * mm, "Escala de Voluntários")

        canvas.setStrokeColor(GOLD)
        canvas.setLineWidth(0.5 * mm)
        canvas.line(MARGIN, PAGE_H - 50 * mm, PAGE_W - MARGIN, PAGE_H - 50 * mm)

        canvas.setFillColor(MUTED)
        canvas.setFont(QUOTE_FONT, 10)
        quote_lines = simpleSplit(ROSTER_QUOTE, QUOTE_FONT, 10, USABLE_WIDTH - 20 * mm)
        for i, line in enumerate(quote_lines):
            canvas.drawCentredString(cx, (34 + 4.5 * (len(quote_lines) - 1 - i)) * mm, line)
        canvas.setFont(BODY_FONT_BOLD, 9)
        canvas.drawCentredString(cx, 27 * mm, ROSTER_QUOTE_AUTHOR)

        canvas.setFillColor(FOOTER_COLOR)
        canvas.setFont(BODY_FONT, 8)
        canvas.drawString(
            MARGIN, 10 * mm, f"Gerado em {generated_at.strftime('%d/%m/%Y %H:%M:%S')} via Sistema IBOC"
        )
        canvas.drawRightString(PAGE_W - MARGIN, 10 * mm, "Soli Deo Gloria")
        canvas.restoreState()

    # --- Reconciled transactions ---

    def render_reconciled_report(
        self,
        transactions: list[Transaction],
        start: date,
        end: date,
        generated_at: datetime,
    ) -> bytes:
        total_income = sum(t.amount for t in transactions if t.type == "Entrada")
        total_expense = sum(t.amount for t in transactions if t.type == "Saída")

        buf = BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=48 * mm,
            bottomMargin=15 * mm,
            title="Relatório de Conferência",
        )

        story = [
            Paragraph(f"Total Entradas Conferidas: {format_money(total_income)}", TOTALS_STYLE),
            Paragraph(f"Total Saídas Conferidas: {format_money(total_expense)}", TOTALS_STYLE),
            Paragraph(
                f"Saldo do Período Conferido: {format_money(total_income - total_expense)}",
                TOTALS_STYLE,
            ),
            Spacer(1, 5 * mm),
        ]

        rows: list[list] = [["Data", "Tipo", "Categoria", "Descrição", "Valor", "Conta"]]
        for t in transactions:
            rows.append(
                [
                    format_date(t.date),
                    t.type,
                    t.category,
                    Paragraph(escape(t.description), CELL_STYLE),
                    format_money(t.amount),
                    t.bank_account,
                ]
            )

        widths = [0.12, 0.10, 0.15, 0.33, 0.14, 0.16]
        table = Table(rows, colWidths=[USABLE_WIDTH * w for w in widths], repeatRows=1)
        commands = [
            ("BACKGROUND", (0, 0), (-1, 0), NAVY),
            ("TEXTCOLOR", (0, 0), (-1, 0), white),
            ("FONTNAME", (0, 0), (-1, 0), BODY_FONT_BOLD),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("ALIGN", (4, 1), (4, -1), "RIGHT"),
            ("FONTNAME", (4, 1), (4, -1), BODY_FONT_BOLD),
            ("LINEBELOW", (0, 0), (-1, -1), 0.25, RULE_COLOR),
        ]
        for row_index, t in enumerate(transactions, start=1):
            color = EXPENSE_COLOR if t.type == "Saída" else INCOME_COLOR
            commands.append(("TEXTCOLOR", (4, row_index), (4, row_index), color))
        table.setStyle(TableStyle(commands))
        story.append(table)

        def draw_page(canvas, _doc):
            canvas.saveState()
            band_h = 40 * mm
            canvas.setFillColor(NAVY)
            canvas.rect(0, PAGE_H - band_h, PAGE_W, band_h, fill=1, stroke=0)
            cx = PAGE_W / 2
            canvas.setFillColor(white)
            canvas.setFont(BODY_FONT_BOLD, 18)
            canvas.drawCentredString(cx, PAGE_H - 15 * mm, "Relatório de Conferência")
            canvas.setFont(BODY_FONT, 10)
            canvas.drawCentredString(
                cx, PAGE_H - 25 * mm, f"Período: {format_date(start)} a {format_date(end)}"
            )
            canvas.drawCentredString(
                cx, PAGE_H - 32 * mm, f"Gerado em: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}"
            )
            canvas.setFillColor(FOOTER_COLOR)
            canvas.setFont(BODY_FONT, 8)
            canvas.drawString(MARGIN, 8 * mm, self.church_name)
            canvas.drawRightString(PAGE_W - MARGIN, 8 * mm, f"Página {canvas.getPageNumber()}")
            canvas.restoreState()

        doc.build(story, onFirstPage=draw_page, onLaterPages=draw_page)
        return buf.getvalue()
