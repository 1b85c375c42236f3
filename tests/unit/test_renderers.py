from datetime import date, datetime

import pytest

from iboc.adapters.render.mpl_renderer import (
    MatplotlibRenderer,
    category_chart_spec,
    monthly_chart_spec,
)
from iboc.adapters.render.pdf_renderer import PdfReportRenderer, report_filename, roster_filename
from iboc.components.dashboard import MonthlyPoint
from iboc.domain.entities import ChurchEvent, RosterItem, Transaction

# --- Charts ---


def test_monthly_chart_png():
    spec = monthly_chart_spec([MonthlyPoint("Fev", 100, 40), MonthlyPoint("Mar", 80, 120)])

    data = MatplotlibRenderer().render_chart(spec)

    assert data.startswith(b"\x89PNG")


def test_category_chart_png():
    data = MatplotlibRenderer().render_chart(category_chart_spec({"Dízimo": 10.0, "Oferta": 5.0}))

    assert data.startswith(b"\x89PNG")


def test_empty_category_chart():
    data = MatplotlibRenderer().render_chart(category_chart_spec({}), width=500, height=400)

    assert data.startswith(b"\x89PNG")


def test_chart_specs():
    spec = monthly_chart_spec([MonthlyPoint("Jan", 1.0, 2.0)])
    assert spec["type"] == "grouped_bar"
    assert spec["data"]["series"] == {"Receitas": [1.0], "Despesas": [2.0]}

    spec = category_chart_spec({"Dízimo": 10.0, "Oferta": 5.0})
    assert spec["type"] == "pie"
    assert spec["data"]["labels"] == ["Dízimo", "Oferta"]


# --- PDF ---


@pytest.fixture
def pdf():
    return PdfReportRenderer(church_name="IGREJA BATISTA O CAMINHO")


def _event(roster):
    return ChurchEvent(
        title="Culto de Santa Ceia",
        start=datetime(2026, 4, 5, 18, 0),
        end=datetime(2026, 4, 5, 20, 0),
        location="Templo <Sede>",
        roster=roster,
    )


def test_roster_pdf(pdf):
    roster = [
        RosterItem(member_id="m1", member_name="ANA PEREIRA", role="Louvor"),
        RosterItem(member_id="m2", member_name="CARLOS & FILHOS", role="Recepção"),
    ]

    data = pdf.render_roster(_event(roster), generated_at=datetime(2026, 3, 15, 10, 0))

    assert data.startswith(b"%PDF")


def test_empty_roster_pdf(pdf):
    assert pdf.render_roster(_event([]), generated_at=datetime(2026, 3, 15)).startswith(b"%PDF")


def test_reconciled_report_pdf(pdf):
    transactions = [
        Transaction(
            type="Entrada",
            category="Dízimo",
            amount=1500.0,
            date=date(2026, 3, 2),
            description="Dízimos do culto",
            bank_account="Banco do Brasil",
            is_reconciled=True,
        ),
        Transaction(
            type="Saída",
            category="Energia",
            amount=320.45,
            date=date(2026, 3, 8),
            description="Conta de luz",
            is_reconciled=True,
        ),
    ]

    data = pdf.render_reconciled_report(
        transactions, date(2026, 3, 1), date(2026, 3, 15), generated_at=datetime(2026, 3, 15, 10)
    )

    assert data.startswith(b"%PDF")


def test_filenames():
    assert roster_filename(_event([])) == "Escala_Culto_de_Santa_Ceia.pdf"
    assert report_filename(date(2026, 3, 1), date(2026, 3, 15)) == "Conferidos_2026-03-01_2026-03-15.pdf"
