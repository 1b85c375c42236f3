from iboc.adapters.sqlite.repos import SQLiteTransactionRepo
from iboc.domain.entities import Transaction


def _transaction(**overrides):
    body = {
        "type": "Entrada",
        "category": "Dízimo",
        "amount": 500.0,
        "date": "2026-03-08",
        "description": "Dízimos do culto",
        "payment_method": "Dinheiro",
        "bank_account": "Tesouraria Central",
    }
    body.update(overrides)
    return body


def test_new_transaction_needs_account(client, auth_headers):
    headers = auth_headers("admin")

    response = client.get("/api/finance/transactions/new", params={"type": "Entrada"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"][0]["message"] == "Cadastre uma conta primeiro."

    account = client.post(
        "/api/finance/accounts",
        json={"name": "Tesouraria Central", "type": "Tesouraria"},
        headers=headers,
    )
    assert account.status_code == 201

    draft = client.get(
        "/api/finance/transactions/new", params={"type": "Entrada"}, headers=headers
    ).json()
    assert draft["bank_account"] == "Tesouraria Central"
    assert draft["payment_method"] == "Dinheiro"
    assert draft["date"] == "2026-03-15"


def test_transactions_summary_and_reconciliation(client, auth_headers):
    headers = auth_headers("admin")
    income = client.post("/api/finance/transactions", json=_transaction(), headers=headers).json()
    client.post(
        "/api/finance/transactions",
        json=_transaction(type="Saída", category="Energia", amount=120.0, payment_method="Pix"),
        headers=headers,
    )

    summary = client.get("/api/finance/summary", headers=headers).json()
    assert summary == {"consolidated_balance": 0, "treasury_inflow": 500.0, "bank_inflow": 0}

    toggled = client.post(f"/api/finance/transactions/{income['id']}/reconcile", headers=headers)
    assert toggled.json()["is_reconciled"] is True

    summary = client.get("/api/finance/summary", headers=headers).json()
    assert summary["consolidated_balance"] == 500.0

    by_day = client.get(
        "/api/finance/transactions", params={"on_date": "2026-03-08"}, headers=headers
    ).json()
    assert len(by_day) == 2

    overview = client.get("/api/finance/overview", headers=headers).json()
    assert len(overview["transactions"]) == 2


def test_invalid_transaction(client, auth_headers):
    response = client.post(
        "/api/finance/transactions",
        json=_transaction(amount=0, description=""),
        headers=auth_headers("admin"),
    )

    assert response.status_code == 400


def test_missing_required_fields(client, auth_headers):
    body = _transaction()
    del body["description"]
    del body["amount"]

    response = client.post("/api/finance/transactions", json=body, headers=auth_headers("admin"))

    assert response.status_code == 400
    assert {e["message"] for e in response.json()["detail"]} == {"Preencha os campos obrigatórios."}


def test_edit_keeps_closing_data(client, auth_headers, db_path):
    stored = SQLiteTransactionRepo(db_path).save(
        Transaction(**_transaction(), closing_status="Fechado", closing_id="close-1")
    )

    response = client.put(
        f"/api/finance/transactions/{stored.id}",
        json=_transaction(description="Dízimos corrigidos"),
        headers=auth_headers("admin"),
    )

    assert response.status_code == 200
    assert response.json()["description"] == "Dízimos corrigidos"
    kept = SQLiteTransactionRepo(db_path).get_by_id(stored.id)
    assert kept.closing_status == "Fechado"
    assert kept.closing_id == "close-1"


def test_reconciled_report(client, auth_headers):
    headers = auth_headers("admin")
    params = {"start": "2026-03-01", "end": "2026-03-31"}

    empty = client.get("/api/finance/reports/reconciled", params=params, headers=headers)
    assert empty.status_code == 404
    assert empty.json()["detail"] == "Nenhum lançamento conferido encontrado neste período."

    client.post(
        "/api/finance/transactions", json=_transaction(is_reconciled=True), headers=headers
    )
    report = client.get("/api/finance/reports/reconciled", params=params, headers=headers)

    assert report.status_code == 200
    assert report.headers["content-type"] == "application/pdf"
    assert "Conferidos_2026-03-01_2026-03-31.pdf" in report.headers["content-disposition"]
    assert report.content.startswith(b"%PDF")


def test_editor_cannot_edit_finance(client, auth_headers):
    headers = auth_headers("editor")

    assert client.get("/api/finance/transactions", headers=headers).status_code == 200
    response = client.post("/api/finance/transactions", json=_transaction(), headers=headers)
    assert response.status_code == 403
