import pytest


@pytest.fixture
def member_id(client, auth_headers):
    return client.post(
        "/api/members", json={"full_name": "Carlos Silva"}, headers=auth_headers("admin")
    ).json()["id"]


@pytest.fixture
def asset_id(client, auth_headers):
    body = {"name": "Mesa de Som", "category": "Som", "value": 1500.0, "quantity": 2}
    response = client.post("/api/assets", json=body, headers=auth_headers("editor"))
    assert response.status_code == 201
    assert response.json()["total_value"] == 3000.0
    return response.json()["id"]


def test_inventory_listing(client, auth_headers, asset_id):
    body = client.get("/api/assets", headers=auth_headers("viewer")).json()

    assert body["inventory_total"] == 3000.0
    assert [a["id"] for a in body["assets"]] == [asset_id]


def test_loan_cycle_and_forced_delete(client, auth_headers, asset_id, member_id):
    headers = auth_headers("editor")

    lent = client.post(f"/api/assets/{asset_id}/loan", json={"member_id": member_id, "days": 3}, headers=headers)
    assert lent.status_code == 200
    assert lent.json()["status"] == "Emprestado"
    assert lent.json()["current_loan"]["member_name"] == "CARLOS SILVA"

    loans = client.get("/api/assets/loans", headers=headers).json()
    assert [a["id"] for a in loans] == [asset_id]

    blocked = client.delete(f"/api/assets/{asset_id}", headers=headers)
    assert blocked.status_code == 409

    returned = client.post(f"/api/assets/{asset_id}/return", headers=headers)
    assert returned.json()["current_loan"] is None

    lent_again = client.post(f"/api/assets/{asset_id}/loan", json={"member_id": member_id}, headers=headers)
    assert lent_again.status_code == 200
    forced = client.delete(f"/api/assets/{asset_id}", params={"force": "true"}, headers=headers)
    assert forced.status_code == 200
    assert client.get("/api/assets", headers=headers).json()["assets"] == []


def test_loan_to_unknown_member(client, auth_headers, asset_id):
    response = client.post(
        f"/api/assets/{asset_id}/loan", json={"member_id": "ghost"}, headers=auth_headers("editor")
    )

    assert response.status_code == 404


def test_maintenance_launches_expense(client, auth_headers, asset_id):
    headers = auth_headers("admin")
    body = {
        "description": "Troca de fonte",
        "cost": 250.0,
        "provider": "Eletrônica Central",
        "launch_finance": True,
        "finance_account": "Banco do Brasil",
    }

    response = client.post(f"/api/assets/{asset_id}/maintenance", json=body, headers=headers)

    assert response.status_code == 200
    asset = response.json()
    assert asset["status"] == "Em Manutenção"
    record = asset["maintenance_history"][0]
    assert record["finance_transaction_id"]

    transactions = client.get("/api/finance/transactions", headers=headers).json()
    assert [t["id"] for t in transactions] == [record["finance_transaction_id"]]
    assert transactions[0]["type"] == "Saída"
    assert transactions[0]["description"] == "Manutenção: Mesa de Som - Troca de fonte"

    history = client.get("/api/assets/maintenance", headers=headers).json()
    assert [a["id"] for a in history] == [asset_id]

    finished = client.post(f"/api/assets/{asset_id}/maintenance/finish", headers=headers)
    assert finished.json()["status"] == "Disponível"
    assert finished.json()["condition"] == "Bom"


def test_editor_cannot_launch_maintenance_expense(client, auth_headers, asset_id):
    headers = auth_headers("editor")
    body = {"description": "Troca de fonte", "cost": 250.0, "launch_finance": True}

    assert client.post(f"/api/assets/{asset_id}/maintenance", json=body, headers=headers).status_code == 403

    body["launch_finance"] = False
    assert client.post(f"/api/assets/{asset_id}/maintenance", json=body, headers=headers).status_code == 200
