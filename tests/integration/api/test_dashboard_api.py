from iboc.adapters.sqlite.repos import SQLiteMemberRepo
from iboc.domain.defaults import sample_members


def test_stats_and_charts(client, auth_headers, settings):
    headers = auth_headers("viewer")
    admin = auth_headers("admin")
    client.post("/api/members", json={"full_name": "Ana"}, headers=admin)
    client.post("/api/members", json={"full_name": "Bia", "status": "Ausente"}, headers=admin)
    client.post(
        "/api/finance/transactions",
        json={
            "type": "Entrada",
            "category": "Oferta",
            "amount": 300.0,
            "date": "2026-03-02",
            "description": "Oferta missionária",
        },
        headers=admin,
    )

    stats = client.get("/api/dashboard/stats", headers=headers).json()

    assert stats["total_members"] == 2
    assert stats["active_members"] == 1
    assert stats["income"] == 300.0
    assert stats["income_by_category"] == {"Oferta": 300.0}
    assert [p["name"] for p in stats["monthly"]] == ["Out", "Nov", "Dez", "Jan", "Fev", "Mar"]
    assert stats["monthly"][-1]["income"] == 300.0
    assert stats["next_event"] is None

    for path in ("/api/dashboard/charts/monthly.png", "/api/dashboard/charts/categories.png"):
        chart = client.get(path, headers=headers)
        assert chart.status_code == 200
        assert chart.headers["content-type"] == "image/png"
        assert chart.content.startswith(b"\x89PNG")
    assert not list(settings.data_dir.rglob("*.png"))


def test_dashboard_requires_login(client):
    assert client.get("/api/dashboard/stats").status_code == 401


def test_connection_check(client, auth_headers):
    response = client.get("/api/system/connection", headers=auth_headers("viewer"))

    assert response.status_code == 200
    assert response.json() == {
        "public_read": True,
        "private_read": True,
        "message": "Conexão Estabelecida!",
    }


def test_connection_check_unmigrated_database(client, auth_headers, settings, tmp_path):
    settings.db_path = str(tmp_path / "empty.db")

    response = client.get("/api/system/connection", headers=auth_headers("viewer"))

    assert response.status_code == 503
    assert response.json()["public_read"] is False
    assert response.json()["message"].startswith("Erro:")


def test_seed_is_admin_only(client, auth_headers, db_path):
    assert client.post("/api/system/seed", headers=auth_headers("editor")).status_code == 403

    response = client.post("/api/system/seed", headers=auth_headers("admin"))
    assert response.json() == {"members_inserted": len(sample_members()), "site_content_written": True}

    again = client.post("/api/system/seed", headers=auth_headers("admin"))
    assert again.json()["members_inserted"] == 0
    assert len(SQLiteMemberRepo(db_path).list_all()) == len(sample_members())
