def test_member_crud(client, auth_headers):
    headers = auth_headers("editor")

    created = client.post(
        "/api/members",
        json={"full_name": "maria souza", "email": "maria@email.com", "ministries": ["Louvor"]},
        headers=headers,
    )
    assert created.status_code == 201
    member = created.json()
    assert member["full_name"] == "MARIA SOUZA"
    assert "password_hash" not in member

    member_id = member["id"]
    updated = client.put(
        f"/api/members/{member_id}",
        json={"full_name": "Maria Souza Lima", "status": "Ausente"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "Ausente"

    listing = client.get("/api/members", params={"search": "lima"}, headers=headers).json()
    assert [m["id"] for m in listing] == [member_id]

    assert client.delete(f"/api/members/{member_id}", headers=headers).status_code == 200
    assert client.get(f"/api/members/{member_id}", headers=headers).status_code == 404


def test_blank_name_is_rejected(client, auth_headers):
    response = client.post("/api/members", json={"full_name": "  "}, headers=auth_headers("admin"))

    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "full_name"


def test_viewer_cannot_write(client, auth_headers):
    headers = auth_headers("viewer")

    assert client.get("/api/members", headers=headers).status_code == 200
    response = client.post("/api/members", json={"full_name": "X"}, headers=headers)
    assert response.status_code == 403


def test_credentials_are_admin_only(client, auth_headers):
    member_id = client.post(
        "/api/members", json={"full_name": "Ana"}, headers=auth_headers("admin")
    ).json()["id"]
    body = {"username": "ana", "password": "s3nha", "permissions": "editor"}

    forbidden = client.put(
        f"/api/members/{member_id}/credentials", json=body, headers=auth_headers("editor")
    )
    assert forbidden.status_code == 403

    ok = client.put(
        f"/api/members/{member_id}/credentials", json=body, headers=auth_headers("admin")
    )
    assert ok.status_code == 200
    assert ok.json()["username"] == "ana"
    assert ok.json()["permissions"] == "editor"
    assert "password_hash" not in ok.json()

    login = client.post("/api/auth/login", data={"username": "ana", "password": "s3nha"})
    assert login.status_code == 200


def test_username_conflict(client, auth_headers):
    headers = auth_headers("admin")
    first = client.post("/api/members", json={"full_name": "A"}, headers=headers).json()["id"]
    second = client.post("/api/members", json={"full_name": "B"}, headers=headers).json()["id"]
    body = {"username": "same", "password": "x"}

    assert client.put(f"/api/members/{first}/credentials", json=body, headers=headers).status_code == 200
    response = client.put(f"/api/members/{second}/credentials", json=body, headers=headers)
    assert response.status_code == 409


def test_missing_name_is_rejected(client, auth_headers):
    response = client.post("/api/members", json={"phone": "123"}, headers=auth_headers("admin"))

    assert response.status_code == 400
    assert response.json()["detail"][0]["message"] == "O nome completo é obrigatório."
