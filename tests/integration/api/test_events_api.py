import pytest


@pytest.fixture
def member_id(client, auth_headers):
    return client.post(
        "/api/members", json={"full_name": "Ana Pereira"}, headers=auth_headers("admin")
    ).json()["id"]


def _event(**overrides):
    body = {
        "title": "Culto de Santa Ceia",
        "start": "2026-03-22T18:00:00",
        "end": "2026-03-22T20:00:00",
        "type": "Culto",
        "location": "Templo Sede",
    }
    body.update(overrides)
    return body


def test_event_roster_flow(client, auth_headers, member_id):
    headers = auth_headers("editor")

    created = client.post("/api/events", json=_event(), headers=headers)
    assert created.status_code == 201
    event_id = created.json()["id"]

    added = client.post(
        f"/api/events/{event_id}/roster",
        json={"member_id": member_id, "role": "Recepção"},
        headers=headers,
    )
    assert added.status_code == 200
    assert added.json()["roster"][0]["member_name"] == "ANA PEREIRA"

    pdf = client.get(f"/api/events/{event_id}/roster.pdf", headers=headers)
    assert pdf.status_code == 200
    assert pdf.content.startswith(b"%PDF")
    assert 'filename="Escala_Culto_de_Santa_Ceia.pdf"' in pdf.headers["content-disposition"]

    removed = client.delete(f"/api/events/{event_id}/roster/0", headers=headers)
    assert removed.json()["roster"] == []

    assert client.delete(f"/api/events/{event_id}/roster/5", headers=headers).status_code == 400


def test_event_requires_times(client, auth_headers):
    response = client.post("/api/events", json=_event(start=None), headers=auth_headers("editor"))

    assert response.status_code == 400
    assert response.json()["detail"][0]["message"] == "Preencha o título e os horários."


def test_next_event_and_public_events_hide_roster(client, auth_headers, member_id):
    headers = auth_headers("admin")
    past = _event(title="Passado", start="2026-03-01T18:00:00", end="2026-03-01T20:00:00")
    client.post("/api/events", json=past, headers=headers)
    event_id = client.post("/api/events", json=_event(), headers=headers).json()["id"]
    client.post(
        f"/api/events/{event_id}/roster", json={"member_id": member_id, "role": "Som"}, headers=headers
    )

    assert client.get("/api/events/next", headers=headers).json()["id"] == event_id

    public = client.get("/api/public/events").json()
    assert [e["title"] for e in public] == ["Culto de Santa Ceia"]
    assert public[0]["roster"] == []


def test_unknown_event(client, auth_headers):
    headers = auth_headers("viewer")

    assert client.get("/api/events/nope", headers=headers).status_code == 404
    assert client.get("/api/events/nope/roster.pdf", headers=headers).status_code == 404
