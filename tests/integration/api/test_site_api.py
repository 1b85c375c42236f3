from iboc.adapters.sqlite.repos import SQLiteSiteContentRepo
from iboc.domain.defaults import initial_site_content

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


# --- Public pages ---


def test_public_pages_render(client):
    home = client.get("/")
    assert home.status_code == 200
    assert "text/html" in home.headers["content-type"]
    assert initial_site_content().hero_title in home.text
    assert "IGREJA BATISTA O CAMINHO" in home.text

    contact = client.get("/contato")
    assert "contato@iboc.com" in contact.text
    assert "https://www.google.com/maps/search/?api=1&amp;query=R.%20Ica" in contact.text

    assert "Quem Somos" in client.get("/sobre").text
    assert "Nossa história continua sendo escrita..." in client.get("/acao-social").text
    assert 'action="/api/auth/login"' in client.get("/entrar").text


def test_home_escapes_stored_text(client, db_path):
    content = initial_site_content().model_copy(update={"hero_title": "<script>alert(1)</script>"})
    SQLiteSiteContentRepo(db_path).save(content)

    html = client.get("/").text

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_home_renders_defaults_when_storage_fails(client, settings, tmp_path):
    settings.db_path = str(tmp_path / "unmigrated.db")

    home = client.get("/")

    assert home.status_code == 200
    assert initial_site_content().hero_title in home.text


def test_public_site_content_defaults(client):
    body = client.get("/api/public/site-content").json()

    assert body["hero_title"] == initial_site_content().hero_title


# --- Admin site content ---


def test_site_content_edit_and_import(client, auth_headers):
    headers = auth_headers("editor")
    content = client.get("/api/site-content", headers=headers).json()
    content["hero_title"] = "Bem-vindo à IBOC"

    assert client.put("/api/site-content", json=content, headers=headers).status_code == 200
    assert client.get("/api/public/site-content").json()["hero_title"] == "Bem-vindo à IBOC"

    event_id = client.post(
        "/api/events",
        json={
            "title": "Conferência de Jovens",
            "start": "2026-04-10T19:30:00",
            "end": "2026-04-10T22:00:00",
            "location": "Ginásio",
        },
        headers=headers,
    ).json()["id"]
    agenda = client.get("/api/site-content/agenda", headers=headers).json()
    assert [e["id"] for e in agenda] == [event_id]

    imported = client.post(f"/api/site-content/import-event/{event_id}", headers=headers).json()
    assert imported["next_event_title"] == "Conferência de Jovens"
    assert imported["next_event_date"] == "2026-04-10"
    assert imported["next_event_time"] == "19:30"
    assert imported["hero_title"] == "Bem-vindo à IBOC"

    assert client.post("/api/site-content/import-event/nope", headers=headers).status_code == 404


def test_viewer_cannot_edit_site(client, auth_headers):
    headers = auth_headers("viewer")
    content = client.get("/api/site-content", headers=headers).json()

    assert client.put("/api/site-content", json=content, headers=headers).status_code == 403


def test_social_items_on_home(client, auth_headers, clock):
    headers = auth_headers("editor")

    added = client.post(
        "/api/site-content/social-items", json={"image_urls": ["/media/site_assets/a.jpg"]}, headers=headers
    ).json()
    new_item = added["social_project_items"][-1]
    assert new_item["image_url"] == "/media/site_assets/a.jpg"
    assert new_item["registered_at"] == clock.epoch_ms()

    removed = client.delete(
        f"/api/site-content/social-items/{new_item['registered_at']}", headers=headers
    ).json()
    assert "/media/site_assets/a.jpg" not in [i["image_url"] for i in removed["social_project_items"]]


# --- Social projects ---


def test_social_project_gallery_and_public_page(client, auth_headers, clock):
    headers = auth_headers("editor")
    project = client.post(
        "/api/social-projects",
        json={"title": "Sopão Solidário", "date": "2026-02-14", "status": "Realizado"},
        headers=headers,
    ).json()

    with_gallery = client.post(
        f"/api/social-projects/{project['id']}/gallery",
        json={"image_urls": ["/media/a.jpg", "/media/b.jpg"]},
        headers=headers,
    ).json()
    stamps = [i["registered_at"] for i in with_gallery["gallery"]]
    assert stamps == [clock.epoch_ms(), clock.epoch_ms() + 1]

    public = client.get("/api/public/social-projects").json()
    assert [i["image_url"] for i in public[0]["gallery"]] == ["/media/b.jpg", "/media/a.jpg"]

    page = client.get("/acao-social").text
    assert "Sopão Solidário" in page
    assert "14/02/2026" in page

    imported = client.post(f"/api/site-content/import-project/{project['id']}", headers=headers).json()
    assert imported["social_project_title"] == "Sopão Solidário"
    assert len(imported["social_project_items"]) == 2

    trimmed = client.delete(f"/api/social-projects/{project['id']}/gallery/0", headers=headers).json()
    assert [i["image_url"] for i in trimmed["gallery"]] == ["/media/b.jpg"]


def test_social_project_requires_title(client, auth_headers):
    response = client.post(
        "/api/social-projects", json={"title": " ", "date": "2026-02-14"}, headers=auth_headers("editor")
    )

    assert response.status_code == 400
    assert response.json()["detail"][0]["message"] == "Título é obrigatório"


# --- Media ---


def test_upload_and_serve(client, auth_headers, clock):
    response = client.post(
        "/api/media/upload",
        files={"file": ("foto culto.png", PNG_BYTES, "image/png")},
        data={"folder": "members_photos"},
        headers=auth_headers("editor"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["path"] == f"members_photos/{clock.epoch_ms()}_foto_culto.png"
    assert body["url"] == f"/media/{body['path']}"

    served = client.get(body["url"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES
    assert served.headers["content-type"] == "image/png"


def test_upload_rejections(client, auth_headers):
    headers = auth_headers("editor")

    bad_type = client.post(
        "/api/media/upload",
        files={"file": ("page.html", b"<html>", "text/html")},
        data={"folder": "site_assets"},
        headers=headers,
    )
    assert bad_type.status_code == 400

    viewer = client.post(
        "/api/media/upload",
        files={"file": ("a.png", PNG_BYTES, "image/png")},
        data={"folder": "site_assets"},
        headers=auth_headers("viewer"),
    )
    assert viewer.status_code == 403

    assert client.get("/media/site_assets/missing.png").status_code == 404


def test_batch_upload(client, auth_headers):
    response = client.post(
        "/api/media/batch",
        files=[
            ("files", ("a.png", PNG_BYTES, "image/png")),
            ("files", ("b.png", PNG_BYTES, "image/png")),
        ],
        data={"folder": "social_projects_gallery"},
        headers=auth_headers("editor"),
    )

    assert response.status_code == 200
    assert len(response.json()["urls"]) == 2
