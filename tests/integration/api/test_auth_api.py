from iboc.adapters.sqlite.repos import SQLiteMemberRepo
from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.api.auth_utils import get_password_hash
from iboc.components.auth import master_user
from iboc.domain.entities import Member


def test_master_login_sets_cookie(client):
    response = client.post(
        "/api/auth/login", data={"username": "admin", "password": "admin-secret"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert "access_token" in response.cookies

    # The cookie alone authenticates follow-up requests
    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["type"] == "master"
    assert me.json()["permissions"] == "admin"


def test_bearer_header_authenticates(client):
    token = client.post(
        "/api/auth/login", data={"username": "admin", "password": "admin-secret"}
    ).json()["access_token"]
    client.cookies.clear()

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert me.status_code == 200
    assert me.json()["uid"] == "master-001"


def test_wrong_password(client):
    response = client.post("/api/auth/login", data={"username": "admin", "password": "x"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Credenciais inválidas."


def test_member_login(client, db_path):
    SQLiteMemberRepo(db_path).save(
        Member(
            id="m1",
            full_name="ANA PEREIRA",
            username="ana",
            password_hash=get_password_hash("louvor123"),
            permissions="editor",
        )
    )

    response = client.post("/api/auth/login", data={"username": "ana", "password": "louvor123"})
    assert response.status_code == 200

    me = client.get("/api/auth/me").json()
    assert me["uid"] == "m1"
    assert me["type"] == "member"
    assert me["permissions"] == "editor"


def test_logout_clears_cookie(client):
    client.post("/api/auth/login", data={"username": "admin", "password": "admin-secret"})

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_missing_and_invalid_tokens(client):
    assert client.get("/api/members").status_code == 401
    response = client.get("/api/members", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_tokens_are_signed_with_configured_key(client, settings):
    foreign = JWTAuthAdapter("some-other-key").create_token(master_user(), ttl_minutes=30)
    own = JWTAuthAdapter(settings.secret_key).create_token(master_user(), ttl_minutes=30)

    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {foreign}"}).status_code == 401
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {own}"})
    assert me.json()["uid"] == "master-001"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "api"}
