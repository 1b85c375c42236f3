from unittest.mock import Mock

import pytest

from iboc.components.auth import (
    CreateSessionInput,
    LoginInput,
    MasterCredential,
    SetCredentialsInput,
    VerifySessionInput,
    master_user,
    run,
    run_create_session,
    run_login,
    run_set_credentials,
    run_verify_session,
)
from iboc.domain.entities import AppUser, Member
from iboc.domain.policy import PolicyEngine
from iboc.ports.documents import StorageError

MASTER = MasterCredential(username="admin", password="s3cret")


@pytest.fixture
def mock_repo():
    repo = Mock()
    repo.get_by_username.return_value = []
    repo.save.side_effect = lambda m: m
    return repo


@pytest.fixture
def mock_auth_adapter():
    adapter = Mock()
    adapter.hash_password.side_effect = lambda p: f"hashed:{p}"
    return adapter


def test_master_login(mock_repo, mock_auth_adapter):
    result = run_login(LoginInput("admin", "s3cret"), mock_repo, mock_auth_adapter, MASTER)

    assert result.success is True
    assert result.user == master_user()
    assert result.user.permissions == "admin"
    assert result.user.type == "master"
    mock_repo.get_by_username.assert_not_called()


def test_master_wrong_password_falls_through_to_members(mock_repo, mock_auth_adapter):
    result = run_login(LoginInput("admin", "nope"), mock_repo, mock_auth_adapter, MASTER)

    assert result.success is False
    assert result.error_code == "invalid_credentials"
    assert result.error == "Credenciais inválidas."
    mock_repo.get_by_username.assert_called_once_with("admin")


def test_member_login(mock_repo, mock_auth_adapter):
    member = Member(
        id="m1",
        full_name="ANA PEREIRA",
        email="ana@email.com",
        username="ana",
        password_hash="hash",
        permissions="editor",
    )
    mock_repo.get_by_username.return_value = [member]
    mock_auth_adapter.verify_password.return_value = True

    result = run_login(LoginInput("ana", "pwd"), mock_repo, mock_auth_adapter, MASTER)

    assert result.success is True
    assert result.user.uid == "m1"
    assert result.user.type == "member"
    assert result.user.display_name == "ANA PEREIRA"
    assert result.user.permissions == "editor"
    mock_auth_adapter.verify_password.assert_called_with("pwd", "hash")


def test_member_without_permissions_defaults_to_viewer(mock_repo, mock_auth_adapter):
    member = Member(id="m1", full_name="X", username="x", password_hash="hash")
    mock_repo.get_by_username.return_value = [member]
    mock_auth_adapter.verify_password.return_value = True

    result = run_login(LoginInput("x", "pwd"), mock_repo, mock_auth_adapter)

    assert result.user.permissions == "viewer"


def test_member_without_password_hash_cannot_login(mock_repo, mock_auth_adapter):
    mock_repo.get_by_username.return_value = [Member(id="m1", full_name="X", username="x")]

    result = run_login(LoginInput("x", ""), mock_repo, mock_auth_adapter)

    assert result.success is False
    mock_auth_adapter.verify_password.assert_not_called()


def test_login_backend_unavailable(mock_repo, mock_auth_adapter):
    mock_repo.get_by_username.side_effect = StorageError("disk gone")

    result = run_login(LoginInput("ana", "pwd"), mock_repo, mock_auth_adapter)

    assert result.success is False
    assert result.error_code == "backend_unavailable"
    assert result.error == "Erro de conexão."


def test_create_and_verify_session(mock_auth_adapter):
    user = master_user()
    mock_auth_adapter.create_token.return_value = "tok"
    mock_auth_adapter.validate_token.return_value = user

    session = run_create_session(CreateSessionInput(user=user, ttl_minutes=10), mock_auth_adapter)
    assert session.token_raw == "tok"
    mock_auth_adapter.create_token.assert_called_once_with(user, 10)

    verified = run_verify_session(VerifySessionInput(token="tok"), mock_auth_adapter)
    assert verified.success is True
    assert verified.user == user


def test_verify_invalid_token(mock_auth_adapter):
    mock_auth_adapter.validate_token.return_value = None

    result = run_verify_session(VerifySessionInput(token="bad"), mock_auth_adapter)

    assert result.success is False
    assert result.error_code == "invalid_token"


# --- Credentials ---


def _credentials(actor, **overrides):
    values = dict(actor=actor, member_id="m1", username=" ana ", password="pwd", permissions="editor")
    values.update(overrides)
    return SetCredentialsInput(**values)


def test_set_credentials_hashes_password(rules, mock_repo, mock_auth_adapter):
    mock_repo.get_by_id.return_value = Member(id="m1", full_name="ANA")

    result = run_set_credentials(
        _credentials(master_user()), mock_repo, mock_auth_adapter, PolicyEngine(rules)
    )

    assert result.success is True
    assert result.member.username == "ana"
    assert result.member.password_hash == "hashed:pwd"
    assert result.member.permissions == "editor"


def test_set_credentials_requires_admin(rules, mock_repo, mock_auth_adapter):
    editor = AppUser(uid="e1", type="member", permissions="editor")

    result = run_set_credentials(
        _credentials(editor), mock_repo, mock_auth_adapter, PolicyEngine(rules)
    )

    assert result.success is False
    assert result.error_code == "forbidden"
    mock_repo.save.assert_not_called()


def test_set_credentials_username_taken(rules, mock_repo, mock_auth_adapter):
    mock_repo.get_by_id.return_value = Member(id="m1", full_name="ANA")
    mock_repo.get_by_username.return_value = [Member(id="m2", full_name="OTHER", username="ana")]

    result = run_set_credentials(
        _credentials(master_user()), mock_repo, mock_auth_adapter, PolicyEngine(rules)
    )

    assert result.error_code == "conflict"


def test_set_credentials_validation(rules, mock_repo, mock_auth_adapter):
    result = run_set_credentials(
        _credentials(master_user(), password=""), mock_repo, mock_auth_adapter, PolicyEngine(rules)
    )
    assert result.error_code == "validation"

    mock_repo.get_by_id.return_value = None
    result = run_set_credentials(
        _credentials(master_user()), mock_repo, mock_auth_adapter, PolicyEngine(rules)
    )
    assert result.error_code == "not_found"


def test_run_dispatches_login(mock_repo, mock_auth_adapter):
    result = run(
        LoginInput("admin", "s3cret"),
        member_repo=mock_repo,
        auth_adapter=mock_auth_adapter,
        master=MASTER,
    )

    assert result.success is True
