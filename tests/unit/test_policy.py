import pytest

from iboc.domain.entities import AppUser
from iboc.domain.policy import PolicyEngine


@pytest.fixture
def engine(rules):
    return PolicyEngine(rules)


def _user(permissions):
    return AppUser(uid="u1", type="member", permissions=permissions)


def test_public_permission_without_user(engine):
    assert engine.check_permission(None, "site:read") is True
    assert engine.check_permission(None, "members:view") is False


def test_admin_wildcard(engine):
    admin = _user("admin")
    assert engine.check_permission(admin, "finance:edit") is True
    assert engine.check_permission(admin, "system:seed") is True
    assert engine.can_manage_credentials(admin) is True


def test_editor_scoped_wildcards(engine):
    editor = _user("editor")
    assert engine.check_permission(editor, "members:delete") is True
    assert engine.check_permission(editor, "site:edit") is True
    # Finance is read-only for editors
    assert engine.check_permission(editor, "finance:view") is True
    assert engine.check_permission(editor, "finance:edit") is False
    assert engine.can_manage_credentials(editor) is False


def test_viewer_is_read_only(engine):
    viewer = _user("viewer")
    assert engine.check_permission(viewer, "members:view") is True
    assert engine.check_permission(viewer, "members:edit") is False
    assert engine.check_permission(viewer, "media:upload") is False
    assert engine.check_permission(viewer, "system:seed") is False
