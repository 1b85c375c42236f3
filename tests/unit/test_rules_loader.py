import pytest

from iboc.rules.loader import load_rules


def test_load_project_rules(rules):
    assert rules.church.short_name == "IBOC"
    assert rules.church.name == "IGREJA BATISTA O CAMINHO"
    assert "*" in rules.rbac.roles["admin"]
    assert ".png" in rules.uploads.allowlist_extensions
    assert rules.auth.token_ttl_minutes == 1440


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("church: [unclosed", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_rules(path)


def test_schema_violation(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("church:\n  name: X\n", encoding="utf-8")
    with pytest.raises(ValueError, match="validation failed"):
        load_rules(path)


def test_auth_defaults_when_section_missing(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        """
church:
  name: "Igreja"
  short_name: "IG"
  address: "Rua 1"
rbac:
  roles:
    admin: ["*"]
uploads:
  max_upload_bytes: 100
  allowlist_extensions: [".png"]
  allowlist_mime_types: ["image/png"]
""",
        encoding="utf-8",
    )
    rules = load_rules(path)
    assert rules.auth.token_ttl_minutes == 60 * 24
    assert rules.auth.cookie.same_site == "lax"
    assert rules.rbac.public_permissions == []
    assert rules.church.email == ""
