import logging
import secrets

from iboc.domain.entities import AppUser
from iboc.domain.policy import PolicyEngine
from iboc.ports.documents import StorageError

from .models import (
    AuthOutput,
    CreateSessionInput,
    CredentialsOutput,
    LoginInput,
    MasterCredential,
    SetCredentialsInput,
    VerifySessionInput,
)
from .ports import AuthAdapterPort, MemberLookupPort

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciais inválidas."
CONNECTION_ERROR = "Erro de conexão."

MASTER_UID = "master-001"


def master_user() -> AppUser:
    return AppUser(
        uid=MASTER_UID,
        email="master@iboc.com",
        type="master",
        display_name="Administrador Master",
        permissions="admin",
    )


def _matches_master(inp: LoginInput, master: MasterCredential | None) -> bool:
    if master is None or not master.username:
        return False
    same_user = secrets.compare_digest(inp.username.encode(), master.username.encode())
    same_pass = secrets.compare_digest(inp.password.encode(), master.password.encode())
    return same_user and same_pass


def run_login(
    inp: LoginInput,
    member_repo: MemberLookupPort,
    auth_adapter: AuthAdapterPort,
    master: MasterCredential | None = None,
) -> AuthOutput:
    if _matches_master(inp, master):
        logger.info("Master login")
        return AuthOutput(user=master_user(), success=True)

    try:
        candidates = member_repo.get_by_username(inp.username)
    except StorageError:
        logger.exception("Login lookup failed for %s", inp.username)
        return AuthOutput(
            success=False, error=CONNECTION_ERROR, error_code="backend_unavailable"
        )

    for member in candidates:
        if member.password_hash and auth_adapter.verify_password(
            inp.password, member.password_hash
        ):
            logger.info("Member login: %s", member.id)
            return AuthOutput(
                user=AppUser(
                    uid=member.id,
                    email=member.email,
                    type="member",
                    display_name=member.full_name,
                    permissions=member.permissions or "viewer",
                ),
                success=True,
            )

    return AuthOutput(success=False, error=INVALID_CREDENTIALS, error_code="invalid_credentials")


def run_create_session(inp: CreateSessionInput, auth_adapter: AuthAdapterPort) -> AuthOutput:
    token = auth_adapter.create_token(inp.user, inp.ttl_minutes)
    return AuthOutput(user=inp.user, token_raw=token, success=True)


def run_verify_session(inp: VerifySessionInput, auth_adapter: AuthAdapterPort) -> AuthOutput:
    user = auth_adapter.validate_token(inp.token)
    if not user:
        return AuthOutput(success=False, error="Invalid token", error_code="invalid_token")
    return AuthOutput(user=user, token_raw=inp.token, success=True)


def run_set_credentials(
    inp: SetCredentialsInput,
    member_repo: MemberLookupPort,
    auth_adapter: AuthAdapterPort,
    policy: PolicyEngine,
) -> CredentialsOutput:
    if not policy.can_manage_credentials(inp.actor):
        return CredentialsOutput(success=False, error="Access denied", error_code="forbidden")

    username = inp.username.strip()
    if not username or not inp.password:
        return CredentialsOutput(
            success=False, error="Usuário e senha são obrigatórios.", error_code="validation"
        )

    member = member_repo.get_by_id(inp.member_id)
    if not member:
        return CredentialsOutput(success=False, error="Membro não encontrado.", error_code="not_found")

    taken = [m for m in member_repo.get_by_username(username) if m.id != member.id]
    if taken:
        return CredentialsOutput(
            success=False, error="Nome de usuário já está em uso.", error_code="conflict"
        )

    member.username = username
    member.password_hash = auth_adapter.hash_password(inp.password)
    member.permissions = inp.permissions
    saved = member_repo.save(member)
    logger.info("Credentials set for member %s (%s)", saved.id, inp.permissions)
    return CredentialsOutput(member=saved, success=True)


def run(
    inp: LoginInput | CreateSessionInput | VerifySessionInput | SetCredentialsInput,
    *,
    member_repo: MemberLookupPort | None = None,
    auth_adapter: AuthAdapterPort | None = None,
    policy: PolicyEngine | None = None,
    master: MasterCredential | None = None,
) -> AuthOutput | CredentialsOutput:
    if isinstance(inp, LoginInput):
        assert member_repo and auth_adapter
        return run_login(inp, member_repo, auth_adapter, master)

    elif isinstance(inp, CreateSessionInput):
        assert auth_adapter
        return run_create_session(inp, auth_adapter)

    elif isinstance(inp, VerifySessionInput):
        assert auth_adapter
        return run_verify_session(inp, auth_adapter)

    elif isinstance(inp, SetCredentialsInput):
        assert member_repo and auth_adapter and policy
        return run_set_credentials(inp, member_repo, auth_adapter, policy)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
