"""
Auth component - Login, sessions and member credentials.

Handles the master credential, member logins against hashed passwords,
JWT session tokens, and admin-only credential assignment.
"""

from .component import (
    CONNECTION_ERROR,
    INVALID_CREDENTIALS,
    MASTER_UID,
    master_user,
    run,
    run_create_session,
    run_login,
    run_set_credentials,
    run_verify_session,
)
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

__all__ = [
    # Entry points
    "run",
    "run_create_session",
    "run_login",
    "run_set_credentials",
    "run_verify_session",
    "master_user",
    # Constants
    "CONNECTION_ERROR",
    "INVALID_CREDENTIALS",
    "MASTER_UID",
    # Models
    "AuthOutput",
    "CreateSessionInput",
    "CredentialsOutput",
    "LoginInput",
    "MasterCredential",
    "SetCredentialsInput",
    "VerifySessionInput",
    # Ports
    "AuthAdapterPort",
    "MemberLookupPort",
]
