import argparse
import logging
import sys
from pathlib import Path

from iboc.adapters.auth.crypto import JWTAuthAdapter
from iboc.adapters.sqlite.documents import SQLiteDocumentStore
from iboc.adapters.sqlite.migrator import SQLiteMigrator
from iboc.adapters.sqlite.repos import SQLiteEventRepo, SQLiteMemberRepo, SQLiteSiteContentRepo
from iboc.api.deps import Settings
from iboc.components.auth import SetCredentialsInput, master_user, run_set_credentials
from iboc.components.connection import ConnectionCheckError, run_check, run_seed
from iboc.domain.policy import PolicyEngine
from iboc.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_store(settings: Settings) -> SQLiteDocumentStore:
    return SQLiteDocumentStore(settings.db_path)


def handle_migrate(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_seed(settings: Settings) -> None:
    store = get_store(settings)
    result = run_seed(SQLiteMemberRepo(store=store), SQLiteSiteContentRepo(store=store))
    print(f"Seeded: {result.members_inserted} member(s) inserted, site content reset.")


def handle_set_login(settings: Settings, args: argparse.Namespace) -> None:
    if not Path(settings.rules_path).exists():
        logger.error("Rules file %s not found.", settings.rules_path)
        sys.exit(1)

    policy = PolicyEngine(load_rules(Path(settings.rules_path)))
    inp = SetCredentialsInput(
        actor=master_user(),
        member_id=args.member_id,
        username=args.username,
        password=args.password,
        permissions=args.permissions,
    )
    repo = SQLiteMemberRepo(store=get_store(settings))
    result = run_set_credentials(inp, repo, JWTAuthAdapter(settings.secret_key), policy)
    if not result.success:
        logger.error("Could not set login: %s", result.error)
        sys.exit(1)
    print(f"Login '{args.username}' set for member {args.member_id} ({args.permissions}).")


def handle_check_connection(settings: Settings) -> None:
    store = get_store(settings)
    try:
        status = run_check(SQLiteEventRepo(store=store), SQLiteMemberRepo(store=store))
    except ConnectionCheckError as e:
        print(e.status.message)
        sys.exit(1)
    print(status.message)


def main() -> None:
    parser = argparse.ArgumentParser(description="IBOC administration CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")
    subparsers.add_parser("seed", help="Insert sample members and reset the site content")
    subparsers.add_parser("check-connection", help="Probe the database")

    login_parser = subparsers.add_parser("set-login", help="Set a member's username and password")
    login_parser.add_argument("member_id", help="Member id")
    login_parser.add_argument("username")
    login_parser.add_argument("password")
    login_parser.add_argument(
        "--permissions", choices=["admin", "editor", "viewer"], default="viewer"
    )

    args = parser.parse_args()
    settings = Settings()

    if args.command == "migrate":
        handle_migrate(settings)
    elif args.command == "seed":
        handle_seed(settings)
    elif args.command == "set-login":
        handle_set_login(settings, args)
    elif args.command == "check-connection":
        handle_check_connection(settings)


if __name__ == "__main__":
    main()
