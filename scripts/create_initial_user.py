"""Utility script to seed a staff account (admin by default) in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from sehra.application.use_cases.users import register_user
from sehra.domain.entities import STAFF_ROLES, UserRole, parse_role
from sehra.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a staff account for the Sehra API.",
    )
    parser.add_argument("--name", default="Administrator", help="Full name (default: Administrator)")
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address (default: admin@example.com)",
    )
    parser.add_argument(
        "--role",
        default=UserRole.ADMIN.value,
        choices=sorted(role.value for role in STAFF_ROLES),
        help="Staff role to grant (default: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role=parse_role(args.role),
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.value}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
