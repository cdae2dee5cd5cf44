"""Utility script to create the first administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from notify_api.application.use_cases.users import register_user
from notify_api.domain.exceptions import NotifyError
from notify_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for admin creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator account for the notification API.",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the administrator (default: admin@example.com)",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Username of the administrator (default: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the administrator. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            email=args.email,
            username=args.username,
            password=password,
            is_admin=True,
        )
    except NotifyError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the administrator: {exc.message}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
