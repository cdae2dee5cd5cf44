"""Rebuild users' notification back-references from recipient lists.

Run after a notification was reported as partially written, or at any time:
the operation is idempotent.
"""

from __future__ import annotations

import argparse

from notify_api.application.use_cases.notifications import reconcile_back_references
from notify_api.domain.exceptions import StoreFailure
from notify_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--user-id",
        type=int,
        default=None,
        help="Only rebuild the back-references of this user",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        changed = reconcile_back_references(session, user_id=args.user_id)
    except StoreFailure as exc:
        raise SystemExit(f"Reconciliation failed: {exc.message}") from exc
    finally:
        session.close()
    print(f"Back-references changed: {changed}")


if __name__ == "__main__":
    main()
