"""Shared session helpers for repositories."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notify_api.domain.exceptions import StoreFailure

logger = logging.getLogger(__name__)


def commit(session: Session, *, action: str) -> None:
    """Commit ``session`` translating database errors into :class:`StoreFailure`."""

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database commit failed while trying to %s: %s", action, exc)
        raise StoreFailure(f"Could not {action}") from exc


__all__ = ["commit"]
