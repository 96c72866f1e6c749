"""
Referential-integrity and uniqueness helpers shared by every service.

resolve()        -- existence check for a referenced or addressed record (404)
ensure_unique()  -- pre-insert uniqueness check on a natural key (400)
commit_or_conflict() -- commit, turning a unique-constraint violation that
                    slipped past ensure_unique() (concurrent writers) into the
                    same ConflictError.
"""

import uuid
import logging
from typing import Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schooldesk.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def resolve(db: Session, model: type[ModelT], record_id: uuid.UUID, label: str) -> ModelT:
    """Return the row with this primary key or raise NotFoundError("<label> not found")."""
    instance = db.get(model, record_id)
    if instance is None:
        raise NotFoundError(f"{label} not found")
    return instance


def ensure_unique(
    db: Session,
    model,
    message: str,
    exclude_id: Optional[uuid.UUID] = None,
    **key,
) -> None:
    """
    Raise ConflictError(message) if a row already holds this key.
    exclude_id skips the record being updated.
    """
    query = select(model.id).filter_by(**key)
    if exclude_id is not None:
        query = query.where(model.id != exclude_id)

    existing = db.execute(query.limit(1)).scalar()
    if existing is not None:
        raise ConflictError(message)


def commit_or_conflict(db: Session, message: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit: %s", exc.orig)
        raise ConflictError(message) from exc
