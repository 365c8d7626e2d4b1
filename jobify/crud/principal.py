"""
CRUD operations for credential records (users, companies, admins).

All three principal tables share the same identity columns, so each function
takes the model class to operate on. Password hashes are only written here:
on create and through update_password.
"""

import logging
from typing import List, Optional, Type, TypeVar
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobify.core.exceptions import ConflictError, NotFoundError
from jobify.core.security import get_password_hash
from jobify.models.principal import CredentialMixin

logger = logging.getLogger(__name__)

Principal = TypeVar("Principal", bound=CredentialMixin)


def _label(model: Type[CredentialMixin]) -> str:
    return model.principal_type.value.capitalize()


def _parse_id(record_id) -> Optional[UUID]:
    if isinstance(record_id, UUID):
        return record_id
    try:
        return UUID(str(record_id))
    except ValueError:
        return None


def get_by_email(db: Session, model: Type[Principal], email: str) -> Optional[Principal]:
    """
    Look up a credential record by exact email.

    Returns the full record, hash included, for password verification.
    """
    return db.query(model).filter(model.email == email).first()


def get_by_id(db: Session, model: Type[Principal], record_id) -> Optional[Principal]:
    """Return the record with this id, or None (also for ids that are not UUIDs)."""
    parsed = _parse_id(record_id)
    if parsed is None:
        return None
    return db.query(model).filter(model.id == parsed).first()


def get_or_404(db: Session, model: Type[Principal], record_id) -> Principal:
    record = get_by_id(db, model, record_id)
    if record is None:
        raise NotFoundError(f"{_label(model)} not found")
    return record


def get_multi(db: Session, model: Type[Principal], skip: int = 0, limit: int = 100) -> List[Principal]:
    return db.query(model).order_by(model.created_at).offset(skip).limit(limit).all()


def count(db: Session, model: Type[CredentialMixin]) -> int:
    return db.query(func.count(model.id)).scalar() or 0


def create(db: Session, model: Type[Principal], data: dict) -> Principal:
    """
    Create a credential record from validated input.

    data must contain a plaintext "password"; it is hashed and dropped.

    Raises:
        ConflictError: If the email is already taken in this principal table
    """
    fields = dict(data)
    password = fields.pop("password")
    record = model(**fields, hashed_password=get_password_hash(password))

    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already exists")
    db.refresh(record)

    logger.info(f"{_label(model)} created: {record.id}")
    return record


def update(db: Session, model: Type[Principal], record_id, data: dict) -> Principal:
    """
    Apply a partial update. Passwords are not accepted here.

    Raises:
        NotFoundError: If no record has this id
        ConflictError: If the new email is already taken
    """
    record = get_or_404(db, model, record_id)
    for field, value in data.items():
        setattr(record, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already exists")
    db.refresh(record)

    logger.info(f"{_label(model)} updated: {record.id}")
    return record


def update_password(db: Session, model: Type[Principal], record_id, new_password: str) -> None:
    record = get_or_404(db, model, record_id)
    record.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"{_label(model)} password changed: {record.id}")


def delete(db: Session, model: Type[Principal], record_id) -> None:
    """
    Delete a credential record.

    Owned resources are left in place; only the ability to log in is removed.
    """
    record = get_or_404(db, model, record_id)
    db.delete(record)
    db.commit()
    logger.info(f"{_label(model)} deleted: {record_id}")
