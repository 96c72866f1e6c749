"""
Business logic for user accounts: login, self-registration and
administrator-created accounts.
"""

import uuid
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from schooldesk.exceptions import AuthError
from schooldesk.models.teacher import Teacher
from schooldesk.models.user import User
from schooldesk.schemas.auth import LoginRequest, RegisterRequest, UserCreate
from schooldesk.security import create_access_token, hash_password, verify_password
from schooldesk.services.integrity import commit_or_conflict, ensure_unique, resolve

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
EMAIL_TAKEN = "Email already registered"


def _find_by_email(db: Session, email: str):
    return db.execute(
        select(User).where(func.lower(User.email) == email.lower())
    ).scalars().first()


def authenticate(db: Session, data: LoginRequest) -> tuple[User, str]:
    """
    Checks the credentials and issues an access token.
    An unknown email and a wrong password fail with the same message.
    """
    user = _find_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.password_hash):
        logger.warning("Failed login attempt for %s", data.email)
        raise AuthError(INVALID_CREDENTIALS)

    token = create_access_token(user.id, user.email, user.role, user.teacher_id)
    logger.info("User %s logged in", user.email)
    return user, token


def register_user(db: Session, data: RegisterRequest) -> User:
    """Public registration: the account always gets the USER role."""
    return _create(db, data.email, data.name, data.password, role="USER")


def create_user(db: Session, data: UserCreate) -> User:
    """Account created by an administrator; teacherId must reference an existing teacher."""
    if data.teacher_id is not None:
        resolve(db, Teacher, data.teacher_id, "Teacher")
    return _create(db, data.email, data.name, data.password, role=data.role, teacher_id=data.teacher_id)


def _create(db: Session, email: str, name: str, password: str, role: str, teacher_id=None) -> User:
    email = email.lower()
    ensure_unique(db, User, EMAIL_TAKEN, email=email)

    user = User(
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=role,
        teacher_id=teacher_id,
    )
    db.add(user)
    commit_or_conflict(db, EMAIL_TAKEN)
    db.refresh(user)
    logger.info("User %s created with role %s", user.email, user.role)
    return user


def list_users(db: Session) -> list[User]:
    return db.execute(select(User).order_by(User.email)).scalars().all()


def get_user(db: Session, user_id: uuid.UUID) -> User:
    return resolve(db, User, user_id, "User")
