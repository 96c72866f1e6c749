"""
Router for user administration (ADMIN only).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.dependencies import require_roles
from schooldesk.schemas.auth import UserCreate, UserResponse
from schooldesk.services import auth_service

router = APIRouter(prefix="/api/users", tags=["Users"], dependencies=[Depends(require_roles("ADMIN"))])


@router.get("", response_model=List[UserResponse], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return auth_service.list_users(db)


@router.post("", response_model=UserResponse, status_code=201, summary="Create a user")
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    """Creates an account with any role, optionally linked to a teacher."""
    return auth_service.create_user(db, data)
