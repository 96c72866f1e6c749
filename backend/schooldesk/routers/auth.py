"""
Router for authentication: login, self-registration and the current user.
/api/auth/login and /api/auth/register are public; /api/auth/me needs a bearer token.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.dependencies import get_auth_session
from schooldesk.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from schooldesk.security import AuthSession
from schooldesk.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse, summary="Log in")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Returns the user and a signed access token. 401 on bad credentials."""
    user, token = auth_service.authenticate(db, data)
    return LoginResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/register", response_model=UserResponse, status_code=201, summary="Register an account")
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    return auth_service.register_user(db, data)


@router.get("/me", response_model=UserResponse, summary="Current user")
def me(session: AuthSession = Depends(get_auth_session), db: Session = Depends(get_db)):
    return auth_service.get_user(db, session.user_id)
