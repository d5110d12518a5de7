"""Endpoints for registration and login."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user as register_user_uc,
)
from app.infrastructure.datastore import DataStore, get_store
from app.infrastructure.email import send_welcome_email
from app.infrastructure.security import access_token_lifetime, create_access_token
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import LoginRequest, RegisterRequest, Token, UserRead

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, store: DataStore = Depends(get_store)):
    """Create an account, greet it in the feed and by email."""

    try:
        user = register_user_uc(
            store,
            full_name=payload.full_name,
            email=payload.email,
            phone_number=payload.phone_number,
            password=payload.password,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc

    if not send_welcome_email(user.full_name, user.email):
        logger.warning("Could not send the welcome email to user %s", user.id)

    return UserRead.model_validate(user)


@router.post("/login", response_model=Token)
def login(payload: LoginRequest, store: DataStore = Depends(get_store)):
    """Verify the credentials and issue a bearer token."""

    user, auth_status = authenticate_user(store, payload.email, payload.password)

    if auth_status is AuthenticationStatus.EMAIL_NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.BAD_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(
        data={"sub": user.id, "email": user.email},
        expires_delta=access_token_lifetime(payload.remember_me),
    )
    return Token(
        token=token,
        token_type="bearer",
        user_id=user.id,
        full_name=user.full_name,
        email=user.email,
    )
