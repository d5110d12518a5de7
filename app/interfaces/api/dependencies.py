"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.domain.entities import User
from app.infrastructure.datastore import DataStore, get_store
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, store: DataStore) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise _credentials_exception()

    user = UserRepository(store).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    if user.email != email:
        raise _credentials_exception()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    store: DataStore = Depends(get_store),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, store)
