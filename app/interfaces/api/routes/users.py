"""Endpoints exposing the authenticated user's profile."""

from fastapi import APIRouter, Depends

from app.application.use_cases.users import update_profile_image as update_profile_image_uc
from app.domain.entities import User
from app.infrastructure.datastore import DataStore, get_store
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import ProfileImageUpdate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)


@router.patch("/me/profile-image", response_model=UserRead)
def update_profile_image(
    payload: ProfileImageUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Attach a profile image reference to the authenticated user."""

    try:
        user = update_profile_image_uc(store, current_user.id, payload.profile_image)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)
