"""Profile identity routes."""

from fastapi import APIRouter, Depends

from smartlink.api.deps import get_profile_store
from smartlink.api.schemas import ProfileResponse, ProfileUpdateRequest
from smartlink.components.profile import (
    ProfileStore,
    SaveProfileInput,
    run_load,
    run_save_profile,
)

router = APIRouter()


@router.get("/profile", response_model=ProfileResponse)
def get_profile(store: ProfileStore = Depends(get_profile_store)) -> ProfileResponse:
    """Get the profile, creating the default one on first use."""
    result = run_load(store)
    return ProfileResponse(profile=result.profile, saved=result.saved)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdateRequest,
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    """Apply a partial identity edit. An omitted banner clears it."""
    result = run_save_profile(
        SaveProfileInput(
            username=request.username,
            display_name=request.display_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
            banner_url=request.banner_url,
        ),
        store,
    )
    return ProfileResponse(profile=result.profile, saved=result.saved)
