from fastapi import APIRouter, Depends
from pydantic import BaseModel

from dietbuddy.api.deps import get_profile_service
from dietbuddy.services.profile.models import UserProfile
from dietbuddy.services.profile.profile_service import ProfileService

router = APIRouter()


class ProfileResponse(BaseModel):
    profile: UserProfile
    bmi: float
    bmi_status: str


def _respond(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(profile=profile, bmi=profile.bmi, bmi_status=profile.bmi_status)


@router.get("", response_model=ProfileResponse)
async def get_profile(service: ProfileService = Depends(get_profile_service)):
    return _respond(service.get_profile())


@router.put("", response_model=ProfileResponse)
async def update_profile(profile: UserProfile, service: ProfileService = Depends(get_profile_service)):
    return _respond(service.save_profile(profile))


@router.post("/reset", response_model=ProfileResponse)
async def reset_profile(service: ProfileService = Depends(get_profile_service)):
    """Restore defaults and clear the genetic result, chat history and points."""
    return _respond(service.reset())
