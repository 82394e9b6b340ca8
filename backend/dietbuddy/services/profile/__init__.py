from .models import UserProfile, bmi_status
from .profile_service import ProfileService

__all__ = ["UserProfile", "bmi_status", "ProfileService"]
