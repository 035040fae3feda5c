"""User and onboarding profile API router.

Creates users and stores their onboarding health profile. Reading the
profile back also reports what the services derive from it today: the
detected condition tags and the current cycle phase.
"""

from fastapi import APIRouter, Depends

from core.exceptions import ProfileRequiredError
from core.logger import get_logger
from core.repository import ProfileRepository, UserRepository
from database.deps import get_profile_repository, get_user_repository
from schemas import HealthProfile, HealthProfileRequest, HealthProfileResponse, UserCreateRequest, UserResponse
from services.condition_extractor import extract_health_conditions
from services.cycle_phase import resolve_profile_phase

logger = get_logger("api.users")
router = APIRouter(prefix="/api", tags=["users"])


def _user_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at.isoformat() if user.created_at else "",
    )


def _profile_response(user_id: int, payload: HealthProfileRequest, completed_at) -> HealthProfileResponse:
    profile = HealthProfile.from_request(payload)
    return HealthProfileResponse(
        user_id=user_id,
        profile=payload,
        detected_conditions=extract_health_conditions(profile),
        current_phase=resolve_profile_phase(profile).value,
        completed_at=completed_at.isoformat() if completed_at else None,
    )


@router.post("/users", response_model=UserResponse, status_code=201)
def create_user(payload: UserCreateRequest, users: UserRepository = Depends(get_user_repository)):
    """Register a new user."""
    user = users.create(payload.name, payload.email)
    logger.info("Created user %s", user.id)
    return _user_response(user)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: UserRepository = Depends(get_user_repository)):
    """Fetch a single user.

    Raises:
        NotFoundError: If the user does not exist.
    """
    return _user_response(users.require(user_id))


@router.put("/users/{user_id}/profile", response_model=HealthProfileResponse)
def save_profile(
    user_id: int,
    payload: HealthProfileRequest,
    users: UserRepository = Depends(get_user_repository),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    """Save (or wholesale replace) the user's onboarding answers.

    Raises:
        NotFoundError: If the user does not exist.
    """
    users.require(user_id)
    row = profiles.save_profile(user_id, payload)
    logger.info("Saved health profile for user %s", user_id)
    return _profile_response(user_id, payload, row.completed_at)


@router.get("/users/{user_id}/profile", response_model=HealthProfileResponse)
def get_profile(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    """Return the stored profile with today's derived conditions and phase.

    Raises:
        NotFoundError: If the user does not exist.
        ProfileRequiredError: If onboarding has not been completed.
    """
    users.require(user_id)
    payload = profiles.get_request(user_id)
    if payload is None:
        raise ProfileRequiredError(user_id)
    row = profiles.get_row(user_id)
    return _profile_response(user_id, payload, row.completed_at)
