"""User API routes."""

from app.core.auth.dependencies import CurrentUser
from app.modules.users import router
from app.modules.users.schemas import UserResponse


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    description="Returns the currently authenticated user's profile and role.",
)
async def get_me(
    current_user: CurrentUser,
) -> UserResponse:
    """Get current user profile."""
    return UserResponse.model_validate(current_user)
