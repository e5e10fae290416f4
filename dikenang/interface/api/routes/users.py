"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from dikenang.application.usecase.vote import (
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/votes", response_model=GetUserVotesResponse)
async def get_user_votes(
    user_id: UUID,
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
) -> GetUserVotesResponse:
    """Get the posts a user has upvoted and downvoted.

    Args:
        user_id: User UUID
        get_user_votes_use_case: Get user votes use case from DI

    Returns:
        Post IDs per kind, oldest vote first
    """
    request = GetUserVotesRequest(user_id=str(user_id))
    return await get_user_votes_use_case.execute(request)
