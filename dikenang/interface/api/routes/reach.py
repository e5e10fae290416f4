"""Post reach routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from dikenang.application.usecase.reach import (
    AddReachRequest,
    AddReachUseCase,
    GetReachRequest,
    GetReachUseCase,
    ReachResponse,
)
from dikenang.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["reach"], route_class=DishkaRoute)


@router.post("/{post_id}/reach", response_model=ReachResponse)
async def add_reach(
    post_id: UUID,
    add_reach_use_case: FromDishka[AddReachUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReachResponse:
    """Record that the caller has seen a post.

    Requires authentication. Each user is counted once per post.

    Args:
        post_id: Post UUID
        add_reach_use_case: Add reach use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Reach count after the call

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to record reach",
        )

    try:
        request = AddReachRequest(post_id=str(post_id), user_id=user_id)
        return await add_reach_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{post_id}/reach", response_model=ReachResponse)
async def get_reach(
    post_id: UUID,
    get_reach_use_case: FromDishka[GetReachUseCase],
) -> ReachResponse:
    """Get the number of distinct users who have seen a post."""
    return await get_reach_use_case.execute(GetReachRequest(post_id=str(post_id)))
