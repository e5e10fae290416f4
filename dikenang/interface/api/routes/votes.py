"""Vote routes."""

import logging
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from dikenang.application.usecase.vote import (
    AddVoteRequest,
    AddVoteUseCase,
    GetPostVotesRequest,
    GetPostVotesResponse,
    GetPostVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteCountResponse,
)
from dikenang.domain.service import JWTService
from dikenang.domain.value import VoteKind

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


def _require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Resolve the caller from the session cookie or fail with 401."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


async def _add_vote(
    use_case: AddVoteUseCase, post_id: UUID, user_id: str, kind: VoteKind
) -> VoteCountResponse:
    try:
        request = AddVoteRequest(post_id=str(post_id), user_id=user_id, kind=kind)
        return await use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


async def _remove_vote(
    use_case: RemoveVoteUseCase, post_id: UUID, user_id: str, kind: VoteKind
) -> VoteCountResponse:
    try:
        request = RemoveVoteRequest(post_id=str(post_id), user_id=user_id, kind=kind)
        return await use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/{post_id}/upvote", response_model=VoteCountResponse)
async def add_upvote(
    post_id: UUID,
    add_vote_use_case: FromDishka[AddVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCountResponse:
    """Upvote a post.

    Requires authentication. Upvoting twice is a no-op; upvoting a post the
    caller has downvoted is rejected with 409.

    Args:
        post_id: Post UUID
        add_vote_use_case: Add vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Upvote count after the call

    Raises:
        HTTPException: If not authenticated
    """
    user_id = _require_user_id(jwt_service, auth_token, "upvote")
    logger.info(f"Upvote on post {post_id} by {user_id}")
    return await _add_vote(add_vote_use_case, post_id, user_id, VoteKind.UPVOTE)


@router.delete("/{post_id}/upvote", response_model=VoteCountResponse)
async def remove_upvote(
    post_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCountResponse:
    """Withdraw an upvote. Requires authentication."""
    user_id = _require_user_id(jwt_service, auth_token, "remove an upvote")
    logger.info(f"Upvote removal on post {post_id} by {user_id}")
    return await _remove_vote(remove_vote_use_case, post_id, user_id, VoteKind.UPVOTE)


@router.post("/{post_id}/downvote", response_model=VoteCountResponse)
async def add_downvote(
    post_id: UUID,
    add_vote_use_case: FromDishka[AddVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCountResponse:
    """Downvote a post.

    Requires authentication. Downvoting twice is a no-op; downvoting a post
    the caller has upvoted is rejected with 409.
    """
    user_id = _require_user_id(jwt_service, auth_token, "downvote")
    logger.info(f"Downvote on post {post_id} by {user_id}")
    return await _add_vote(add_vote_use_case, post_id, user_id, VoteKind.DOWNVOTE)


@router.delete("/{post_id}/downvote", response_model=VoteCountResponse)
async def remove_downvote(
    post_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCountResponse:
    """Withdraw a downvote. Requires authentication."""
    user_id = _require_user_id(jwt_service, auth_token, "remove a downvote")
    logger.info(f"Downvote removal on post {post_id} by {user_id}")
    return await _remove_vote(
        remove_vote_use_case, post_id, user_id, VoteKind.DOWNVOTE
    )


@router.get("/{post_id}/votes", response_model=GetPostVotesResponse)
async def get_post_votes(
    post_id: UUID,
    get_post_votes_use_case: FromDishka[GetPostVotesUseCase],
) -> GetPostVotesResponse:
    """Get the current upvotes and downvotes of a post.

    Args:
        post_id: Post UUID
        get_post_votes_use_case: Get post votes use case from DI

    Returns:
        Both tallies with their voters, oldest vote first
    """
    request = GetPostVotesRequest(post_id=str(post_id))
    return await get_post_votes_use_case.execute(request)
