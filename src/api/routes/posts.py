"""Posts API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import SuccessResponse
from api.schemas.post import CommentCreate, PostCreate, PostResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """All posts, most recent first."""
    return [PostResponse.model_validate(post) for post in await service.get_all()]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: UUID,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse.model_validate(await service.get_by_id(post_id))


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={400: {"description": "Validation failed"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a post authored by the caller."""
    post = await service.create(
        user_id=user.id,
        text=body.text,
        name=body.name or user.name,
        avatar=body.avatar or user.avatar,
    )
    return PostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    response_model=SuccessResponse,
    summary="Delete a post",
    responses={
        401: {"description": "Caller is not the post's author"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> SuccessResponse:
    await service.delete(post_id, user.id)
    return SuccessResponse(success=True)


@router.post(
    "/like/{post_id}",
    response_model=PostResponse,
    summary="Like a post",
    responses={
        400: {"description": "Already liked"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse.model_validate(await service.like(post_id, user.id))


@router.post(
    "/unlike/{post_id}",
    response_model=PostResponse,
    summary="Unlike a post",
    responses={
        400: {"description": "Not liked yet"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse.model_validate(await service.unlike(post_id, user.id))


@router.post(
    "/comment/{post_id}",
    response_model=PostResponse,
    summary="Comment on a post",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: UUID,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.add_comment(
        post_id=post_id,
        user_id=user.id,
        text=body.text,
        name=body.name or user.name,
        avatar=body.avatar or user.avatar,
    )
    return PostResponse.model_validate(post)


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=PostResponse,
    summary="Delete a comment",
    responses={
        401: {"description": "Caller wrote neither the comment nor the post"},
        404: {"description": "Post or comment not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_comment(
    request: Request,
    post_id: UUID,
    comment_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse.model_validate(
        await service.delete_comment(post_id, comment_id, user.id)
    )
