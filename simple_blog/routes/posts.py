# simple_blog/routes/posts.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from simple_blog.errors import NotFoundError, ValidationError
from simple_blog.models import PostCounts, PostIn, PostNotice, PostOut, PostPatch
from simple_blog.perf import time_async_function
from simple_blog.repository import PostRepository
from simple_blog.store import Post, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])

CREATED = "Post was successfully created."
UPDATED = "Post was successfully updated."
DESTROYED = "Post was successfully destroyed."


async def get_repository(
    session: AsyncSession = Depends(get_session),
) -> PostRepository:
    return PostRepository(session)


def ensure_post(result: Post | ValidationError | NotFoundError) -> Post:
    """Turns repository failures into HTTP errors"""
    if isinstance(result, NotFoundError):
        raise HTTPException(404, result.message)
    if isinstance(result, ValidationError):
        raise HTTPException(
            422, {"errors": result.errors, "messages": result.full_messages()}
        )
    return result


@router.get("", response_model=list[PostOut])
async def list_published(repo: PostRepository = Depends(get_repository)):
    """The index only shows published posts."""
    return await repo.published()


@router.get("/drafts", response_model=list[PostOut])
async def list_drafts(repo: PostRepository = Depends(get_repository)):
    return await repo.drafts()


@router.get("/all", response_model=list[PostOut])
async def list_all(repo: PostRepository = Depends(get_repository)):
    return await repo.all()


@router.get("/counts", response_model=PostCounts)
async def get_counts(repo: PostRepository = Depends(get_repository)) -> dict:
    return await repo.counts()


@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: int, repo: PostRepository = Depends(get_repository)):
    return ensure_post(await repo.get(post_id))


@router.post("", response_model=PostNotice, status_code=201)
@time_async_function
async def create_post(
    payload: PostIn, repo: PostRepository = Depends(get_repository)
) -> dict:
    post = ensure_post(
        await repo.create(payload.title, payload.content, payload.published)
    )
    return {"notice": CREATED, "post": PostOut.model_validate(post)}


@router.patch("/{post_id}", response_model=PostNotice)
@time_async_function
async def update_post(
    post_id: int,
    payload: PostPatch,
    repo: PostRepository = Depends(get_repository),
) -> dict:
    fields = payload.model_dump(exclude_unset=True)
    post = ensure_post(await repo.update(post_id, fields))
    return {"notice": UPDATED, "post": PostOut.model_validate(post)}


@router.delete("/{post_id}", response_model=PostNotice)
async def delete_post(
    post_id: int, repo: PostRepository = Depends(get_repository)
) -> dict:
    missing = await repo.delete(post_id)
    if missing is not None:
        raise HTTPException(404, missing.message)
    return {"notice": DESTROYED}
