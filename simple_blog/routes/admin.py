# simple_blog/routes/admin.py
import logging

from fastapi import Depends
from fastapi.routing import APIRouter

from simple_blog.perf import time_async_function
from simple_blog.repository import PostRepository
from simple_blog.routes.posts import get_repository
from simple_blog.samples import seed_sample_posts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/seed", status_code=201)
@time_async_function
async def seed(repo: PostRepository = Depends(get_repository)) -> dict:
    """Loads the sample posts (three published, one draft)."""
    created = await seed_sample_posts(repo)
    return {"created": len(created)}


@router.delete("/posts")
async def clear_posts(repo: PostRepository = Depends(get_repository)) -> dict:
    """
    Deletes every post.
    Meant for resetting a dev or test database between runs.
    """
    removed = await repo.clear()
    logger.warning(f"Admin cleared all posts ({removed})")
    return {"deleted": removed}
