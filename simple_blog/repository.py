"""
Post repository: validation and the published / drafts views over `posts`.

Every write validates first and only then touches the session, so a failed
create adds nothing and a failed update leaves the stored row as it was.
Expected failures come back as `ValidationError` / `NotFoundError` values.
"""

import logging
from typing import Any, Dict, List, Mapping

from sqlalchemy import ColumnElement, case, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from simple_blog.errors import (
    BLANK,
    UNKNOWN_ATTRIBUTE,
    NotFoundError,
    ValidationError,
)
from simple_blog.store import Post

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "content")
UPDATABLE_FIELDS = ("title", "content", "published")


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_post(values: Mapping[str, Any]) -> ValidationError | None:
    """Checks a complete set of post attributes, returns None when valid."""
    errors: Dict[str, List[str]] = {}
    for name in REQUIRED_FIELDS:
        if is_blank(values.get(name)):
            errors[name] = [BLANK]
    if not isinstance(values.get("published"), bool):
        errors["published"] = ["must be true or false"]
    return ValidationError(errors) if errors else None


# --- Scopes ---
def published_filter() -> ColumnElement[bool]:
    return Post.published.is_(True)


def drafts_filter() -> ColumnElement[bool]:
    return Post.published.is_(False)


class PostRepository:
    """CRUD over posts, bound to one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # --- Writes ---
    async def create(
        self, title: str, content: str, published: bool = False
    ) -> Post | ValidationError:
        values = {"title": title, "content": content, "published": published}
        invalid = validate_post(values)
        if invalid:
            logger.warning(f"Rejected new post: {invalid.full_messages()}")
            return invalid

        post = Post(**values)
        self.session.add(post)
        await self._commit()
        await self.session.refresh(post)
        logger.info(f"Created post {post.id} (published={post.published})")
        return post

    async def update(
        self, post_id: int, fields: Mapping[str, Any]
    ) -> Post | ValidationError | NotFoundError:
        post = await self.session.get(Post, post_id)
        if post is None:
            return NotFoundError(post_id)

        unknown = [name for name in fields if name not in UPDATABLE_FIELDS]
        if unknown:
            return ValidationError({name: [UNKNOWN_ATTRIBUTE] for name in unknown})

        merged = {name: getattr(post, name) for name in UPDATABLE_FIELDS}
        merged.update(fields)
        invalid = validate_post(merged)
        if invalid:
            logger.warning(f"Rejected update to post {post_id}: {invalid.full_messages()}")
            return invalid

        for name, value in fields.items():
            setattr(post, name, value)
        await self._commit()
        await self.session.refresh(post)
        logger.info(f"Updated post {post.id} fields={sorted(fields)}")
        return post

    async def delete(self, post_id: int) -> NotFoundError | None:
        post = await self.session.get(Post, post_id)
        if post is None:
            return NotFoundError(post_id)

        await self.session.delete(post)
        await self._commit()
        logger.info(f"Deleted post {post_id}")
        return None

    async def clear(self) -> int:
        """Removes every post. Returns how many were deleted."""
        result = await self.session.execute(delete(Post))
        await self._commit()
        removed = result.rowcount or 0
        logger.info(f"Cleared {removed} posts")
        return removed

    # --- Reads ---
    async def get(self, post_id: int) -> Post | NotFoundError:
        post = await self.session.get(Post, post_id)
        if post is None:
            return NotFoundError(post_id)
        return post

    async def published(self) -> List[Post]:
        return await self._list(published_filter())

    async def drafts(self) -> List[Post]:
        return await self._list(drafts_filter())

    async def all(self) -> List[Post]:
        return await self._list(None)

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Post))
        return result.scalar_one()

    async def counts(self) -> Dict[str, int]:
        """Published, draft and total counts in a single query."""
        query = select(
            func.sum(case((published_filter(), 1), else_=0)).label("published"),
            func.sum(case((drafts_filter(), 1), else_=0)).label("drafts"),
            func.count().label("total"),
        ).select_from(Post)
        row = (await self.session.execute(query)).one()
        return {
            "published": row.published or 0,
            "drafts": row.drafts or 0,
            "all": row.total or 0,
        }

    # --- Internals ---
    async def _list(self, criteria: ColumnElement[bool] | None) -> List[Post]:
        query = select(Post).order_by(Post.id)
        if criteria is not None:
            query = query.where(criteria)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Commit failed, rolling back")
            await self.session.rollback()
            raise
