import logging
from typing import List, TypedDict

from simple_blog.errors import ValidationError
from simple_blog.repository import PostRepository
from simple_blog.store import Post

logger = logging.getLogger(__name__)


class SamplePost(TypedDict):
    title: str
    content: str
    published: bool


SAMPLE_POSTS: List[SamplePost] = [
    {
        "title": "Getting Started with FastAPI",
        "content": "FastAPI makes it quick to put a typed JSON API in front of a database.",
        "published": True,
    },
    {
        "title": "Introduction to Testing",
        "content": "Testing is crucial for maintaining code quality and preventing bugs in production.",
        "published": True,
    },
    {
        "title": "Draft: Future Features",
        "content": "This post contains ideas for future features that we might implement.",
        "published": False,
    },
    {
        "title": "End-to-End Testing",
        "content": "Driving the API the way a client would gives the broadest test coverage.",
        "published": True,
    },
]


async def seed_sample_posts(
    repo: PostRepository, samples: List[SamplePost] | None = None
) -> List[Post]:
    if samples is None:
        samples = SAMPLE_POSTS
    created: List[Post] = []
    for sample in samples:
        result = await repo.create(
            sample["title"], sample["content"], sample["published"]
        )
        if isinstance(result, ValidationError):
            # Only reachable with caller-supplied samples
            logger.warning(f"Skipped sample {sample['title']!r}: {result.full_messages()}")
            continue
        created.append(result)
    logger.info(f"Seeded {len(created)} sample posts")
    return created
