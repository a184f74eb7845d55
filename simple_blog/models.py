# --- Pydantic Models ---
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PostIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    content: str
    published: bool = False


class PostPatch(BaseModel):
    """Only the keys the client sends are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    content: str | None = None
    published: bool | None = None


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    published: bool
    created_at: datetime
    updated_at: datetime


class PostNotice(BaseModel):
    notice: str
    post: PostOut | None = None


class PostCounts(BaseModel):
    published: int
    drafts: int
    all: int
