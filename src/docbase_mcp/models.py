"""Response schemas for the DocBase posts endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

PostId = int | str


class PostSummary(BaseModel):
    id: PostId
    title: str
    url: str


class SearchMeta(BaseModel):
    total: int
    # DocBase may answer with a page number or a full URL here
    next_page: int | str | None = None
    previous_page: int | str | None = None


class SearchResponse(BaseModel):
    """Body of ``GET /teams/{domain}/posts``."""

    posts: list[PostSummary]
    meta: SearchMeta

    def project(self) -> dict[str, Any]:
        """Reduce the search result to memo ids, titles and URLs."""

        return {
            "memos": [
                {"id": post.id, "title": post.title, "url": post.url}
                for post in self.posts
            ],
            "total": self.meta.total,
            "nextPage": self.meta.next_page,
            "previousPage": self.meta.previous_page,
        }


class Tag(BaseModel):
    name: str


class Group(BaseModel):
    name: str


class User(BaseModel):
    name: str


class PostDetail(BaseModel):
    """Body of ``GET /teams/{domain}/posts/{id}``."""

    id: PostId
    title: str
    body: str
    url: str
    created_at: str
    updated_at: str
    tags: list[Tag]
    user: User
    groups: list[Group]

    def project(self) -> dict[str, Any]:
        """Flatten nested tag, group and user objects to their names."""

        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "url": self.url,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "tags": [tag.name for tag in self.tags],
            "user": self.user.name,
            "groups": [group.name for group in self.groups],
        }
