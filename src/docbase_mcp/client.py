"""Minimal async client for the DocBase REST API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import Settings
from .models import PostDetail, SearchResponse

BASE_URL = "https://api.docbase.io"

TModel = TypeVar("TModel", bound=BaseModel)

logger = logging.getLogger(__name__)


class DocBaseError(RuntimeError):
    """Base class for failures talking to DocBase."""


class DocBaseRequestError(DocBaseError):
    """Raised when DocBase answers with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"DocBase API request error: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class UnexpectedResponseError(DocBaseError):
    """Raised when a response body does not match the expected schema."""


class DocBaseClient:
    """Issue authenticated GET requests against one DocBase team."""

    def __init__(
        self,
        settings: Settings,
        *,
        base_url: str = BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._domain = settings.domain
        self._headers = {
            "X-DocBaseToken": settings.token,
            "Content-Type": "application/json",
        }
        self._transport = transport

    def _url(self, *parts: str) -> str:
        return "/".join([self._base_url, "teams", self._domain, *parts])

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET *url* and return the decoded JSON body."""

        async with httpx.AsyncClient(
            headers=self._headers, transport=self._transport
        ) as client:
            try:
                response = await client.get(url, params=params)
            except httpx.HTTPError as exc:
                raise DocBaseError(f"DocBase API request failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "DocBase request to %s failed with %s", url, response.status_code
            )
            raise DocBaseRequestError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedResponseError("DocBase returned a non-JSON body") from exc

    async def search_posts(
        self, query: str, page: int | None = None, per_page: int | None = None
    ) -> SearchResponse:
        params: dict[str, Any] = {"q": query}
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["per_page"] = per_page
        payload = await self.get_json(self._url("posts"), params)
        return _parse(SearchResponse, payload)

    async def get_post(self, post_id: str) -> PostDetail:
        payload = await self.get_json(self._url("posts", str(post_id)))
        return _parse(PostDetail, payload)


def _parse(model: type[TModel], payload: Any) -> TModel:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise UnexpectedResponseError(
            f"Unexpected {model.__name__} shape from DocBase: {exc.error_count()} "
            "validation error(s)"
        ) from exc
