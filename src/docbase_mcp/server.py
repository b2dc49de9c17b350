"""FastMCP server exposing DocBase memo tools over stdio."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar, cast

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .client import DocBaseClient
from .config import ConfigurationError, Settings, configure_logging, load_settings

TToolFunc = TypeVar("TToolFunc", bound=Callable[..., Any])

SERVER_VERSION = "1.0.0"
MAX_PER_PAGE = 100

logger = logging.getLogger(__name__)


def clamp_per_page(per_page: int | None) -> int | None:
    """Cap *per_page* at the API maximum, leaving smaller values untouched."""

    if per_page is not None and per_page > MAX_PER_PAGE:
        return MAX_PER_PAGE
    return per_page


@dataclass(slots=True)
class MemoService:
    """Business logic for the memo tools."""

    client: DocBaseClient

    async def search_memos(
        self, query: str, page: int | None = None, per_page: int | None = None
    ) -> dict[str, Any]:
        result = await self.client.search_posts(query, page, clamp_per_page(per_page))
        return result.project()

    async def get_memo_detail(self, memo_id: str) -> dict[str, Any]:
        memo = await self.client.get_post(memo_id)
        return memo.project()


def _render(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _tool_error(name: str, exc: Exception) -> ToolError:
    logger.error("Tool %s failed: %s", name, exc)
    return ToolError(str(exc) or "Unknown error occurred")


def create_server(
    settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> FastMCP:
    """Create a configured :class:`FastMCP` instance with the memo tools."""

    server = FastMCP(
        "docbase-mcp",
        version=SERVER_VERSION,
        instructions="Search DocBase memos and read their contents",
    )
    service = MemoService(DocBaseClient(settings, transport=transport))

    def tool(*args: Any, **kwargs: Any) -> Callable[[TToolFunc], TToolFunc]:
        decorator = server.tool(*args, **kwargs)
        return cast(Callable[[TToolFunc], TToolFunc], decorator)

    @tool(
        name="searchMemos",
        description="Search DocBase memos and return their titles, URLs and memo IDs",
    )
    async def search_memos(
        query: Annotated[str, Field(description="Search keywords")],
        page: Annotated[
            int | None, Field(description="Page number, starting at 1")
        ] = None,
        perPage: Annotated[  # noqa: N803 (public parameter name)
            int | None, Field(description="Results per page (max 100)")
        ] = None,
    ) -> str:
        try:
            return _render(await service.search_memos(query, page, perPage))
        except Exception as exc:
            raise _tool_error("searchMemos", exc) from exc

    @tool(
        name="getMemoDetail",
        description="Fetch the details of a single DocBase memo",
    )
    async def get_memo_detail(
        id: Annotated[str, Field(description="Memo ID")],  # noqa: A002
    ) -> str:
        try:
            return _render(await service.get_memo_detail(id))
        except Exception as exc:
            raise _tool_error("getMemoDetail", exc) from exc

    return server


def main() -> None:
    """Run the DocBase MCP server on stdio."""

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        server = create_server(settings)
        logger.info("DocBase MCP server running on stdio")
        server.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
