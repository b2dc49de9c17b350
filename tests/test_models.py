import pytest
from pydantic import ValidationError

from docbase_mcp.models import PostDetail, SearchResponse


def test_search_projection_passes_url_style_paging_through():
    response = SearchResponse.model_validate(
        {
            "posts": [{"id": 1, "title": "One", "url": "https://acme.docbase.io/posts/1"}],
            "meta": {
                "total": 30,
                "next_page": "https://api.docbase.io/teams/acme/posts?page=2",
                "previous_page": None,
            },
        }
    )

    projected = response.project()
    assert projected["nextPage"] == "https://api.docbase.io/teams/acme/posts?page=2"
    assert projected["previousPage"] is None
    assert projected["memos"][0]["title"] == "One"


def test_detail_requires_user():
    with pytest.raises(ValidationError):
        PostDetail.model_validate(
            {
                "id": 1,
                "title": "t",
                "body": "b",
                "url": "u",
                "created_at": "c",
                "updated_at": "u",
                "tags": [],
                "groups": [],
            }
        )
