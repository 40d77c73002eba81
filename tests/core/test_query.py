from typing import Optional

import httpx
from pydantic import Field

from clockify_connector.core.query import PaginationParams, QueryAppender, QueryParams


class TimeEntryFilter(QueryParams):
    description: Optional[str]  = None
    hydrated: Optional[bool]    = None
    in_progress: Optional[bool] = Field(None, alias="in-progress")


def test_pagination_params_use_api_names():
    url = PaginationParams(page=2, page_size=50).append_to_query(httpx.URL("https://api.clockify.test/projects"))

    assert url.params["page"] == "2"
    assert url.params["page-size"] == "50"


def test_none_fields_are_skipped():
    base = httpx.URL("https://api.clockify.test/projects")

    assert PaginationParams().append_to_query(base) == base
    assert "page-size" not in PaginationParams(page=1).append_to_query(base).params


def test_existing_query_is_kept():
    url = httpx.URL("https://api.clockify.test/projects?archived=false")
    url = PaginationParams(page=3).append_to_query(url)

    assert url.params["archived"] == "false"
    assert url.params["page"] == "3"


def test_bool_and_alias_formatting():
    url = TimeEntryFilter(hydrated=True, in_progress=False, description="daily").append_to_query(
        httpx.URL("https://api.clockify.test/time-entries")
    )

    assert url.params["hydrated"] == "true"
    assert url.params["in-progress"] == "false"
    assert url.params["description"] == "daily"


def test_query_appender_capability_check():
    assert isinstance(PaginationParams(), QueryAppender)
    assert isinstance(TimeEntryFilter(), QueryAppender)
    assert not isinstance({"page": 1}, QueryAppender)
    assert not isinstance(None, QueryAppender)
