from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Optional, TypeVar
from urllib.parse import parse_qs, urlencode, urlparse

from .constants import CURSOR_KEY
from .data_transfer_object.page import Page
from .pydantic_base import parse_payload

if TYPE_CHECKING:
    from .connection import Connection

Resource_T = TypeVar("Resource_T")


def cursor_from_next_url(next_url: Optional[str]) -> Optional[str]:
    """Extracts the ``cursor`` query parameter of a page's ``next`` URL."""
    if not next_url:
        return None
    values = parse_qs(urlparse(next_url).query).get(CURSOR_KEY)
    if not values:
        return None
    return values[0]


def paginate_generator(
    connection: "Connection",
    route: str,
    from_json: Callable[[Dict[str, Any]], Resource_T],
) -> Iterator[Resource_T]:
    """Lazily walks a cursor-paginated list endpoint.

    ::

        for model in paginate_generator(client.connection, "/models", from_json):
            print(model.full_name)

    Each call starts from the first page. The next page is only requested once
    every item of the current one has been consumed. Items are yielded in the
    order the server returns them and any failed request ends the walk.

    Args:
        connection: Connection used for the page requests.
        route: Collection route, without query parameters.
        from_json: Builds one resource from one entry of ``results``.

    Yields:
        One resource per entry of every page's ``results``.
    """
    cursor = None
    while True:
        page_route = (
            f"{route}?{urlencode({CURSOR_KEY: cursor})}" if cursor else route
        )
        page = parse_payload(Page, connection.get(page_route))
        for attributes in page.results:
            yield from_json(attributes)
        cursor = cursor_from_next_url(page.next)
        if cursor is None:
            break
