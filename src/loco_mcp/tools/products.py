"""Product tools for Loco."""

from typing import Annotated, Optional

from pydantic import Field

from ..constants import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from ..formatting import format_tool_response
from ..models.loco import Language
from ..runtime import get_active_service


def product_list(
    first: Annotated[int, Field(ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE, description="Count product to page")],
    after: Annotated[Optional[str], Field(description="Cursor for pagination")] = None,
    identifier: Annotated[
        Optional[str], Field(description="Filter by client ID (e.g. 'ABC-123', '1456', etc.)")
    ] = None,
) -> str:
    """List products with their translations, one page at a time.

    The response includes pageInfo with the total number of products, so
    first=1 is enough when only the count is needed. Pass pageInfo.endCursor
    as `after` to fetch the next page.
    """
    result = get_active_service().list_products(first, after=after, identifier=identifier)
    return format_tool_response(result)


def product_delete_translation(
    productIdentifier: Annotated[str, Field(description="Product client ID")],
    language: Annotated[
        Optional[Language],
        Field(description="Language for delete. If it is empty, it removes translations into all languages."),
    ] = None,
) -> str:
    """Call this action to delete a product translation."""
    result = get_active_service().delete_product_translation(productIdentifier, language)
    return format_tool_response(result)
