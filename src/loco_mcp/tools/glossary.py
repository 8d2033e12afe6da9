"""Glossary tools for Loco."""

from typing import Annotated

from pydantic import Field

from ..formatting import format_tool_response
from ..models.loco import Language
from ..runtime import get_active_service


def glossary_item_create_or_update(
    languageFrom: Annotated[Language, Field(description="Language of the source text")],
    textSource: Annotated[str, Field(description="Source text")],
    languageTo: Annotated[Language, Field(description="Language of the target text")],
    textTarget: Annotated[str, Field(description="Translation of the source text")],
) -> str:
    """Create a glossary item, or update it when one already exists for the source text."""
    result = get_active_service().upsert_glossary_item(languageFrom, textSource, languageTo, textTarget)
    return format_tool_response(result)
