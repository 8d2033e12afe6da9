"""Loco operations: build the GraphQL document, send it, classify the answer.

Each method performs exactly one request and always returns a
``NormalizedResult``. Transport failures, missing payloads and rejected
mutations are reported through ``error_kind`` instead of being raised.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union

from ..clients.loco import LocoClient
from ..constants import NO_PRODUCTS_MESSAGE, RETRIEVAL_FAILURE_MESSAGE
from ..exceptions import TransportError
from ..graphql import GraphQLDocument, GraphQLVariable, action_fields, mutation, page_info_fields, query
from ..models.loco import Language
from ..models.responses import ErrorKind, NormalizedResult

logger = logging.getLogger(__name__)

LanguageValue = Union[Language, str]

PRODUCT_NODE_FIELDS = [
    "productId",
    "code",
    "identifier",
    "status",
    {"translation": ["language", "title", "description"]},
]


def _language_value(language: Optional[LanguageValue]) -> Optional[str]:
    if isinstance(language, Language):
        return language.value
    return language


def build_products_query(first: int, after: Optional[str] = None, identifier: Any = None) -> GraphQLDocument:
    variables = [GraphQLVariable("first", first, "Int", required=True)]
    if after is not None:
        variables.append(GraphQLVariable("after", after, "String"))
    if identifier is not None:
        variables.append(GraphQLVariable("identifier", str(identifier), "String"))

    return query(
        "products",
        fields=[{"edges": [{"node": PRODUCT_NODE_FIELDS}], "pageInfo": page_info_fields()}],
        variables=variables,
    )


def build_product_translation_delete(
    product_identifier: str, language: Optional[LanguageValue] = None
) -> GraphQLDocument:
    return mutation(
        "productTranslationDelete",
        fields=action_fields(),
        variables=[
            GraphQLVariable("language", _language_value(language), "LanguageEnum"),
            GraphQLVariable("productIdentifier", product_identifier, "String"),
        ],
    )


def build_glossary_item_create_or_update(
    language_from: LanguageValue,
    text_source: str,
    language_to: LanguageValue,
    text_target: str,
) -> GraphQLDocument:
    item = {
        "languageFrom": _language_value(language_from),
        "textSource": text_source,
        "languageTo": _language_value(language_to),
        "textTarget": text_target,
    }
    return mutation(
        "glossaryItemCreateOrUpdate",
        fields=[{"glossaries": ["glossaryId"]}, {"errors": ["code", "message"]}],
        variables=[GraphQLVariable("input", [item], "GlossaryItemInput", required=True, is_list=True)],
    )


def _operation_payload(response: Dict[str, Any], operation: str) -> Any:
    data = response.get("data")
    if not isinstance(data, dict):
        return None
    return data.get(operation)


class LocoService:
    """Maps Loco GraphQL operations onto ``NormalizedResult`` values.

    Payloads are classified as received: only the fields that decide the
    outcome are read, everything else is passed through untouched.
    """

    def __init__(self, client: LocoClient) -> None:
        self.client = client

    def _send(self, document: GraphQLDocument) -> Union[Dict[str, Any], NormalizedResult]:
        try:
            return self.client.send(document)
        except TransportError as exc:
            return NormalizedResult.failure(ErrorKind.TRANSPORT, str(exc))

    def list_products(
        self,
        first: int,
        after: Optional[str] = None,
        identifier: Any = None,
    ) -> NormalizedResult:
        """Fetch one page of products.

        Args:
            first: Page size
            after: ``pageInfo.endCursor`` of the previous page, passed verbatim
            identifier: Client-side product identifier filter

        Returns:
            NormalizedResult whose data is ``{edges, pageInfo}`` as returned
            by Loco, or ``[]`` when the page is empty
        """
        response = self._send(build_products_query(first, after, identifier))
        if isinstance(response, NormalizedResult):
            return response

        products = _operation_payload(response, "products")
        if not isinstance(products, dict) or not products:
            return NormalizedResult.failure(ErrorKind.NOT_FOUND, RETRIEVAL_FAILURE_MESSAGE)

        edges = products.get("edges")
        if edges is None:
            return NormalizedResult.failure(ErrorKind.NOT_FOUND, RETRIEVAL_FAILURE_MESSAGE)
        if len(edges) == 0:
            return NormalizedResult.ok(NO_PRODUCTS_MESSAGE, [])

        page_info = products.get("pageInfo") or {}
        logger.info(
            "Fetched %d of %s products (has next page: %s)",
            len(edges),
            page_info.get("total"),
            page_info.get("hasNextPage"),
        )
        return NormalizedResult.ok(f"Count product: {len(edges)}", products)

    def delete_product_translation(
        self,
        product_identifier: str,
        language: Optional[LanguageValue] = None,
    ) -> NormalizedResult:
        """Delete a product translation; ``language=None`` targets all languages."""
        response = self._send(build_product_translation_delete(product_identifier, language))
        if isinstance(response, NormalizedResult):
            return response

        action = _operation_payload(response, "productTranslationDelete")
        # Only the status gates success; the errors list is passed through untouched.
        if not isinstance(action, dict) or not action.get("status"):
            return NormalizedResult.failure(ErrorKind.NOT_FOUND, RETRIEVAL_FAILURE_MESSAGE)

        if action.get("errors"):
            logger.warning(
                "productTranslationDelete returned status %r with errors: %s", action["status"], action["errors"]
            )

        return NormalizedResult.ok(f"Delete translation status: {action['status']}", action)

    def upsert_glossary_item(
        self,
        language_from: LanguageValue,
        text_source: str,
        language_to: LanguageValue,
        text_target: str,
    ) -> NormalizedResult:
        """Create a glossary entry or update the existing one for the same source text."""
        document = build_glossary_item_create_or_update(language_from, text_source, language_to, text_target)
        response = self._send(document)
        if isinstance(response, NormalizedResult):
            return response

        payload = _operation_payload(response, "glossaryItemCreateOrUpdate")
        if not isinstance(payload, dict):
            return NormalizedResult.failure(ErrorKind.NOT_FOUND, RETRIEVAL_FAILURE_MESSAGE)

        # A null errors list means the same as an empty one
        data = {**payload, "errors": payload.get("errors") or []}
        if data["errors"]:
            logger.warning("glossaryItemCreateOrUpdate rejected: %s", data["errors"])
            return NormalizedResult.failure(ErrorKind.REMOTE_REJECTED, RETRIEVAL_FAILURE_MESSAGE, data)

        return NormalizedResult.ok(json.dumps(data), data)
