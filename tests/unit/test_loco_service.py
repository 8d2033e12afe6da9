"""LocoService classification tests against a stubbed transport."""

from __future__ import annotations

import json

import pytest
import requests

from loco_mcp.constants import NO_PRODUCTS_MESSAGE, RETRIEVAL_FAILURE_MESSAGE
from loco_mcp.models import ErrorKind, Language

from tests.helpers import make_response, products_body


PRODUCT_EDGE = {
    "node": {
        "productId": "1",
        "code": "SKU-1",
        "identifier": "ABC-123",
        "status": "ACTIVE",
        "translation": [{"language": "cs_CZ", "title": "Židle", "description": "Dřevěná židle"}],
    }
}


def sent_payload(session):
    session.post.assert_called_once()
    return session.post.call_args.kwargs["json"]


# ---------------------------------------------------------------------------
# list_products
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("first", [1, 37, 100])
def test_list_products_sends_first_once(service, session, first):
    session.post.return_value = make_response(products_body([PRODUCT_EDGE]))

    service.list_products(first)

    payload = sent_payload(session)
    assert payload["variables"] == {"first": first}
    assert "$first: Int!" in payload["query"]
    assert "products(first: $first)" in payload["query"]


def test_list_products_forwards_cursor_and_stringified_identifier(service, session):
    session.post.return_value = make_response(products_body([PRODUCT_EDGE]))

    service.list_products(10, after="YXJyYXljb25uZWN0aW9uOjk=", identifier=1456)

    variables = sent_payload(session)["variables"]
    assert variables == {"first": 10, "after": "YXJyYXljb25uZWN0aW9uOjk=", "identifier": "1456"}


def test_list_products_requests_translation_fields(service, session):
    session.post.return_value = make_response(products_body([PRODUCT_EDGE]))

    service.list_products(1)

    text = sent_payload(session)["query"]
    for field in ("productId", "code", "identifier", "status", "language", "title", "description", "endCursor"):
        assert field in text


def test_list_products_end_to_end_single_product(service, session):
    body = {
        "data": {
            "products": {
                "edges": [PRODUCT_EDGE],
                "pageInfo": {"hasNextPage": False, "endCursor": None, "count": 1, "total": 1},
            }
        }
    }
    session.post.return_value = make_response(body)

    result = service.list_products(first=1)

    assert result.success is True
    assert result.message == "Count product: 1"
    assert len(result.data["edges"]) == 1
    assert result.data["pageInfo"] == body["data"]["products"]["pageInfo"]
    assert result.error_kind is None


def test_list_products_empty_page_is_success(service, session):
    # Empty results are not an error; a regression to an error flag is policy drift.
    session.post.return_value = make_response(products_body([]))

    result = service.list_products(5)

    assert result.success is True
    assert result.message == NO_PRODUCTS_MESSAGE
    assert result.data == []


@pytest.mark.parametrize(
    "body",
    [
        {"data": {"products": None}},
        {"data": {}},
        {"data": None, "errors": [{"message": "Unauthorized"}]},
        {},
    ],
)
def test_list_products_missing_products_field(service, session, body):
    session.post.return_value = make_response(body)

    result = service.list_products(5)

    assert result.success is False
    assert result.message == RETRIEVAL_FAILURE_MESSAGE
    assert result.data is None
    assert result.error_kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "products",
    [
        {"edges": [PRODUCT_EDGE]},
        {"edges": [PRODUCT_EDGE], "pageInfo": None},
        {"edges": [PRODUCT_EDGE], "pageInfo": {"hasNextPage": False, "endCursor": None, "count": None, "total": None}},
    ],
)
def test_list_products_passes_page_info_through_as_received(service, session, products):
    session.post.return_value = make_response({"data": {"products": products}})

    result = service.list_products(5)

    assert result.success is True
    assert result.message == "Count product: 1"
    assert result.data == products


def test_list_products_keeps_cursor_verbatim(service, session):
    session.post.return_value = make_response(
        products_body([PRODUCT_EDGE], hasNextPage=True, endCursor="opaque==", total=40)
    )

    result = service.list_products(1)

    assert result.data["pageInfo"] == {"hasNextPage": True, "endCursor": "opaque==", "count": 1, "total": 40}


# ---------------------------------------------------------------------------
# Transport failures, shared by every operation
# ---------------------------------------------------------------------------


OPERATIONS = {
    "list_products": lambda service: service.list_products(10),
    "delete_product_translation": lambda service: service.delete_product_translation("ABC-123", Language.CS_CZ),
    "upsert_glossary_item": lambda service: service.upsert_glossary_item(
        Language.CS_CZ, "židle", Language.EN_US, "chair"
    ),
}


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
def test_http_error_is_reported_not_raised(service, session, operation):
    session.post.return_value = make_response({"error": "boom"}, status_code=502)

    result = OPERATIONS[operation](service)

    assert result.success is False
    assert "502" in result.message
    assert result.data is None
    assert result.error_kind == ErrorKind.TRANSPORT


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
def test_network_error_is_reported_not_raised(service, session, operation):
    session.post.side_effect = requests.Timeout("read timed out")

    result = OPERATIONS[operation](service)

    assert result.success is False
    assert "read timed out" in result.message
    assert result.error_kind == ErrorKind.TRANSPORT


# ---------------------------------------------------------------------------
# delete_product_translation
# ---------------------------------------------------------------------------


def test_delete_translation_success(service, session):
    action = {"status": "OK", "errors": []}
    session.post.return_value = make_response({"data": {"productTranslationDelete": action}})

    result = service.delete_product_translation("ABC-123", Language.SK_SK)

    assert result.success is True
    assert result.message == "Delete translation status: OK"
    assert result.data == action
    payload = sent_payload(session)
    assert payload["variables"] == {"language": "sk_SK", "productIdentifier": "ABC-123"}
    assert "$language: LanguageEnum" in payload["query"]


def test_delete_translation_without_language_sends_explicit_null(service, session):
    session.post.return_value = make_response({"data": {"productTranslationDelete": {"status": "OK", "errors": []}}})

    service.delete_product_translation("ABC-123")

    variables = sent_payload(session)["variables"]
    assert "language" in variables
    assert variables["language"] is None


def test_delete_translation_accepts_plain_language_string(service, session):
    session.post.return_value = make_response({"data": {"productTranslationDelete": {"status": "OK", "errors": []}}})

    service.delete_product_translation("ABC-123", "pl_PL")

    assert sent_payload(session)["variables"]["language"] == "pl_PL"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "", "errors": []},
        {"status": None, "errors": [{"code": "NOT_FOUND", "message": "Product not found"}]},
        None,
    ],
)
def test_delete_translation_without_status_fails(service, session, payload):
    session.post.return_value = make_response({"data": {"productTranslationDelete": payload}})

    result = service.delete_product_translation("ABC-123")

    assert result.success is False
    assert result.message == RETRIEVAL_FAILURE_MESSAGE
    assert result.error_kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "action",
    [
        {"status": "OK", "errors": None},
        {"status": "OK", "errors": [{"code": None, "message": "warn"}]},
        {"status": "OK"},
    ],
)
def test_delete_translation_tolerates_null_errors(service, session, action):
    session.post.return_value = make_response({"data": {"productTranslationDelete": action}})

    result = service.delete_product_translation("ABC-123")

    assert result.success is True
    assert result.message == "Delete translation status: OK"
    assert result.data == action


def test_delete_translation_status_alone_gates_success(service, session):
    action = {"status": "PARTIAL", "errors": [{"code": "LOCKED", "message": "Translation is locked"}]}
    session.post.return_value = make_response({"data": {"productTranslationDelete": action}})

    result = service.delete_product_translation("ABC-123")

    assert result.success is True
    assert result.data["errors"] == action["errors"]


# ---------------------------------------------------------------------------
# upsert_glossary_item
# ---------------------------------------------------------------------------


def test_upsert_glossary_item_success(service, session):
    remote = {"glossaries": [{"glossaryId": "g-1"}], "errors": []}
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": remote}})

    result = service.upsert_glossary_item(Language.CS_CZ, "židle", Language.EN_US, "chair")

    assert result.success is True
    assert result.data == remote
    assert json.loads(result.message) == remote

    payload = sent_payload(session)
    assert "$input: [GlossaryItemInput!]!" in payload["query"]
    assert payload["variables"] == {
        "input": [{"languageFrom": "cs_CZ", "textSource": "židle", "languageTo": "en_US", "textTarget": "chair"}]
    }


@pytest.mark.parametrize("errors", [None, []])
def test_upsert_glossary_item_null_errors_is_success(service, session, errors):
    remote = {"glossaries": [{"glossaryId": "g"}], "errors": errors}
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": remote}})

    result = service.upsert_glossary_item(Language.CS_CZ, "stůl", Language.EN_US, "table")

    assert result.success is True
    assert result.error_kind is None
    assert result.data == {"glossaries": [{"glossaryId": "g"}], "errors": []}


def test_upsert_glossary_item_rejection_with_null_fields(service, session):
    remote = {"glossaries": None, "errors": [{"code": None, "message": "Rejected"}]}
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": remote}})

    result = service.upsert_glossary_item(Language.CS_CZ, "stůl", Language.EN_US, "table")

    assert result.success is False
    assert result.error_kind == ErrorKind.REMOTE_REJECTED
    assert result.data == remote


def test_upsert_glossary_item_rejected_keeps_errors_in_data(service, session):
    remote = {"glossaries": [], "errors": [{"code": "INVALID_LANGUAGE", "message": "Unsupported pair"}]}
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": remote}})

    result = service.upsert_glossary_item(Language.CS_CZ, "židle", Language.CS_CZ, "židle")

    assert result.success is False
    assert result.message == RETRIEVAL_FAILURE_MESSAGE
    assert result.error_kind == ErrorKind.REMOTE_REJECTED
    assert result.data["errors"][0]["code"] == "INVALID_LANGUAGE"


def test_upsert_glossary_item_missing_payload(service, session):
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": None}})

    result = service.upsert_glossary_item(Language.CS_CZ, "a", Language.EN_US, "b")

    assert result.success is False
    assert result.error_kind == ErrorKind.NOT_FOUND


def test_upsert_glossary_item_is_not_deduplicated(service, session):
    remote = {"glossaries": [{"glossaryId": 7}], "errors": []}
    session.post.return_value = make_response({"data": {"glossaryItemCreateOrUpdate": remote}})

    first = service.upsert_glossary_item(Language.DE_DE, "Stuhl", Language.EN_GB, "chair")
    second = service.upsert_glossary_item(Language.DE_DE, "Stuhl", Language.EN_GB, "chair")

    assert session.post.call_count == 2
    assert first.success is True and second.success is True
    assert first is not second
