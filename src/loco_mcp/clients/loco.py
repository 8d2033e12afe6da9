"""HTTP transport for the Loco GraphQL API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .. import __version__
from ..config import LocoSettings, mask_token
from ..exceptions import TransportError
from ..graphql import GraphQLDocument


logger = logging.getLogger(__name__)


def _auth_headers(auth_token: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {auth_token}",
        "Content-Type": "application/json",
        "User-Agent": f"Loco-MCP-Server/{__version__}",
    }


def execute_loco_query(
    graphql_url: str,
    *,
    document: GraphQLDocument,
    auth_token: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """POST a GraphQL document and return the parsed JSON body.

    Raises:
        TransportError: On a non-2xx status, a network failure or a body that
            is not valid JSON
    """
    logger.debug(
        "Sending %s %s to %s (token %s)",
        document.operation_type,
        document.operation,
        graphql_url,
        mask_token(auth_token),
    )

    client = session or requests
    try:
        response = client.post(
            graphql_url,
            json=document.to_payload(),
            headers=_auth_headers(auth_token),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.error("Loco request for %s failed: %s", document.operation, exc)
        raise TransportError(f"Error making Loco GraphQL request, error: {exc}") from exc

    if not response.ok:
        logger.error("Loco GraphQL request failed with status %s", response.status_code)
        logger.debug("Response body: %s", response.text[:500])
        raise TransportError(f"HTTP error! status: {response.status_code}", status_code=response.status_code)

    try:
        body = response.json()
    except ValueError as exc:
        logger.error("Loco returned a non-JSON body for %s: %s", document.operation, exc)
        raise TransportError(f"Error making Loco GraphQL request, error: {exc}") from exc

    if not isinstance(body, dict):
        raise TransportError(
            f"Error making Loco GraphQL request, error: unexpected response type {type(body).__name__}"
        )

    if body.get("errors"):
        logger.warning("GraphQL errors returned for %s: %s", document.operation, body["errors"])

    return body


class LocoClient:
    """Sends GraphQL documents to the configured Loco endpoint.

    The client holds no per-request state; one instance is shared by all
    tool calls for the lifetime of the process.
    """

    def __init__(self, settings: LocoSettings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.session = session

    def send(self, document: GraphQLDocument) -> Dict[str, Any]:
        return execute_loco_query(
            self.settings.api_base,
            document=document,
            auth_token=self.settings.api_token,
            timeout=self.settings.timeout,
            session=self.session,
        )
